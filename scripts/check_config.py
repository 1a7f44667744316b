#!/usr/bin/env python3
"""
Configuration Check Script
Shows the settings resolved from the environment and .env file
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from sqlalchemy.engine import make_url

from pathlab.core.config import settings


def check_config():
    """Print the effective configuration"""
    print("Checking Configuration...")
    print("=" * 50)

    print(f"Project Name: {settings.PROJECT_NAME}")
    print(f"Version: {settings.VERSION}")
    print(f"Environment: {settings.ENVIRONMENT}")
    print(f"API Prefix: {settings.API_PREFIX}")
    print(f"Listen: {settings.SERVER_HOST}:{settings.SERVER_PORT}")
    print("")

    print("Database:")
    print(f"  URL: {make_url(settings.database_url_async).render_as_string(hide_password=True)}")
    print(f"  Pool Size: {settings.DB_POOL_SIZE} (+{settings.DB_MAX_OVERFLOW} overflow)")
    print(f"  Pool Timeout: {settings.DB_POOL_TIMEOUT}s")
    print(f"  SSL CA: {settings.DB_SSL_CA_PATH or 'Not set'}")
    print("")

    print("List Configurations:")
    print(f"  CORS Origins: {settings.BACKEND_CORS_ORIGINS}")
    print(f"  Allowed Hosts: {settings.ALLOWED_HOSTS}")
    print("")

    print("Helper Properties:")
    print(f"  Is Development: {settings.is_development}")
    print(f"  Is Production: {settings.is_production}")
    print(f"  Metrics Enabled: {settings.ENABLE_METRICS}")
    print("")

    try:
        settings.validate_required_settings()
    except ValueError as e:
        print(f"Warning: {e}")
        return False

    print("Configuration check completed!")
    return True


if __name__ == "__main__":
    sys.exit(0 if check_config() else 1)
