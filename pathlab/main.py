"""
Main FastAPI application entry point
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from prometheus_client import make_asgi_app

from pathlab.api.router import api_router
from pathlab.core.config import Settings, settings as default_settings
from pathlab.core.exceptions import register_exception_handlers
from pathlab.core.logging import configure_logging, log_requests
from pathlab.db.session import Database

# Configure structured logging
configure_logging()
logger = structlog.get_logger(__name__)


def create_application(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    """
    Create FastAPI application with all configurations

    ``database`` is opened by the lifespan when not supplied; a supplied
    handle is used as-is and left for the caller to dispose.
    """
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Application lifespan manager"""
        logger.info("Starting PathLab Backend", version=app.version)

        owned = app.state.database is None
        if owned:
            app.state.database = Database(settings)
        await app.state.database.connect()
        if owned:
            await app.state.database.create_all()
        logger.info("Database connections initialized", pool_size=settings.DB_POOL_SIZE)

        yield

        logger.info("Shutting down PathLab Backend")
        if owned:
            await app.state.database.dispose()
            app.state.database = None

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Pathology lab management API: patients, doctors, tests and diagnostic reports",
        version=settings.VERSION,
        openapi_url=f"{settings.API_PREFIX}/openapi.json" if not settings.is_production else None,
        docs_url=f"{settings.API_PREFIX}/docs" if not settings.is_production else None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.database = database

    app.middleware("http")(log_requests)

    # Security middleware
    if settings.ALLOWED_HOSTS and settings.ALLOWED_HOSTS != ["*"]:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=settings.ALLOWED_HOSTS
        )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "Accept", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
    )

    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    # Add Prometheus metrics endpoint
    if settings.ENABLE_METRICS:
        app.mount("/metrics", make_asgi_app())

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        database: Optional[Database] = app.state.database
        db_healthy = database is not None and await database.health_check()
        return {
            "status": "healthy" if db_healthy else "degraded",
            "service": "pathlab-backend",
            "version": app.version,
            "environment": settings.ENVIRONMENT,
            "database": "healthy" if db_healthy else "unhealthy",
        }

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "message": "PathLab Backend API",
            "version": app.version,
            "docs_url": app.docs_url,
        }

    return app


# Create the application instance
app = create_application()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "pathlab.main:app",
        host=default_settings.SERVER_HOST,
        port=default_settings.SERVER_PORT,
        reload=default_settings.is_development,
        log_config=None,  # Use our structured logging
    )
