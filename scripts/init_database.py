#!/usr/bin/env python3
"""
Database Initialization Script
Creates the PathLab schema and seeds a starter test catalog and an admin account
"""

import argparse
import asyncio
import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from sqlalchemy import func, select

from pathlab.core.config import settings
from pathlab.core.logging import configure_logging, get_logger
from pathlab.core.security import hash_password
from pathlab.db.session import Database, transaction
from pathlab.models import Category, Component, Doctor, LabTest, Patient, ReportItem, User

configure_logging()
logger = get_logger(__name__)


# category -> [(test name, code, rate, method, [(component, specimen, unit, range)])]
STARTER_CATALOG = {
    "Haematology": [
        ("Complete Blood Count", "CBC", 350, "Automated cell counter", [
            ("Haemoglobin", "Whole blood", "g/dL", "13.0 - 17.0"),
            ("Total Leucocyte Count", "Whole blood", "cells/cumm", "4000 - 11000"),
            ("Platelet Count", "Whole blood", "lakhs/cumm", "1.5 - 4.1"),
        ]),
        ("Erythrocyte Sedimentation Rate", "ESR", 120, "Westergren", [
            ("ESR", "Whole blood", "mm/hr", "0 - 20"),
        ]),
    ],
    "Biochemistry": [
        ("Blood Sugar Fasting", "FBS", 80, "GOD-POD", [
            ("Glucose Fasting", "Plasma", "mg/dL", "70 - 110"),
        ]),
        ("Lipid Profile", "LIPID", 600, "Enzymatic", [
            ("Total Cholesterol", "Serum", "mg/dL", "< 200"),
            ("Triglycerides", "Serum", "mg/dL", "< 150"),
            ("HDL Cholesterol", "Serum", "mg/dL", "> 40"),
        ]),
    ],
}


async def seed_catalog(database: Database) -> int:
    """Insert the starter catalog unless categories already exist"""
    async with database.session() as db:
        existing = await db.scalar(select(func.count()).select_from(Category))
        if existing:
            logger.info("Catalog already present, skipping", categories=existing)
            return 0

        created = 0
        async with transaction(db):
            for category_name, tests in STARTER_CATALOG.items():
                category = Category(category_name=category_name)
                for test_name, code, rate, method, components in tests:
                    test = LabTest(
                        test_name=test_name,
                        test_code=code,
                        test_rate=rate,
                        method=method,
                        report_heading=test_name.upper(),
                        category=category,
                    )
                    test.components = [
                        Component(
                            component_name=name,
                            specimen=specimen,
                            test_unit=unit,
                            reference_range=reference_range,
                        )
                        for name, specimen, unit, reference_range in components
                    ]
                    db.add(test)
                    created += 1
        logger.info("Seeded test catalog", tests=created)
        return created


async def seed_admin(database: Database, username: str, password: str) -> bool:
    """Create the admin account if the username is free"""
    async with database.session() as db:
        if await db.scalar(select(User.user_id).where(User.username == username)) is not None:
            logger.info("Admin user already exists", username=username)
            return False

        async with transaction(db):
            db.add(
                User(
                    username=username,
                    full_name="Lab Administrator",
                    password=hash_password(password),
                    role="admin",
                )
            )
        logger.info("Created admin user", username=username)
        return True


async def database_stats(database: Database) -> dict:
    """Row counts per table"""
    stats = {}
    async with database.session() as db:
        for model in (User, Patient, Doctor, Category, LabTest, Component, ReportItem):
            stats[model.__tablename__] = await db.scalar(select(func.count()).select_from(model))
    return stats


async def main():
    """Main function"""
    parser = argparse.ArgumentParser(description="Initialize the PathLab database")
    parser.add_argument("--no-seed", action="store_true", help="Only create tables")
    parser.add_argument("--admin-username", default="admin")
    parser.add_argument("--admin-password", default="admin123")
    args = parser.parse_args()

    database = Database(settings)
    try:
        await database.connect()
        await database.create_all()
        logger.info("Database tables created")

        if not args.no_seed:
            await seed_catalog(database)
            await seed_admin(database, args.admin_username, args.admin_password)

        stats = await database_stats(database)
        print("\nDatabase Statistics:")
        for table, count in stats.items():
            print(f"  {table}: {count} records")
    except Exception as e:
        logger.error("Database initialization failed", error=str(e))
        sys.exit(1)
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
