"""
Main API router that includes all endpoint routers
"""

from fastapi import APIRouter

from pathlab.api.endpoints import (
    auth,
    categories,
    components,
    dashboard,
    doctors,
    lab_tests,
    patients,
    reports,
)

api_router = APIRouter()

# Login, signup and /users live at the API root
api_router.include_router(auth.router, tags=["users"])

api_router.include_router(
    patients.router,
    prefix="/patients",
    tags=["patients"]
)

api_router.include_router(
    doctors.router,
    prefix="/doctors",
    tags=["doctors"]
)

api_router.include_router(
    lab_tests.router,
    prefix="/tests",
    tags=["tests"]
)

api_router.include_router(
    categories.router,
    prefix="/categories",
    tags=["categories"]
)

api_router.include_router(
    components.router,
    prefix="/components",
    tags=["components"]
)

api_router.include_router(
    reports.router,
    prefix="/reports",
    tags=["reports"]
)

api_router.include_router(dashboard.router, tags=["dashboard"])
