"""
Test component endpoints
"""

from typing import Optional

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.core.exceptions import NotFoundError
from pathlab.db.session import get_db
from pathlab.models import Component, LabTest
from pathlab.schemas.catalog import ComponentCreatedResponse, ComponentIn, ComponentListResponse, ComponentOut

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("", response_model=ComponentListResponse)
async def list_components(
    test_id: Optional[int] = None,
    db: AsyncSession = Depends(get_db),
) -> ComponentListResponse:
    """List components, optionally only those of one test"""
    stmt = select(Component).order_by(Component.component_id)
    if test_id is not None:
        stmt = stmt.where(Component.test_id == test_id)
    components = (await db.scalars(stmt)).all()
    return ComponentListResponse(components=[ComponentOut.model_validate(c) for c in components])


@router.post("", response_model=ComponentCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_component(payload: ComponentIn, db: AsyncSession = Depends(get_db)) -> ComponentCreatedResponse:
    if not await db.get(LabTest, payload.test_id):
        raise NotFoundError("Test not found")

    component = Component(**payload.model_dump())
    db.add(component)
    await db.commit()

    logger.info("Component added", component_id=component.component_id, test_id=component.test_id)
    return ComponentCreatedResponse(message="Component added successfully", componentId=component.component_id)
