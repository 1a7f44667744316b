"""
Lab test catalog endpoints
"""

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.api.crud import delete_or_404, update_or_404
from pathlab.core.exceptions import ConflictError, NotFoundError
from pathlab.db.session import get_db
from pathlab.models import Category, Component, LabTest
from pathlab.schemas.catalog import (
    LabTestCreatedResponse,
    LabTestIn,
    LabTestListResponse,
    LabTestOut,
    LabTestResponse,
    LabTestSummary,
)
from pathlab.schemas.common import Ack

logger = structlog.get_logger(__name__)
router = APIRouter()

DUPLICATE_TEST_MESSAGE = "Test name or code might already exist for this category."

# Lowest component id of each test, preselected by the report forms
default_component_id = (
    select(func.min(Component.component_id))
    .where(Component.test_id == LabTest.test_id)
    .correlate(LabTest)
    .scalar_subquery()
    .label("default_component_id")
)


async def _require_category(db: AsyncSession, category_id: int) -> None:
    if not await db.get(Category, category_id):
        raise NotFoundError("Category not found")


@router.get("", response_model=LabTestListResponse)
async def list_tests(db: AsyncSession = Depends(get_db)) -> LabTestListResponse:
    """List all tests with their default component"""
    stmt = select(
        LabTest.test_id,
        LabTest.test_name,
        LabTest.test_rate,
        LabTest.test_code,
        LabTest.method,
        default_component_id,
    ).order_by(LabTest.test_id)
    rows = (await db.execute(stmt)).mappings().all()
    return LabTestListResponse(tests=[LabTestSummary.model_validate(dict(row)) for row in rows])


@router.get("/{test_id}", response_model=LabTestResponse)
async def get_test(test_id: int, db: AsyncSession = Depends(get_db)) -> LabTestResponse:
    stmt = select(LabTest, default_component_id).where(LabTest.test_id == test_id)
    row = (await db.execute(stmt)).first()
    if row is None:
        raise NotFoundError("Test not found")

    test, component_id = row
    out = LabTestOut.model_validate(test)
    out.default_component_id = component_id
    return LabTestResponse(test=out)


@router.post("", response_model=LabTestCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_test(payload: LabTestIn, db: AsyncSession = Depends(get_db)) -> LabTestCreatedResponse:
    """
    Add Test
    Adds a priced test to a category; names and codes are unique per category
    """
    await _require_category(db, payload.category_id)

    test = LabTest(**payload.model_dump())
    db.add(test)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise ConflictError(DUPLICATE_TEST_MESSAGE) from e

    logger.info("Test added", test_id=test.test_id, category_id=test.category_id)
    return LabTestCreatedResponse(message="Test added successfully", testId=test.test_id)


@router.put("/{test_id}", response_model=Ack)
async def update_test(test_id: int, payload: LabTestIn, db: AsyncSession = Depends(get_db)) -> Ack:
    await _require_category(db, payload.category_id)
    await update_or_404(
        db,
        LabTest.test_id,
        test_id,
        payload.model_dump(),
        "Test",
        conflict_message=DUPLICATE_TEST_MESSAGE,
    )
    logger.info("Test updated", test_id=test_id)
    return Ack(message="Test updated successfully")


@router.delete("/{test_id}", response_model=Ack)
async def delete_test(test_id: int, db: AsyncSession = Depends(get_db)) -> Ack:
    await delete_or_404(
        db,
        LabTest.test_id,
        test_id,
        "Test",
        in_use_message="Test has related components or reports and cannot be deleted",
    )
    logger.info("Test deleted", test_id=test_id)
    return Ack(message="Test deleted successfully")
