"""
Test category endpoints
"""

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.core.exceptions import ConflictError
from pathlab.db.session import get_db
from pathlab.models import Category
from pathlab.schemas.catalog import CategoryCreatedResponse, CategoryIn, CategoryListResponse, CategoryOption

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("", response_model=CategoryListResponse)
async def list_categories(db: AsyncSession = Depends(get_db)) -> CategoryListResponse:
    """Categories as picker options, sorted by name"""
    categories = (await db.scalars(select(Category).order_by(Category.category_name))).all()
    return CategoryListResponse(
        categories=[CategoryOption(label=c.category_name, value=c.category_id) for c in categories]
    )


@router.post("", response_model=CategoryCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_category(payload: CategoryIn, db: AsyncSession = Depends(get_db)) -> CategoryCreatedResponse:
    category = Category(category_name=payload.category_name)
    db.add(category)
    try:
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise ConflictError("Category already exists") from e

    logger.info("Category added", category_id=category.category_id)
    return CategoryCreatedResponse(message="Category added successfully", categoryId=category.category_id)
