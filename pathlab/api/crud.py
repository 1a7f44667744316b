"""
Shared single-row write helpers for the CRUD endpoints
"""

from typing import Any, Dict

from sqlalchemy import delete, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from pathlab.core.exceptions import ConflictError, NotFoundError


async def update_or_404(
    db: AsyncSession,
    key: InstrumentedAttribute,
    key_value: Any,
    values: Dict[str, Any],
    label: str,
    conflict_message: str = "Conflicts with an existing record",
) -> None:
    """Update one row by primary key, NotFoundError if it does not exist"""
    try:
        result = await db.execute(update(key.class_).where(key == key_value).values(**values))
        if result.rowcount == 0:
            raise NotFoundError(f"{label} not found")
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise ConflictError(conflict_message) from e
    except NotFoundError:
        await db.rollback()
        raise


async def delete_or_404(
    db: AsyncSession,
    key: InstrumentedAttribute,
    key_value: Any,
    label: str,
    in_use_message: str,
) -> None:
    """Delete one row by primary key; 404 if missing, 409 if still referenced"""
    try:
        result = await db.execute(delete(key.class_).where(key == key_value))
        if result.rowcount == 0:
            raise NotFoundError(f"{label} not found")
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        raise ConflictError(in_use_message) from e
    except NotFoundError:
        await db.rollback()
        raise
