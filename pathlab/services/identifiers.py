"""
Human-readable identifiers for patients, doctors and reports
"""

import enum
import uuid

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute

from pathlab.core.exceptions import ConflictError


class IdentifierKind(str, enum.Enum):
    """Identifier prefix per entity"""
    PATIENT = "PAT"
    DOCTOR = "DOC"
    REPORT = "REP"


def generate_identifier(kind: IdentifierKind) -> str:
    """Return ``<PREFIX>-XXXXXX`` with six uppercase hex digits from a random UUID"""
    return f"{IdentifierKind(kind).value}-{uuid.uuid4().hex[:6].upper()}"


async def ensure_identifier_unused(
    session: AsyncSession,
    column: InstrumentedAttribute,
    value: str,
    label: str = "Record",
) -> None:
    """
    Raise ConflictError if ``value`` is already stored in ``column``.

    Best effort only: a concurrent insert can still win the race, in which
    case the store's key constraint rejects the second write.
    """
    taken = await session.scalar(select(exists().where(column == value)))
    if taken:
        raise ConflictError(f"{label} ID already exists")
