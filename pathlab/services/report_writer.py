"""
Report write transactions

A report is materialised as one ``report`` row per conducted test. Creating
or replacing a report writes the whole row set in a single transaction, and
deleting one removes the whole set the same way. On any failure nothing is
left behind.
"""

from typing import List

import structlog
from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.core.exceptions import NotFoundError, PathLabError, ValidationError, translate_db_error
from pathlab.db.session import transaction
from pathlab.models import ReportItem
from pathlab.schemas.report import ReportIn
from pathlab.services.identifiers import IdentifierKind, ensure_identifier_unused, generate_identifier

logger = structlog.get_logger(__name__)

DEFAULT_METHOD = "N/A"


def build_report_items(report_id: str, payload: ReportIn) -> List[ReportItem]:
    """Expand a report payload into its rows, applying the report-level fallbacks"""
    return [
        ReportItem(
            report_id=report_id,
            patient_id=payload.patient_id,
            doctor_id=payload.doctor_id,
            test_id=item.test_id,
            component_id=item.component_id,
            test_date=payload.test_date,
            result=item.result,
            method=item.method or DEFAULT_METHOD,
            comments=item.comments or payload.overall_comments,
            status=item.status or payload.status,
        )
        for item in payload.tests_conducted
    ]


def _check_payload(payload: ReportIn) -> None:
    missing = [
        name
        for name in ("patient_id", "doctor_id", "test_date", "status")
        if not getattr(payload, name)
    ]
    if missing or not payload.tests_conducted:
        raise ValidationError("Missing required report data or tests.")


class ReportWriteService:
    """Creates, replaces and deletes reports atomically"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create_report(self, payload: ReportIn) -> str:
        """
        Insert a new report and return its identifier.

        Every row of the report shares one freshly generated ``REP-`` id.
        """
        _check_payload(payload)
        report_id = generate_identifier(IdentifierKind.REPORT)

        try:
            async with transaction(self.db):
                await ensure_identifier_unused(self.db, ReportItem.report_id, report_id, "Report")
                items = build_report_items(report_id, payload)
                self.db.add_all(items)
                await self.db.flush()
        except PathLabError:
            raise
        except SQLAlchemyError as e:
            logger.error("Report creation rolled back", report_id=report_id, error=str(e))
            raise translate_db_error(e) from e

        logger.info(
            "Report created",
            report_id=report_id,
            patient_id=payload.patient_id,
            items=len(items),
        )
        return report_id

    async def replace_report(self, report_id: str, payload: ReportIn) -> int:
        """
        Swap the full row set of ``report_id`` for the rows in ``payload``.

        The delete matches zero or more rows; either way the new rows are
        written under the same identifier. Returns the number of rows written.
        """
        if not report_id or not report_id.strip():
            raise ValidationError("Report ID is required.")
        _check_payload(payload)

        try:
            async with transaction(self.db):
                result = await self.db.execute(
                    delete(ReportItem).where(ReportItem.report_id == report_id)
                )
                items = build_report_items(report_id, payload)
                self.db.add_all(items)
                await self.db.flush()
        except PathLabError:
            raise
        except SQLAlchemyError as e:
            logger.error("Report replacement rolled back", report_id=report_id, error=str(e))
            raise translate_db_error(e) from e

        logger.info(
            "Report replaced",
            report_id=report_id,
            removed=result.rowcount,
            items=len(items),
        )
        return len(items)

    async def delete_report(self, report_id: str) -> int:
        """Delete every row of ``report_id``; NotFoundError if there were none"""
        try:
            async with transaction(self.db):
                result = await self.db.execute(
                    delete(ReportItem).where(ReportItem.report_id == report_id)
                )
                if result.rowcount == 0:
                    raise NotFoundError("Report not found or already deleted")
        except PathLabError:
            raise
        except SQLAlchemyError as e:
            logger.error("Report deletion rolled back", report_id=report_id, error=str(e))
            raise translate_db_error(e) from e

        logger.info("Report deleted", report_id=report_id, items=result.rowcount)
        return result.rowcount
