"""
Read side of reports: listings, detail expansion and the dashboard
"""

from datetime import date
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.models import Component, Doctor, LabTest, Patient, ReportItem
from pathlab.schemas.report import DashboardSummary, ReportDetailItem, ReportSummary, StatusCount

TEST_NAME_SEPARATOR = ", "


class ReportQueryService:
    """Aggregated views over report rows"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_reports(self, on_date: Optional[date] = None) -> List[ReportSummary]:
        """
        One entry per report id, newest first.

        ``status`` is the maximum of the item statuses and ``tests`` lists
        the distinct test names in the order the items were written.
        """
        summary_stmt = (
            select(
                ReportItem.report_id,
                Patient.patients_name,
                ReportItem.test_date,
                func.max(ReportItem.status).label("status"),
            )
            .select_from(ReportItem)
            .join(Patient, ReportItem.patient_id == Patient.patient_id)
            .join(LabTest, ReportItem.test_id == LabTest.test_id)
            .group_by(ReportItem.report_id, Patient.patients_name, ReportItem.test_date)
            .order_by(ReportItem.test_date.desc(), ReportItem.report_id.desc())
        )
        names_stmt = (
            select(ReportItem.report_id, LabTest.test_name)
            .select_from(ReportItem)
            .join(LabTest, ReportItem.test_id == LabTest.test_id)
            .order_by(ReportItem.id)
        )
        if on_date is not None:
            summary_stmt = summary_stmt.where(ReportItem.test_date == on_date)
            names_stmt = names_stmt.where(ReportItem.test_date == on_date)

        rows = (await self.db.execute(summary_stmt)).all()

        test_names: Dict[str, List[str]] = {}
        for report_id, test_name in (await self.db.execute(names_stmt)).all():
            names = test_names.setdefault(report_id, [])
            if test_name not in names:
                names.append(test_name)

        return [
            ReportSummary(
                report_id=row.report_id,
                patients_name=row.patients_name,
                test_date=row.test_date,
                status=row.status,
                tests=TEST_NAME_SEPARATOR.join(test_names.get(row.report_id, [])),
            )
            for row in rows
        ]

    async def list_reports_today(self, today: Optional[date] = None) -> List[ReportSummary]:
        """Reports dated on the server's current calendar day"""
        return await self.list_reports(on_date=today or date.today())

    async def get_report_detail(self, report_id: str) -> List[ReportDetailItem]:
        """Every row of a report with its lookup fields; empty if there is no such report"""
        stmt = (
            select(
                ReportItem.id.label("report_table_id"),
                ReportItem.report_id,
                ReportItem.patient_id,
                ReportItem.doctor_id,
                ReportItem.test_id,
                ReportItem.component_id,
                ReportItem.test_date,
                ReportItem.result,
                ReportItem.method,
                ReportItem.comments.label("report_item_comments"),
                ReportItem.status,
                Patient.patients_name,
                Patient.gender,
                Patient.age_years,
                Patient.age_months,
                Patient.age_days,
                LabTest.test_name,
                LabTest.test_rate,
                Component.component_name,
                Component.specimen,
                Component.test_unit,
                Component.reference_range,
                Doctor.doctor_name,
            )
            .select_from(ReportItem)
            .join(Patient, ReportItem.patient_id == Patient.patient_id)
            .join(LabTest, ReportItem.test_id == LabTest.test_id)
            .outerjoin(Component, ReportItem.component_id == Component.component_id)
            .join(Doctor, ReportItem.doctor_id == Doctor.doctor_id)
            .where(ReportItem.report_id == report_id)
            .order_by(ReportItem.id)
        )
        rows = (await self.db.execute(stmt)).mappings().all()
        return [ReportDetailItem.model_validate(dict(row)) for row in rows]

    async def dashboard_summary(self, today: Optional[date] = None) -> DashboardSummary:
        """Headline counts for the home screen"""
        today = today or date.today()

        total_reports = await self.db.scalar(select(func.count(func.distinct(ReportItem.report_id))))
        total_items = await self.db.scalar(select(func.count()).select_from(ReportItem))
        total_patients = await self.db.scalar(select(func.count()).select_from(Patient))
        total_doctors = await self.db.scalar(select(func.count()).select_from(Doctor))
        total_tests = await self.db.scalar(select(func.count()).select_from(LabTest))
        by_status = (
            await self.db.execute(
                select(ReportItem.status, func.count().label("count"))
                .group_by(ReportItem.status)
                .order_by(ReportItem.status)
            )
        ).all()
        recent_reports = await self.db.scalar(
            select(func.count(func.distinct(ReportItem.report_id))).where(ReportItem.test_date == today)
        )

        return DashboardSummary(
            totalReports=total_reports or 0,
            totalReportItems=total_items or 0,
            totalPatients=total_patients or 0,
            totalDoctors=total_doctors or 0,
            totalTests=total_tests or 0,
            reportsByStatus=[StatusCount(status=status, count=count) for status, count in by_status],
            recentReports=recent_reports or 0,
        )
