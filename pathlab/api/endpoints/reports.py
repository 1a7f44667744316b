"""
Report API endpoints
Listings, detail expansion and the create/replace/delete workflow for reports
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.db.session import get_db
from pathlab.schemas.common import Ack
from pathlab.schemas.report import (
    ReportDetailResponse,
    ReportIn,
    ReportListResponse,
    ReportWriteResponse,
)
from pathlab.services.report_queries import ReportQueryService
from pathlab.services.report_writer import ReportWriteService

router = APIRouter()


@router.get("", response_model=ReportListResponse)
async def list_reports(db: AsyncSession = Depends(get_db)) -> ReportListResponse:
    """
    Report List
    One entry per report with its aggregate status and test names
    """
    reports = await ReportQueryService(db).list_reports()
    return ReportListResponse(reports=reports)


@router.get("/today", response_model=ReportListResponse)
async def list_reports_today(db: AsyncSession = Depends(get_db)) -> ReportListResponse:
    """Reports dated today"""
    reports = await ReportQueryService(db).list_reports_today()
    return ReportListResponse(reports=reports)


@router.get("/detail/{report_id}", response_model=ReportDetailResponse)
async def get_report_detail(report_id: str, db: AsyncSession = Depends(get_db)) -> ReportDetailResponse:
    """
    Report Detail
    Every row of the report; an unknown id yields an empty list
    """
    items = await ReportQueryService(db).get_report_detail(report_id)
    return ReportDetailResponse(reportItems=items)


@router.post("", response_model=ReportWriteResponse)
async def create_report(payload: ReportIn, db: AsyncSession = Depends(get_db)) -> ReportWriteResponse:
    """
    Add Report
    Writes one row per conducted test under a new report id, all or nothing
    """
    report_id = await ReportWriteService(db).create_report(payload)
    return ReportWriteResponse(message="Report added successfully", reportId=report_id)


@router.put("/{report_id}", response_model=ReportWriteResponse)
async def replace_report(
    report_id: str,
    payload: ReportIn,
    db: AsyncSession = Depends(get_db),
) -> ReportWriteResponse:
    """
    Update Report
    Replaces every row of the report with the submitted tests, all or nothing
    """
    await ReportWriteService(db).replace_report(report_id, payload)
    return ReportWriteResponse(message=f"Report {report_id} updated successfully", reportId=report_id)


@router.delete("/{report_id}", response_model=Ack)
async def delete_report(report_id: str, db: AsyncSession = Depends(get_db)) -> Ack:
    await ReportWriteService(db).delete_report(report_id)
    return Ack(message="Report deleted successfully")
