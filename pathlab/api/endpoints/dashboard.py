"""
Dashboard summary endpoint
"""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.db.session import get_db
from pathlab.schemas.report import DashboardResponse
from pathlab.services.report_queries import ReportQueryService

router = APIRouter()


@router.get("/dashboard-summary", response_model=DashboardResponse)
async def dashboard_summary(db: AsyncSession = Depends(get_db)) -> DashboardResponse:
    """Totals, report status breakdown and today's report count"""
    summary = await ReportQueryService(db).dashboard_summary()
    return DashboardResponse(summary=summary)
