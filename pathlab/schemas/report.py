"""
Report request/response models
"""

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field

from pathlab.schemas.common import RequestModel, RequiredStr, ResponseModel


class ConductedTest(RequestModel):
    """One test (or component) result submitted with a report"""
    test_id: int
    component_id: Optional[int] = None
    result: Optional[str] = None
    method: Optional[str] = None
    comments: Optional[str] = None
    status: Optional[str] = None


class ReportIn(RequestModel):
    """Report create/replace payload"""
    patient_id: RequiredStr
    doctor_id: RequiredStr
    test_date: date
    overall_comments: Optional[str] = None
    status: RequiredStr = Field(..., description="Overall status, used where an item has none")
    tests_conducted: List[ConductedTest] = Field(..., min_length=1)


class ReportSummary(BaseModel):
    """One logical report in a listing"""
    report_id: str
    patients_name: str
    test_date: date
    status: Optional[str] = None
    tests: str


class ReportDetailItem(ResponseModel):
    """One report row with its patient, doctor, test and component fields"""
    report_table_id: int
    report_id: str
    patient_id: str
    doctor_id: str
    test_id: int
    component_id: Optional[int] = None
    test_date: date
    result: Optional[str] = None
    method: Optional[str] = None
    report_item_comments: Optional[str] = None
    status: Optional[str] = None
    patients_name: str
    gender: str
    age_years: Optional[int] = None
    age_months: Optional[int] = None
    age_days: Optional[int] = None
    test_name: str
    test_rate: float
    component_name: Optional[str] = None
    specimen: Optional[str] = None
    test_unit: Optional[str] = None
    reference_range: Optional[str] = None
    doctor_name: str


class ReportListResponse(BaseModel):
    success: bool = True
    reports: List[ReportSummary]


class ReportDetailResponse(BaseModel):
    success: bool = True
    reportItems: List[ReportDetailItem]


class ReportWriteResponse(BaseModel):
    success: bool = True
    message: str
    reportId: str


class StatusCount(BaseModel):
    status: Optional[str] = None
    count: int


class DashboardSummary(BaseModel):
    totalReports: int
    totalReportItems: int
    totalPatients: int
    totalDoctors: int
    totalTests: int
    reportsByStatus: List[StatusCount]
    recentReports: int


class DashboardResponse(BaseModel):
    success: bool = True
    summary: DashboardSummary
