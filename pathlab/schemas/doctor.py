"""
Doctor request/response models
"""

from typing import List, Optional

from pydantic import Field

from pathlab.schemas.common import RequestModel, RequiredStr, ResponseModel


class DoctorIn(RequestModel):
    """Doctor create/update payload"""
    doctor_name: RequiredStr
    clinic_name: RequiredStr
    email: Optional[str] = None
    phone_number: Optional[str] = None
    commission: Optional[float] = Field(None, ge=0)
    address: Optional[str] = None
    paid_commission: Optional[float] = Field(None, ge=0)


class DoctorOut(ResponseModel):
    doctor_id: str
    doctor_name: str
    clinic_name: str
    email: Optional[str] = None
    phone_number: Optional[str] = None
    commission: Optional[float] = None
    address: Optional[str] = None
    paid_commission: float = 0


class DoctorListResponse(ResponseModel):
    success: bool = True
    doctors: List[DoctorOut]


class DoctorResponse(ResponseModel):
    success: bool = True
    doctor: DoctorOut


class DoctorCreatedResponse(ResponseModel):
    success: bool = True
    message: str
    doctorId: str
