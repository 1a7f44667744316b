"""
Patient request/response models
"""

from typing import List, Optional

from pydantic import Field

from pathlab.schemas.common import RequestModel, RequiredStr, ResponseModel


class PatientIn(RequestModel):
    """Patient create/update payload"""
    patient_salutation: Optional[str] = None
    patients_name: RequiredStr
    guardian_name: Optional[str] = None
    phone_number: Optional[str] = None
    gender: RequiredStr
    age_years: Optional[int] = Field(None, ge=0)
    age_months: Optional[int] = Field(None, ge=0)
    age_days: Optional[int] = Field(None, ge=0)
    alternate_phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class PatientSummary(ResponseModel):
    """Patient row as shown in listings"""
    patient_id: str
    patients_name: str
    phone_number: Optional[str] = None
    gender: str
    age_years: Optional[int] = None


class PatientOut(PatientSummary):
    """Full patient record"""
    patient_salutation: Optional[str] = None
    guardian_name: Optional[str] = None
    age_months: Optional[int] = None
    age_days: Optional[int] = None
    alternate_phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None


class PatientListResponse(ResponseModel):
    success: bool = True
    patients: List[PatientSummary]


class PatientResponse(ResponseModel):
    success: bool = True
    patient: PatientOut


class PatientCreatedResponse(ResponseModel):
    success: bool = True
    message: str
    patientId: str
