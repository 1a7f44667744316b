"""
Patient API endpoints
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.api.crud import delete_or_404, update_or_404
from pathlab.core.exceptions import NotFoundError
from pathlab.db.session import get_db
from pathlab.models import Patient
from pathlab.schemas.common import Ack
from pathlab.schemas.patient import (
    PatientCreatedResponse,
    PatientIn,
    PatientListResponse,
    PatientOut,
    PatientResponse,
    PatientSummary,
)
from pathlab.services.identifiers import IdentifierKind, ensure_identifier_unused, generate_identifier

logger = structlog.get_logger(__name__)
router = APIRouter()


@router.get("", response_model=PatientListResponse)
async def list_patients(db: AsyncSession = Depends(get_db)) -> PatientListResponse:
    """List all patients"""
    patients = (await db.scalars(select(Patient).order_by(Patient.patients_name))).all()
    return PatientListResponse(patients=[PatientSummary.model_validate(p) for p in patients])


@router.get("/{patient_id}", response_model=PatientResponse)
async def get_patient(patient_id: str, db: AsyncSession = Depends(get_db)) -> PatientResponse:
    """Fetch one patient"""
    patient = await db.get(Patient, patient_id)
    if not patient:
        raise NotFoundError("Patient not found")
    return PatientResponse(patient=PatientOut.model_validate(patient))


@router.post("", response_model=PatientCreatedResponse)
async def create_patient(payload: PatientIn, db: AsyncSession = Depends(get_db)) -> PatientCreatedResponse:
    """
    Register Patient
    Stores a new patient under a generated ``PAT-`` identifier
    """
    patient_id = generate_identifier(IdentifierKind.PATIENT)
    await ensure_identifier_unused(db, Patient.patient_id, patient_id, "Patient")

    db.add(Patient(patient_id=patient_id, **payload.model_dump()))
    await db.commit()

    logger.info("Patient added", patient_id=patient_id)
    return PatientCreatedResponse(message="Patient added successfully", patientId=patient_id)


@router.put("/{patient_id}", response_model=Ack)
async def update_patient(patient_id: str, payload: PatientIn, db: AsyncSession = Depends(get_db)) -> Ack:
    """Overwrite a patient's fields"""
    await update_or_404(db, Patient.patient_id, patient_id, payload.model_dump(), "Patient")
    logger.info("Patient updated", patient_id=patient_id)
    return Ack(message="Patient updated successfully")


@router.delete("/{patient_id}", response_model=Ack)
async def delete_patient(patient_id: str, db: AsyncSession = Depends(get_db)) -> Ack:
    """Delete a patient that has no reports"""
    await delete_or_404(
        db,
        Patient.patient_id,
        patient_id,
        "Patient",
        in_use_message="Patient has related reports and cannot be deleted",
    )
    logger.info("Patient deleted", patient_id=patient_id)
    return Ack(message="Patient deleted successfully")
