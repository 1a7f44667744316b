"""
Doctor API endpoints
"""

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from pathlab.api.crud import delete_or_404, update_or_404
from pathlab.core.exceptions import NotFoundError
from pathlab.db.session import get_db
from pathlab.models import Doctor
from pathlab.schemas.common import Ack
from pathlab.schemas.doctor import (
    DoctorCreatedResponse,
    DoctorIn,
    DoctorListResponse,
    DoctorOut,
    DoctorResponse,
)
from pathlab.services.identifiers import IdentifierKind, ensure_identifier_unused, generate_identifier

logger = structlog.get_logger(__name__)
router = APIRouter()


def _doctor_values(payload: DoctorIn) -> dict:
    values = payload.model_dump()
    values["paid_commission"] = values.get("paid_commission") or 0
    return values


@router.get("", response_model=DoctorListResponse)
async def list_doctors(db: AsyncSession = Depends(get_db)) -> DoctorListResponse:
    """List all doctors"""
    doctors = (await db.scalars(select(Doctor).order_by(Doctor.doctor_name))).all()
    return DoctorListResponse(doctors=[DoctorOut.model_validate(d) for d in doctors])


@router.get("/{doctor_id}", response_model=DoctorResponse)
async def get_doctor(doctor_id: str, db: AsyncSession = Depends(get_db)) -> DoctorResponse:
    doctor = await db.get(Doctor, doctor_id)
    if not doctor:
        raise NotFoundError("Doctor not found")
    return DoctorResponse(doctor=DoctorOut.model_validate(doctor))


@router.post("", response_model=DoctorCreatedResponse)
async def create_doctor(payload: DoctorIn, db: AsyncSession = Depends(get_db)) -> DoctorCreatedResponse:
    """
    Add Doctor
    Stores a referring doctor under a generated ``DOC-`` identifier
    """
    doctor_id = generate_identifier(IdentifierKind.DOCTOR)
    await ensure_identifier_unused(db, Doctor.doctor_id, doctor_id, "Doctor")

    db.add(Doctor(doctor_id=doctor_id, **_doctor_values(payload)))
    await db.commit()

    logger.info("Doctor added", doctor_id=doctor_id)
    return DoctorCreatedResponse(message="Doctor added successfully", doctorId=doctor_id)


@router.put("/{doctor_id}", response_model=Ack)
async def update_doctor(doctor_id: str, payload: DoctorIn, db: AsyncSession = Depends(get_db)) -> Ack:
    await update_or_404(db, Doctor.doctor_id, doctor_id, _doctor_values(payload), "Doctor")
    logger.info("Doctor updated", doctor_id=doctor_id)
    return Ack(message="Doctor updated successfully")


@router.delete("/{doctor_id}", response_model=Ack)
async def delete_doctor(doctor_id: str, db: AsyncSession = Depends(get_db)) -> Ack:
    await delete_or_404(
        db,
        Doctor.doctor_id,
        doctor_id,
        "Doctor",
        in_use_message="Doctor has related reports and cannot be deleted",
    )
    logger.info("Doctor deleted", doctor_id=doctor_id)
    return Ack(message="Doctor deleted successfully")
