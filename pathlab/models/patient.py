"""
Patient model definition
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from pathlab.models.base import Base


class Patient(Base):
    """Patient model"""

    __tablename__ = "patients"

    patient_id = Column(String(20), primary_key=True)
    patient_salutation = Column(String(10), nullable=True)
    patients_name = Column(String(100), nullable=False, index=True)
    guardian_name = Column(String(100), nullable=True)
    phone_number = Column(String(20), nullable=True)
    gender = Column(String(10), nullable=False)
    age_years = Column(Integer, nullable=True)
    age_months = Column(Integer, nullable=True)
    age_days = Column(Integer, nullable=True)
    alternate_phone_number = Column(String(20), nullable=True)
    email = Column(String(100), nullable=True)
    address = Column(String(255), nullable=True)
    city = Column(String(50), nullable=True)
    state = Column(String(50), nullable=True)
    zip_code = Column(String(10), nullable=True)

    # Relationships
    report_items = relationship("ReportItem", back_populates="patient", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Patient(patient_id='{self.patient_id}', name='{self.patients_name}')>"
