"""
Doctor model definition
"""

from decimal import Decimal

from sqlalchemy import Column, Numeric, String
from sqlalchemy.orm import relationship

from pathlab.models.base import Base


class Doctor(Base):
    """Referring doctor model"""

    __tablename__ = "doctors"

    doctor_id = Column(String(20), primary_key=True)
    doctor_name = Column(String(100), nullable=False, index=True)
    clinic_name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=True)
    phone_number = Column(String(20), nullable=True)
    commission = Column(Numeric(10, 2), nullable=True)
    address = Column(String(255), nullable=True)
    paid_commission = Column(Numeric(10, 2), default=Decimal("0"), nullable=False)

    # Relationships
    report_items = relationship("ReportItem", back_populates="doctor", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Doctor(doctor_id='{self.doctor_id}', name='{self.doctor_name}')>"
