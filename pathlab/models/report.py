"""
Report item model definition

A report is not a row of its own: it is every ``report`` row that shares
one ``report_id``. Each row carries the result of one test or test
component.
"""

from sqlalchemy import Column, Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from pathlab.models.base import Base


class ReportItem(Base):
    """One test (or component) result within a report"""

    __tablename__ = "report"

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(String(20), nullable=False, index=True)
    patient_id = Column(String(20), ForeignKey("patients.patient_id"), nullable=False, index=True)
    doctor_id = Column(String(20), ForeignKey("doctors.doctor_id"), nullable=False, index=True)
    test_id = Column(Integer, ForeignKey("test.test_id"), nullable=False)
    component_id = Column(Integer, ForeignKey("component.component_id"), nullable=True)
    test_date = Column(Date, nullable=False, index=True)
    result = Column(String(255), nullable=True)
    method = Column(String(100), nullable=True)
    comments = Column(Text, nullable=True)
    status = Column(String(20), nullable=True, index=True)

    # Relationships
    patient = relationship("Patient", back_populates="report_items")
    doctor = relationship("Doctor", back_populates="report_items")

    def __repr__(self) -> str:
        return f"<ReportItem(id={self.id}, report_id='{self.report_id}', test_id={self.test_id})>"
