"""Database models for the PathLab backend"""

from pathlab.models.base import Base
from pathlab.models.user import User
from pathlab.models.patient import Patient
from pathlab.models.doctor import Doctor
from pathlab.models.catalog import Category, Component, LabTest
from pathlab.models.report import ReportItem

__all__ = [
    "Base",
    "User",
    "Patient",
    "Doctor",
    "Category",
    "LabTest",
    "Component",
    "ReportItem",
]
