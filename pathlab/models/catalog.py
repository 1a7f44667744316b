"""
Test catalog models: categories, tests and their components
"""

from sqlalchemy import Column, ForeignKey, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from pathlab.models.base import Base


class Category(Base):
    """Test category model"""

    __tablename__ = "category"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    category_name = Column(String(100), unique=True, nullable=False)

    # Relationships
    tests = relationship("LabTest", back_populates="category", passive_deletes="all")

    def __repr__(self) -> str:
        return f"<Category(category_id={self.category_id}, name='{self.category_name}')>"


class LabTest(Base):
    """A test offered by the lab, priced and grouped by category"""

    __tablename__ = "test"
    __table_args__ = (
        UniqueConstraint("category_id", "test_code", name="uq_test_category_code"),
        UniqueConstraint("category_id", "test_name", name="uq_test_category_name"),
    )

    test_id = Column(Integer, primary_key=True, autoincrement=True)
    test_name = Column(String(100), nullable=False)
    test_rate = Column(Numeric(10, 2), nullable=False)
    report_heading = Column(String(100), nullable=True)
    test_code = Column(String(20), nullable=True)
    method = Column(String(100), nullable=True)
    comments = Column(Text, nullable=True)
    category_id = Column(Integer, ForeignKey("category.category_id"), nullable=False, index=True)

    # Relationships
    category = relationship("Category", back_populates="tests")
    components = relationship(
        "Component",
        back_populates="test",
        order_by="Component.component_id",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<LabTest(test_id={self.test_id}, name='{self.test_name}')>"


class Component(Base):
    """A sub-measurement reported under a test"""

    __tablename__ = "component"

    component_id = Column(Integer, primary_key=True, autoincrement=True)
    test_id = Column(Integer, ForeignKey("test.test_id"), nullable=False, index=True)
    component_name = Column(String(100), nullable=False)
    sub_test_name = Column(String(100), nullable=True)
    specimen = Column(String(50), nullable=True)
    test_unit = Column(String(30), nullable=True)
    reference_range = Column(String(100), nullable=True)

    # Relationships
    test = relationship("LabTest", back_populates="components")

    def __repr__(self) -> str:
        return f"<Component(component_id={self.component_id}, name='{self.component_name}')>"
