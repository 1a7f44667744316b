"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("user_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("full_name", sa.String(length=100), nullable=True),
        sa.Column("password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=30), nullable=True),
        sa.Column("contact_number", sa.String(length=20), nullable=True),
        sa.Column("question", sa.String(length=255), nullable=True),
        sa.Column("answer", sa.String(length=255), nullable=True),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "patients",
        sa.Column("patient_id", sa.String(length=20), nullable=False),
        sa.Column("patient_salutation", sa.String(length=10), nullable=True),
        sa.Column("patients_name", sa.String(length=100), nullable=False),
        sa.Column("guardian_name", sa.String(length=100), nullable=True),
        sa.Column("phone_number", sa.String(length=20), nullable=True),
        sa.Column("gender", sa.String(length=10), nullable=False),
        sa.Column("age_years", sa.Integer(), nullable=True),
        sa.Column("age_months", sa.Integer(), nullable=True),
        sa.Column("age_days", sa.Integer(), nullable=True),
        sa.Column("alternate_phone_number", sa.String(length=20), nullable=True),
        sa.Column("email", sa.String(length=100), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("city", sa.String(length=50), nullable=True),
        sa.Column("state", sa.String(length=50), nullable=True),
        sa.Column("zip_code", sa.String(length=10), nullable=True),
        sa.PrimaryKeyConstraint("patient_id"),
    )
    op.create_index("ix_patients_patients_name", "patients", ["patients_name"], unique=False)

    op.create_table(
        "doctors",
        sa.Column("doctor_id", sa.String(length=20), nullable=False),
        sa.Column("doctor_name", sa.String(length=100), nullable=False),
        sa.Column("clinic_name", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=100), nullable=True),
        sa.Column("phone_number", sa.String(length=20), nullable=True),
        sa.Column("commission", sa.Numeric(precision=10, scale=2), nullable=True),
        sa.Column("address", sa.String(length=255), nullable=True),
        sa.Column("paid_commission", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.PrimaryKeyConstraint("doctor_id"),
    )
    op.create_index("ix_doctors_doctor_name", "doctors", ["doctor_name"], unique=False)

    op.create_table(
        "category",
        sa.Column("category_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("category_name", sa.String(length=100), nullable=False),
        sa.PrimaryKeyConstraint("category_id"),
        sa.UniqueConstraint("category_name"),
    )

    op.create_table(
        "test",
        sa.Column("test_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("test_name", sa.String(length=100), nullable=False),
        sa.Column("test_rate", sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column("report_heading", sa.String(length=100), nullable=True),
        sa.Column("test_code", sa.String(length=20), nullable=True),
        sa.Column("method", sa.String(length=100), nullable=True),
        sa.Column("comments", sa.Text(), nullable=True),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["category_id"], ["category.category_id"]),
        sa.PrimaryKeyConstraint("test_id"),
        sa.UniqueConstraint("category_id", "test_code", name="uq_test_category_code"),
        sa.UniqueConstraint("category_id", "test_name", name="uq_test_category_name"),
    )
    op.create_index("ix_test_category_id", "test", ["category_id"], unique=False)

    op.create_table(
        "component",
        sa.Column("component_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("test_id", sa.Integer(), nullable=False),
        sa.Column("component_name", sa.String(length=100), nullable=False),
        sa.Column("sub_test_name", sa.String(length=100), nullable=True),
        sa.Column("specimen", sa.String(length=50), nullable=True),
        sa.Column("test_unit", sa.String(length=30), nullable=True),
        sa.Column("reference_range", sa.String(length=100), nullable=True),
        sa.ForeignKeyConstraint(["test_id"], ["test.test_id"]),
        sa.PrimaryKeyConstraint("component_id"),
    )
    op.create_index("ix_component_test_id", "component", ["test_id"], unique=False)

    op.create_table(
        "report",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("report_id", sa.String(length=20), nullable=False),
        sa.Column("patient_id", sa.String(length=20), nullable=False),
        sa.Column("doctor_id", sa.String(length=20), nullable=False),
        sa.Column("test_id", sa.Integer(), nullable=False),
        sa.Column("component_id", sa.Integer(), nullable=True),
        sa.Column("test_date", sa.Date(), nullable=False),
        sa.Column("result", sa.String(length=255), nullable=True),
        sa.Column("method", sa.String(length=100), nullable=True),
        sa.Column("comments", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=True),
        sa.ForeignKeyConstraint(["patient_id"], ["patients.patient_id"]),
        sa.ForeignKeyConstraint(["doctor_id"], ["doctors.doctor_id"]),
        sa.ForeignKeyConstraint(["test_id"], ["test.test_id"]),
        sa.ForeignKeyConstraint(["component_id"], ["component.component_id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_report_report_id", "report", ["report_id"], unique=False)
    op.create_index("ix_report_patient_id", "report", ["patient_id"], unique=False)
    op.create_index("ix_report_doctor_id", "report", ["doctor_id"], unique=False)
    op.create_index("ix_report_test_date", "report", ["test_date"], unique=False)
    op.create_index("ix_report_status", "report", ["status"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_report_status", table_name="report")
    op.drop_index("ix_report_test_date", table_name="report")
    op.drop_index("ix_report_doctor_id", table_name="report")
    op.drop_index("ix_report_patient_id", table_name="report")
    op.drop_index("ix_report_report_id", table_name="report")
    op.drop_table("report")
    op.drop_index("ix_component_test_id", table_name="component")
    op.drop_table("component")
    op.drop_index("ix_test_category_id", table_name="test")
    op.drop_table("test")
    op.drop_table("category")
    op.drop_index("ix_doctors_doctor_name", table_name="doctors")
    op.drop_table("doctors")
    op.drop_index("ix_patients_patients_name", table_name="patients")
    op.drop_table("patients")
    op.drop_index("ix_users_username", table_name="users")
    op.drop_table("users")
