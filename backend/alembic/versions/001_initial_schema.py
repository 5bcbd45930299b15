"""Initial schema — animals, employees and the farm registers.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


_INDEXES = (
    ("purchase_approvals", "date"),
    ("purchase_approvals", "approval_status"),
    ("feed_inspections", "date"),
    ("milk_rejections", "date"),
    ("yield_records", "date"),
    ("yield_records", "animal_id"),
    ("repair_logs", "date"),
    ("vaccination_records", "date"),
    ("vaccination_records", "animal_id"),
    ("vaccination_records", "next_due_date"),
    ("calf_feeding_records", "calf_id"),
    ("calf_feed_register", "date"),
    ("calf_feed_register", "calf_id"),
)

_TABLES = (
    "animals", "employees", "purchase_approvals", "feed_inspections",
    "milk_rejections", "yield_records", "record_categories", "repair_logs",
    "vaccination_records", "calf_feeding_records", "calf_feed_register",
)


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("supervisor_id", sa.String(64), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "animals",
        sa.Column("animal_id", sa.String(50), primary_key=True),
        sa.Column("target_milk", sa.Float, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_audit_columns(),
    )

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.String(32), primary_key=True),
        sa.Column("staff_name", sa.String(120), nullable=False),
        sa.Column("designation", sa.String(120), nullable=False),
        sa.Column("payment_per_day", sa.Float, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("picture_url", sa.String(500), nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "purchase_approvals",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("item_type", sa.String(20), nullable=False),
        sa.Column("item_requested", sa.String(200), nullable=False),
        sa.Column("quantity", sa.Float, nullable=False),
        sa.Column("requested_by", sa.String(120), nullable=False),
        sa.Column("approval_status", sa.String(1), nullable=False, server_default="P"),
        sa.Column("approved_by", sa.String(120), nullable=True),
        sa.Column("requester_remarks", sa.Text, nullable=True),
        sa.Column("approver_remarks", sa.Text, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "feed_inspections",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("feed_type", sa.String(40), nullable=False),
        sa.Column("appearance", sa.String(200), nullable=False),
        sa.Column("smell", sa.String(200), nullable=False),
        sa.Column("moisture_level", sa.String(100), nullable=False),
        sa.Column("contamination", sa.String(200), nullable=True),
        sa.Column("fit_for_use", sa.String(1), nullable=False, server_default="Y"),
        sa.Column("unfit_quantity_kg", sa.Float, nullable=True),
        sa.Column("action_taken", sa.Text, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "milk_rejections",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("rejection_reason", sa.String(200), nullable=False),
        sa.Column("animal_or_batch", sa.String(100), nullable=False),
        sa.Column("action_taken", sa.Text, nullable=False),
        sa.Column("responsible_person", sa.String(120), nullable=False),
        sa.Column("remarks", sa.Text, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "yield_records",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column(
            "animal_id", sa.String(50),
            sa.ForeignKey("animals.animal_id", onupdate="CASCADE"),
            nullable=False,
        ),
        sa.Column("morning_yield", sa.Float, nullable=False),
        sa.Column("evening_yield", sa.Float, nullable=False),
        sa.Column("total_yield", sa.Float, nullable=False),
        sa.Column("cost_per_litre", sa.Float, nullable=True),
        sa.Column("total_cost", sa.Float, nullable=True),
        sa.Column("remarks", sa.Text, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "record_categories",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("record_category", sa.String(120), nullable=False),
        sa.Column("examples", sa.Text, nullable=False),
        sa.Column("frequency", sa.String(10), nullable=False, server_default="Daily"),
        sa.Column("retention_period", sa.String(60), nullable=False),
        sa.Column("format", sa.String(60), nullable=False),
        *_audit_columns(),
    )

    op.create_table(
        "repair_logs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("checked_area", sa.String(120), nullable=False),
        sa.Column("damage_type", sa.String(120), nullable=False),
        sa.Column("immediate_action", sa.Text, nullable=False),
        sa.Column("repair_needed", sa.String(1), nullable=False, server_default="N"),
        sa.Column("completed_on", sa.Date, nullable=True),
        sa.Column("remarks", sa.Text, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "vaccination_records",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("animal_type", sa.String(10), nullable=False, server_default="cow"),
        sa.Column("animal_id", sa.String(50), nullable=False),
        sa.Column("vaccine_type", sa.String(120), nullable=False),
        sa.Column("batch_no", sa.String(60), nullable=False),
        sa.Column("administered_by", sa.String(120), nullable=False),
        sa.Column("next_due_date", sa.Date, nullable=True),
        sa.Column("remarks", sa.Text, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "calf_feeding_records",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("calf_id", sa.String(50), nullable=False),
        sa.Column("colostrum_given", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("milk_feeding", sa.String(200), nullable=True),
        sa.Column("starter_feed_started", sa.Date, nullable=True),
        sa.Column("weaning_date", sa.Date, nullable=True),
        sa.Column("remarks", sa.Text, nullable=True),
        *_audit_columns(),
    )

    op.create_table(
        "calf_feed_register",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("calf_id", sa.String(50), nullable=False),
        sa.Column("activity", sa.String(120), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("feed_type", sa.String(30), nullable=False),
        sa.Column("quantity_grams", sa.Float, nullable=False),
        sa.Column("frequency", sa.String(40), nullable=False),
        sa.Column("time_of_day", sa.String(5), nullable=False, server_default="08:00"),
        sa.Column("responsible_person", sa.String(120), nullable=False),
        sa.Column("record_log", sa.Text, nullable=True),
        *_audit_columns(),
    )

    for table in _TABLES:
        op.create_index(f"ix_{table}_supervisor_id", table, ["supervisor_id"])
    for table, column in _INDEXES:
        op.create_index(f"ix_{table}_{column}", table, [column])


def downgrade() -> None:
    for table in reversed(_TABLES):
        op.drop_table(table)
