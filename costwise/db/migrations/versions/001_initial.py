"""Initial schema - estimates and expenses

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _audit_columns() -> list[sa.Column]:
    return [
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
    ]


def upgrade() -> None:
    # Estimates
    op.create_table(
        "estimates",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("project_type", sa.String(50), nullable=False, index=True),
        sa.Column("area", sa.Float, nullable=False),
        sa.Column("material_quality", sa.String(20), nullable=False),
        sa.Column("timeline", sa.String(50), nullable=True),
        sa.Column("zip_code", sa.String(10), nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("labor_workers", sa.Integer, nullable=True),
        sa.Column("labor_hours", sa.Float, nullable=True),
        sa.Column("labor_rate", sa.Float, nullable=True),
        sa.Column("trade_type", sa.String(100), nullable=True),
        sa.Column("demolition_required", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("permit_needed", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("site_access", sa.String(20), nullable=True),
        sa.Column("timeline_sensitivity", sa.String(20), nullable=True),
        sa.Column("material_cost", sa.Integer, nullable=False),
        sa.Column("labor_cost", sa.Integer, nullable=False),
        sa.Column("permit_cost", sa.Integer, nullable=False),
        sa.Column("soft_costs", sa.Integer, nullable=False),
        sa.Column("estimated_cost", sa.Integer, nullable=False),
        sa.Column("cost_breakdown", postgresql.JSONB, nullable=False),
        sa.Column("enhanced_inputs", postgresql.JSONB, nullable=True),
        *_audit_columns(),
    )

    # Expenses
    op.create_table(
        "expenses",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("category", sa.String(20), nullable=False, index=True),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
        sa.Column("expense_date", sa.Date, nullable=True),
        sa.Column("vendor", sa.String(255), nullable=True),
        sa.Column("project_ref", sa.String(100), nullable=True),
        sa.Column("project_name", sa.String(500), nullable=True),
        *_audit_columns(),
    )


def downgrade() -> None:
    op.drop_table("expenses")
    op.drop_table("estimates")
