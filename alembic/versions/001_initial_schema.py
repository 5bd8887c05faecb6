"""Initial schema — applicants, schemes, eligibility rules.

Revision ID: 001
Revises: None
Create Date: 2026-10-19
"""
from __future__ import annotations

from typing import Union

import sqlalchemy as sa
from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, tuple[str, ...], None] = None
depends_on: Union[str, tuple[str, ...], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("name", sa.String(200)),
        sa.Column("email", sa.String(255)),
        sa.Column("age", sa.Integer()),
        sa.Column("income", sa.Float(), comment="Annual income"),
        sa.Column("category", sa.String(20), comment="GEN, OBC, SC, ST"),
        sa.Column("education", sa.String(100)),
        sa.Column("gender", sa.String(10)),
        sa.Column("state", sa.String(100)),
        sa.Column("disability", sa.Boolean()),
        sa.Column("occupation", sa.String(100)),
        sa.Column("marital_status", sa.String(20)),
        sa.Column("residence_type", sa.String(20), comment="Urban, Rural"),
        sa.Column("employment_type", sa.String(50)),
        sa.Column("bpl_status", sa.Boolean(), comment="Below poverty line"),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "schemes",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("benefits", sa.Text()),
        sa.Column("ministry", sa.String(255)),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_schemes"),
    )
    op.create_index("ix_schemes_active", "schemes", ["active"])

    op.create_table(
        "eligibility_rules",
        sa.Column("id", postgresql.UUID(as_uuid=True), server_default=sa.text("gen_random_uuid()"), nullable=False),
        sa.Column("scheme_id", postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column("position", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("field", sa.String(50), nullable=False, comment="Applicant attribute, e.g. income"),
        sa.Column("operator", sa.String(20), nullable=False, comment="==, !=, >, >=, <, <=, IN"),
        sa.Column("value", sa.Text(), comment="Operand; comma-separated for IN"),
        sa.Column("weight", sa.Integer(), nullable=False, server_default="10"),
        sa.ForeignKeyConstraint(
            ["scheme_id"], ["schemes.id"],
            name="fk_eligibility_rules_scheme_id_schemes",
            ondelete="CASCADE",
        ),
        sa.CheckConstraint("weight >= 0", name="ck_eligibility_rules_weight_non_negative"),
        sa.PrimaryKeyConstraint("id", name="pk_eligibility_rules"),
    )
    op.create_index("ix_eligibility_rules_scheme_id", "eligibility_rules", ["scheme_id"])


def downgrade() -> None:
    # Drop in reverse dependency order
    op.drop_index("ix_eligibility_rules_scheme_id", table_name="eligibility_rules")
    op.drop_table("eligibility_rules")
    op.drop_index("ix_schemes_active", table_name="schemes")
    op.drop_table("schemes")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
