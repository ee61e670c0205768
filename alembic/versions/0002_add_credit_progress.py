"""Add credit_progress table.

Revision ID: 0002_add_credit_progress
Revises: 0001_initial_schema
Create Date: 2026-10-19 00:00:00
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "0002_add_credit_progress"
down_revision: Union[str, None] = "0001_initial_schema"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "credit_progress",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(length=64), nullable=False),
        sa.Column("bureau", sa.String(length=20), nullable=False),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("previous_score", sa.Integer(), nullable=True),
        sa.Column("items_removed", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("disputes_active", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("recorded_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_credit_progress_user_recorded", "credit_progress", ["user_id", "recorded_at"])


def downgrade() -> None:
    op.drop_index("ix_credit_progress_user_recorded", table_name="credit_progress")
    op.drop_table("credit_progress")
