"""Initial schema - plans and access_tokens.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "plans",
        sa.Column("name", sa.String(255), primary_key=True),
        sa.Column("memory", sa.BigInteger, nullable=False),
        sa.Column("swap", sa.BigInteger, nullable=False, server_default="0"),
        sa.Column("cpu_share", sa.Integer, nullable=False),
        sa.Column(
            "is_default", sa.Boolean, nullable=False,
            server_default=sa.false(),
        ),
    )
    op.create_index(
        "uq_plans_single_default", "plans", ["is_default"], unique=True,
        postgresql_where=sa.text("is_default"),
        sqlite_where=sa.text("is_default = 1"),
    )
    op.create_table(
        "access_tokens",
        sa.Column("token", sa.String(128), primary_key=True),
        sa.Column("user_email", sa.String(255), nullable=False),
        sa.Column("scopes", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("access_tokens")
    op.drop_index("uq_plans_single_default", table_name="plans")
    op.drop_table("plans")
