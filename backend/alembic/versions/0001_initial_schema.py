"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18

Creates the users and warranties tables. serial_number is nullable from the
start; owner_id is indexed for per-owner listing.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- users ---
    op.create_table(
        "users",
        sa.Column("user_id", sa.String(36), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    # --- warranties ---
    op.create_table(
        "warranties",
        sa.Column("warranty_id", sa.String(36), primary_key=True),
        sa.Column("owner_id", sa.String(36), sa.ForeignKey("users.user_id"), nullable=False),
        sa.Column("product_name", sa.String(100), nullable=False),
        sa.Column("serial_number", sa.String(100), nullable=True),
        sa.Column("purchase_date", sa.Date, nullable=False),
        sa.Column("warranty_months", sa.Integer, nullable=False),
        sa.Column("expiry_date", sa.Date, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_warranties_owner_id", "warranties", ["owner_id"])


def downgrade() -> None:
    op.drop_index("ix_warranties_owner_id", table_name="warranties")
    op.drop_table("warranties")
    op.drop_table("users")
