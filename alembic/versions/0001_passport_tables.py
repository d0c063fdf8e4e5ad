"""passport tables

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=255), nullable=False, unique=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"])

    op.create_table(
        "cafes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("address", sa.String(length=512), nullable=False),
        sa.Column("lat", sa.Float(), nullable=True),
        sa.Column("lng", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_cafes_id", "cafes", ["id"])

    op.create_table(
        "stamps",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("cafe_id", sa.Integer(), sa.ForeignKey("cafes.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("claim_day", sa.Date(), nullable=False),
        sa.Column("verification_distance", sa.Integer(), nullable=True),
        sa.Column("verification_method", sa.String(length=32), nullable=True),
        sa.UniqueConstraint("user_id", "cafe_id", "claim_day", name="uq_stamps_user_cafe_day"),
    )
    op.create_index("ix_stamps_id", "stamps", ["id"])
    op.create_index("ix_stamps_user_id", "stamps", ["user_id"])
    op.create_index("ix_stamps_cafe_id", "stamps", ["cafe_id"])


def downgrade() -> None:
    op.drop_table("stamps")
    op.drop_table("cafes")
    op.drop_table("users")
