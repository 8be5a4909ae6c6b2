"""create property_rooms

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
        "property_rooms",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column("room_type_name", sa.Text(), nullable=False),
        sa.Column("floor_number", sa.Integer()),
        sa.Column("total_rooms", sa.Integer()),
        sa.Column("room_type", sa.Text()),
        sa.Column("bed_type", sa.Text()),
        sa.Column("room_view", sa.Text()),
        sa.Column("smoking_allowed", sa.Boolean(), nullable=False, server_default=sa.text("0")),
        sa.Column("extra_bed_allowed", sa.Boolean(), nullable=False, server_default=sa.text("0")),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("availability_start", sa.Date()),
        sa.Column("availability_end", sa.Date()),
        sa.Column("base_adult", sa.Integer()),
        sa.Column("max_adult", sa.Integer()),
        sa.Column("max_children", sa.Integer()),
        sa.Column("max_occupancy", sa.Integer()),
        sa.Column("base_rate", sa.Float()),
        sa.Column("extra_adult_charge", sa.Float()),
        sa.Column("child_charge", sa.Float()),
        sa.Column("total_rooms_in_property", sa.Integer()),
        sa.Column("room_images", sa.JSON(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.text("CURRENT_TIMESTAMP")),
    )
    op.create_index("ix_property_rooms_user_id", "property_rooms", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_property_rooms_user_id", table_name="property_rooms")
    op.drop_table("property_rooms")
