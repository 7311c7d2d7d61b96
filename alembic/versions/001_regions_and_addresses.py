"""regions and addresses tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "regions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("type", sa.String(length=30), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_regions_parent_id", "regions", ["parent_id"], unique=False)

    op.create_table(
        "addresses",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("raw_text", sa.String(length=150), nullable=False),
        sa.Column("text", sa.String(length=100), nullable=False),
        sa.Column("village", sa.String(length=5), nullable=False),
        sa.Column("road", sa.String(length=8), nullable=False),
        sa.Column("road_num", sa.String(length=10), nullable=False),
        sa.Column("building_num", sa.String(length=20), nullable=False),
        sa.Column("hash", sa.Integer(), nullable=False),
        sa.Column("province_id", sa.Integer(), nullable=False),
        sa.Column("city_id", sa.Integer(), nullable=False),
        sa.Column("county_id", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_addresses_hash", "addresses", ["hash"], unique=False)
    op.create_index("ix_addresses_region", "addresses", ["province_id", "city_id", "county_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_addresses_region", table_name="addresses")
    op.drop_index("ix_addresses_hash", table_name="addresses")
    op.drop_table("addresses")
    op.drop_index("ix_regions_parent_id", table_name="regions")
    op.drop_table("regions")
