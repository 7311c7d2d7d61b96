"""Address model: pre-split address fields with the raw-text dedup hash."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from address_registry.models.base import Base, IntegerIdMixin, TimestampMixin


class Address(Base, IntegerIdMixin, TimestampMixin):
    """Imported address record.

    Column widths match the truncation limits applied during import.
    ``hash`` is computed from the raw text before truncation and is not unique
    at the database level; duplicate admission is decided in memory.
    """

    __tablename__ = "addresses"

    raw_text: Mapped[str] = mapped_column(String(150), nullable=False)
    text: Mapped[str] = mapped_column(String(100), nullable=False, default="")
    village: Mapped[str] = mapped_column(String(5), nullable=False, default="")
    road: Mapped[str] = mapped_column(String(8), nullable=False, default="")
    road_num: Mapped[str] = mapped_column(String(10), nullable=False, default="")
    building_num: Mapped[str] = mapped_column(String(20), nullable=False, default="")
    hash: Mapped[int] = mapped_column(nullable=False)

    province_id: Mapped[int] = mapped_column(nullable=False, default=0)
    city_id: Mapped[int] = mapped_column(nullable=False, default=0)
    county_id: Mapped[int] = mapped_column(nullable=False, default=0)

    __table_args__ = (
        Index("ix_addresses_hash", "hash"),
        Index("ix_addresses_region", "province_id", "city_id", "county_id"),
    )
