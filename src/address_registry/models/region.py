"""Region model: one node of the country/province/city/county hierarchy."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from address_registry.models.base import Base, IntegerIdMixin, TimestampMixin


class Region(Base, IntegerIdMixin, TimestampMixin):
    """Persisted administrative region linked to its parent by id."""

    __tablename__ = "regions"

    parent_id: Mapped[int] = mapped_column(nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    type: Mapped[str] = mapped_column(String(30), nullable=False)

    __table_args__ = (Index("ix_regions_parent_id", "parent_id"),)
