"""ORM model registry: import all models so Alembic autogenerate discovers them."""

from address_registry.models.address import Address
from address_registry.models.region import Region

__all__ = [
    "Address",
    "Region",
]
