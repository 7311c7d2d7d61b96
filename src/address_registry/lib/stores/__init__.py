"""Stores library public API.

Provides the abstract region/address store contracts plus in-memory and
SQLAlchemy implementations.
"""

from address_registry.lib.stores.base import AddressStore, RegionStore, StoreError
from address_registry.lib.stores.memory import InMemoryAddressStore, InMemoryRegionStore
from address_registry.lib.stores.sql import SqlAddressStore, SqlRegionStore

__all__ = [
    "AddressStore",
    "InMemoryAddressStore",
    "InMemoryRegionStore",
    "RegionStore",
    "SqlAddressStore",
    "SqlRegionStore",
    "StoreError",
]
