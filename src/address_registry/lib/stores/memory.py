"""Thread-safe in-memory store implementations.

Used for tests and for dry-run imports.  Stored objects are copies, so
callers never share mutable state with the store.
"""

import dataclasses
import itertools
import threading

from address_registry.lib.addresses.types import AddressRecord
from address_registry.lib.regions.types import RegionNode
from address_registry.lib.stores.base import AddressStore, RegionStore


def _matches(value: int, wanted: int) -> bool:
    return wanted == 0 or value == wanted


class InMemoryRegionStore(RegionStore):
    """Region store backed by a dict keyed by id."""

    def __init__(self) -> None:
        self._rows: dict[int, RegionNode] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create(self, region: RegionNode) -> int:
        with self._lock:
            region.id = next(self._ids)
            self._rows[region.id] = dataclasses.replace(region, children=[])
            return region.id

    def find_root(self) -> RegionNode | None:
        with self._lock:
            for row in self._rows.values():
                if row.parent_id == 0:
                    return dataclasses.replace(row, children=[])
        return None

    def find_children_of(self, parent_id: int) -> list[RegionNode]:
        with self._lock:
            return [dataclasses.replace(row, children=[]) for row in self._rows.values() if row.parent_id == parent_id]

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)


class InMemoryAddressStore(AddressStore):
    """Address store backed by a dict keyed by id."""

    def __init__(self) -> None:
        self._rows: dict[int, AddressRecord] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def create_batch(self, records: list[AddressRecord]) -> int:
        with self._lock:
            for record in records:
                record.id = next(self._ids)
                self._rows[record.id] = dataclasses.replace(record)
            return len(records)

    def find_all(self) -> list[AddressRecord]:
        with self._lock:
            return [dataclasses.replace(row) for row in self._rows.values()]

    def get(self, address_id: int) -> AddressRecord | None:
        with self._lock:
            row = self._rows.get(address_id)
            return dataclasses.replace(row) if row is not None else None

    def find_by_region(self, province_id: int, city_id: int, county_id: int) -> list[AddressRecord]:
        with self._lock:
            return [
                dataclasses.replace(row)
                for row in self._rows.values()
                if _matches(row.province_id, province_id)
                and _matches(row.city_id, city_id)
                and _matches(row.county_id, county_id)
            ]

    def __len__(self) -> int:
        with self._lock:
            return len(self._rows)
