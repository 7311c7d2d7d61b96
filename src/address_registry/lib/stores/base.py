"""Abstract persistent store interfaces consumed by the caches and importers."""

from abc import ABC, abstractmethod

from address_registry.lib.addresses.types import AddressRecord
from address_registry.lib.regions.types import RegionNode


class StoreError(Exception):
    """Raised when the backing store rejects a write.

    Args:
        operation: Store operation that failed (e.g. ``create_batch``).
        message: Human-readable error description.
    """

    def __init__(self, operation: str, message: str) -> None:
        self.operation = operation
        self.message = message
        super().__init__(f"{operation}: {message}")


class RegionStore(ABC):
    """Persistent region storage. All implementations must be thread-safe."""

    @abstractmethod
    def create(self, region: RegionNode) -> int:
        """Persist a region and assign its id.

        Args:
            region: Region with ``name``, ``parent_id`` and ``type`` set.
                Its ``id`` is set in place.

        Returns:
            The assigned id.
        """

    @abstractmethod
    def find_root(self) -> RegionNode | None:
        """Return the persisted root region (``parent_id == 0``), or None."""

    @abstractmethod
    def find_children_of(self, parent_id: int) -> list[RegionNode]:
        """Return the direct children of a region in creation order.

        Returned nodes have no children populated.
        """


class AddressStore(ABC):
    """Persistent address storage. All implementations must be thread-safe."""

    @abstractmethod
    def create_batch(self, records: list[AddressRecord]) -> int:
        """Persist a batch of addresses, assigning ids in place.

        Returns:
            Number of records written.

        Raises:
            StoreError: If the batch is rejected.
        """

    @abstractmethod
    def find_all(self) -> list[AddressRecord]:
        """Return every persisted address (possibly empty)."""

    @abstractmethod
    def get(self, address_id: int) -> AddressRecord | None:
        """Return one address by id, or None."""

    @abstractmethod
    def find_by_region(self, province_id: int, city_id: int, county_id: int) -> list[AddressRecord]:
        """Return addresses linked to the given region ids.

        A zero id matches any value at that level.
        """
