"""Address registry: service boundary owning the process-wide caches.

One registry per process holds the region cache, the dedup index, the
import pipeline and the region importer over a shared pair of stores.
"""

from loguru import logger

from address_registry.core.config import Settings
from address_registry.core.database import get_session_factory, init_engine
from address_registry.lib.addresses.types import AddressRecord
from address_registry.lib.regions.types import DEFAULT_ROOT_NAME, RegionNode
from address_registry.lib.stores.base import AddressStore, RegionStore
from address_registry.lib.stores.sql import SqlAddressStore, SqlRegionStore
from address_registry.services.dedup_index import DedupIndex
from address_registry.services.import_service import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_PROGRESS_INTERVAL,
    ImportCounters,
    ImportPipeline,
)
from address_registry.services.region_cache import RegionCache
from address_registry.services.region_import_service import RegionImporter


class AddressRegistry:
    """Region lookups, duplicate checks, and imports over one pair of stores.

    Args:
        region_store: Persistent region store.
        address_store: Persistent address store.
        batch_size: Addresses per store write batch.
        progress_interval: Log import progress every N imported addresses.
        root_name: Required name of an imported region tree's root.
    """

    def __init__(
        self,
        region_store: RegionStore,
        address_store: AddressStore,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        root_name: str = DEFAULT_ROOT_NAME,
    ) -> None:
        self._address_store = address_store
        self.region_cache = RegionCache(region_store)
        self.dedup_index = DedupIndex(address_store)
        self.import_pipeline = ImportPipeline(
            self.dedup_index,
            address_store,
            batch_size=batch_size,
            progress_interval=progress_interval,
        )
        self.region_importer = RegionImporter(region_store, root_name=root_name)

    def root_region(self) -> RegionNode:
        """Return the root of the region tree."""
        return self.region_cache.get_root()

    def get_region(self, region_id: int) -> RegionNode | None:
        """Return a region by id, or None."""
        return self.region_cache.get_by_id(region_id)

    def import_regions(self, tree: RegionNode | None) -> int:
        """Persist a source region tree. See :class:`RegionImporter`."""
        return self.region_importer.import_regions(tree)

    def is_duplicate_address(self, raw_text: str) -> bool:
        """Check an address's raw text against the dedup index."""
        return self.dedup_index.is_duplicate(raw_text)

    def import_addresses(self, records: list[AddressRecord]) -> int:
        """Import addresses. See :meth:`ImportPipeline.import_addresses`."""
        return self.import_pipeline.import_addresses(records)

    @property
    def import_counters(self) -> ImportCounters:
        """Cumulative import counters."""
        return self.import_pipeline.counters

    def get_address(self, address_id: int) -> AddressRecord | None:
        """Read one address straight from the store."""
        return self._address_store.get(address_id)

    def load_addresses(self, province_id: int = 0, city_id: int = 0, county_id: int = 0) -> list[AddressRecord]:
        """Read the addresses linked to a region from the store.

        A zero id matches any region at that level.
        """
        return self._address_store.find_by_region(province_id, city_id, county_id)


def create_registry(settings: Settings) -> AddressRegistry:
    """Initialize the database engine and build a SQL-backed registry.

    Args:
        settings: Application settings.

    Returns:
        A registry whose caches are still unbuilt.
    """
    init_engine(settings.database_url, echo=settings.database_echo)
    session_factory = get_session_factory()
    logger.debug(f"Address registry bound to {settings.database_url.split('@')[-1]}")
    return AddressRegistry(
        SqlRegionStore(session_factory),
        SqlAddressStore(session_factory),
        batch_size=settings.import_batch_size,
        progress_interval=settings.import_progress_interval,
        root_name=settings.region_root_name,
    )
