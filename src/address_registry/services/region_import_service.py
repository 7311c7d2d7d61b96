"""Region import service: persists a source region tree with derived types."""

import threading
import time

from loguru import logger

from address_registry.lib.regions.classifier import classify_city, classify_province, is_unspecified
from address_registry.lib.regions.types import DEFAULT_ROOT_NAME, RegionNode, RegionType
from address_registry.lib.stores.base import RegionStore


class RegionImporter:
    """Writes a four-level region tree (country → province → city → county).

    Types and parent links are derived during the walk.  "Other/unspecified"
    cities and counties are skipped together with anything below them.

    Importing is one-shot: if the store already holds a root region, the call
    is a no-op and returns 0, leaving the persisted tree untouched.

    Args:
        store: Region store to write to.
        root_name: Name the tree's root must carry.
    """

    def __init__(self, store: RegionStore, *, root_name: str = DEFAULT_ROOT_NAME) -> None:
        self._store = store
        self._root_name = root_name
        self._lock = threading.Lock()

    def import_regions(self, tree: RegionNode | None) -> int:
        """Persist a region tree.

        Args:
            tree: Root of the source tree; ids, parent links and types are
                assigned in place.

        Returns:
            Number of regions persisted, or 0 if the root is not the expected
            country or a tree was already imported.
        """
        if tree is None or tree.name != self._root_name:
            logger.warning(f"Region tree root must be {self._root_name!r}, got {tree.name if tree else None!r}")
            return 0

        with self._lock:
            existing = self._store.find_root()
            if existing is not None:
                logger.warning(f"Region tree already imported (root id {existing.id}); skipping import")
                return 0

            start = time.monotonic()
            count = self._import_tree(tree)
            elapsed = time.monotonic() - start

        logger.info(f"Imported {count} regions in {elapsed:.3f}s")
        return count

    def _import_tree(self, country: RegionNode) -> int:
        country.parent_id = 0
        country.type = RegionType.COUNTRY
        self._store.create(country)
        count = 1

        for province in country.children:
            province.parent_id = country.id
            province.type = classify_province(province)
            self._store.create(province)
            count += 1

            for city in province.children:
                if is_unspecified(city.name):
                    continue
                city.parent_id = province.id
                city.type = classify_city(city)
                self._store.create(city)
                count += 1

                for county in city.children:
                    if is_unspecified(county.name):
                        continue
                    county.parent_id = city.id
                    county.type = RegionType.COUNTY
                    self._store.create(county)
                    count += 1

        return count
