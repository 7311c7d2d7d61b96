"""Region cache: lazily loads the persisted region tree into memory.

The tree is read from the store once per cache instance: the root first,
then the children of every non-leaf region, recursively.  Every region is
also indexed by id.  The hierarchy is at most four levels deep
(country/province/city/county), so plain recursion is used.
"""

import threading
import time

from loguru import logger

from address_registry.lib.regions.types import RegionNode
from address_registry.lib.stores.base import RegionStore


class UninitializedStateError(RuntimeError):
    """Raised when a cache is queried but its store holds no usable data."""


class RegionCache:
    """Build-once, thread-safe cache of the region tree and id index.

    The first caller to need the tree loads it under a lock; concurrent
    callers block until the load completes and then observe the same tree.
    Once loaded, reads take no lock.

    An empty store leaves the cache unloaded, so a later call (after the
    tree has been imported) performs the load.

    Args:
        store: Region store to load from.
    """

    def __init__(self, store: RegionStore) -> None:
        self._store = store
        self._root: RegionNode | None = None
        self._by_id: dict[int, RegionNode] = {}
        self._loaded = False
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        """Whether the tree has been loaded."""
        return self._loaded

    @property
    def size(self) -> int:
        """Number of indexed regions (0 until loaded)."""
        return len(self._by_id)

    def get_root(self) -> RegionNode:
        """Return the root region, loading the tree on first use.

        Raises:
            UninitializedStateError: If the store holds no root region.
        """
        self._ensure_loaded()
        if self._root is None:
            msg = "Region data not initialized"
            raise UninitializedStateError(msg)
        return self._root

    def get_by_id(self, region_id: int) -> RegionNode | None:
        """Return a region by id, loading the tree on first use.

        Returns:
            The region, or None if no region has that id.

        Raises:
            UninitializedStateError: If the store holds no root region.
        """
        self._ensure_loaded()
        if self._root is None:
            msg = "Region data not initialized"
            raise UninitializedStateError(msg)
        return self._by_id.get(region_id)

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._load()

    def _load(self) -> None:
        start = time.monotonic()
        root = self._store.find_root()
        if root is None:
            logger.warning("Region store has no root region; region cache left unloaded")
            return

        by_id: dict[int, RegionNode] = {root.id: root}
        self._load_children(root, by_id)

        # Publish the finished tree before raising the flag
        self._by_id = by_id
        self._root = root
        self._loaded = True

        elapsed = time.monotonic() - start
        logger.info(f"Region tree loaded: {len(by_id)} regions in {elapsed:.3f}s")

    def _load_children(self, parent: RegionNode, by_id: dict[int, RegionNode]) -> None:
        if parent.is_leaf:
            return
        children = self._store.find_children_of(parent.id)
        if not children:
            return
        parent.children = children
        for child in children:
            by_id[child.id] = child
            self._load_children(child, by_id)
