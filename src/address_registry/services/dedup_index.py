"""Dedup index: in-memory hash → address map over every persisted address."""

import threading
import time

from loguru import logger

from address_registry.lib.addresses.hashing import raw_text_hash
from address_registry.lib.addresses.types import AddressRecord
from address_registry.lib.stores.base import AddressStore


class DedupIndex:
    """Build-once, thread-safe index of addresses keyed by raw-text hash.

    Duplicate detection compares 32-bit hashes only, so two distinct raw
    texts that collide are reported as duplicates.  That false-positive rate
    is accepted; the index is not an exact-match set.

    Args:
        store: Address store to build from.
    """

    def __init__(self, store: AddressStore) -> None:
        self._store = store
        self._by_hash: dict[int, AddressRecord] = {}
        self._built = False
        self._lock = threading.Lock()

    @property
    def is_built(self) -> bool:
        """Whether the index has been built."""
        return self._built

    @property
    def size(self) -> int:
        """Number of distinct hashes in the index."""
        return len(self._by_hash)

    def is_duplicate(self, raw_text: str) -> bool:
        """Check whether an address with the same raw-text hash is known.

        Args:
            raw_text: Original, untruncated raw text.

        Returns:
            True if the hash of ``raw_text`` is already indexed.
        """
        self._ensure_built()
        return raw_text_hash(raw_text) in self._by_hash

    def get(self, hash_value: int) -> AddressRecord | None:
        """Return the indexed address for a hash, or None."""
        self._ensure_built()
        return self._by_hash.get(hash_value)

    def register(self, address: AddressRecord) -> None:
        """Index an address by its precomputed hash.

        Later registrations of the same hash replace earlier ones.

        Raises:
            ValueError: If the address has no hash.
        """
        if address.hash is None:
            msg = f"Address {address.raw_text!r} has no hash"
            raise ValueError(msg)
        self._ensure_built()
        with self._lock:
            self._by_hash[address.hash] = address

    def _ensure_built(self) -> None:
        if self._built:
            return
        with self._lock:
            if self._built:
                return
            self._build()

    def _build(self) -> None:
        start = time.monotonic()
        by_hash: dict[int, AddressRecord] = {}
        for address in self._store.find_all():
            by_hash[address.hash] = address

        self._by_hash = by_hash
        self._built = True

        elapsed = time.monotonic() - start
        logger.info(f"Address hash index built: {len(by_hash)} entries in {elapsed:.3f}s")
