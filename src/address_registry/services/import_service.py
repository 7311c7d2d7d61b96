"""Import service: bulk address import with dedup admission and batched writes."""

import dataclasses
import threading
import time
from collections.abc import Iterable
from dataclasses import dataclass

from loguru import logger

from address_registry.lib.addresses.hashing import raw_text_hash
from address_registry.lib.addresses.truncation import truncate_fields
from address_registry.lib.addresses.types import AddressRecord
from address_registry.lib.stores.base import AddressStore
from address_registry.services.dedup_index import DedupIndex

DEFAULT_BATCH_SIZE = 1000
DEFAULT_PROGRESS_INTERVAL = 40000


@dataclass
class ImportCounters:
    """Cumulative counters across every import call of one pipeline.

    ``admitted`` counts records that passed the dedup check; ``imported``
    counts only records whose batch the store accepted.
    """

    admitted: int = 0
    imported: int = 0
    duplicates: int = 0
    failed: int = 0
    flushes: int = 0
    store_seconds: float = 0.0


class ImportPipeline:
    """Admits new addresses through the dedup index and writes them in batches.

    Args:
        dedup_index: Shared index consulted and grown by every import.
        store: Address store receiving the batches.
        batch_size: Records per ``create_batch`` call.
        progress_interval: Log progress every N admitted records, counted
            across calls.
    """

    def __init__(
        self,
        dedup_index: DedupIndex,
        store: AddressStore,
        *,
        batch_size: int = DEFAULT_BATCH_SIZE,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
    ) -> None:
        if batch_size <= 0:
            msg = f"batch_size must be positive, got {batch_size}"
            raise ValueError(msg)
        if progress_interval <= 0:
            msg = f"progress_interval must be positive, got {progress_interval}"
            raise ValueError(msg)
        self._dedup_index = dedup_index
        self._store = store
        self._batch_size = batch_size
        self._progress_interval = progress_interval
        self._counters = ImportCounters()
        self._counters_lock = threading.Lock()

    @property
    def counters(self) -> ImportCounters:
        """Snapshot of the cumulative counters."""
        with self._counters_lock:
            return dataclasses.replace(self._counters)

    def import_addresses(self, records: Iterable[AddressRecord]) -> int:
        """Import addresses in input order.

        Each record is checked against the dedup index using its original raw
        text.  New records are hashed, registered in the index (so repeats
        later in the same input are caught), truncated to the column widths,
        and written in batches.  A record that fails admission is logged and
        skipped; a rejected batch write propagates to the caller, leaving
        earlier batches persisted.

        Args:
            records: Addresses to import.  Admitted records are modified in
                place (hash, truncation, store-assigned id).

        Returns:
            Number of records admitted.

        Raises:
            StoreError: If the store rejects a batch.
        """
        imported = duplicates = failed = 0
        batch: list[AddressRecord] = []
        try:
            for record in records:
                try:
                    if self._dedup_index.is_duplicate(record.raw_text):
                        duplicates += 1
                        continue
                    self._admit(record)
                except Exception:
                    logger.exception(f"[addr-imp] Failed to import address {record.raw_text!r}")
                    failed += 1
                    continue

                batch.append(record)
                imported += 1
                if len(batch) >= self._batch_size:
                    self._flush(batch)
                    batch = []

                with self._counters_lock:
                    self._counters.admitted += 1
                    admitted_total = self._counters.admitted
                if admitted_total % self._progress_interval == 0:
                    self._log_stats(f"[addr-imp] Progress: {admitted_total} admitted")

            if batch:
                self._flush(batch)
        finally:
            with self._counters_lock:
                self._counters.duplicates += duplicates
                self._counters.failed += failed

        self._log_stats(f"[addr-imp] Import complete: {imported} admitted, {duplicates} duplicate, {failed} failed")
        return imported

    def _admit(self, record: AddressRecord) -> None:
        if not record.raw_text:
            msg = "raw_text is empty"
            raise ValueError(msg)
        # Hash covers the untruncated raw text
        record.hash = raw_text_hash(record.raw_text)
        self._dedup_index.register(record)
        truncated = truncate_fields(record)
        if truncated:
            logger.debug(f"[addr-imp] Truncated {', '.join(truncated)} of address hash {record.hash}")

    def _flush(self, batch: list[AddressRecord]) -> None:
        start = time.monotonic()
        try:
            self._store.create_batch(batch)
        finally:
            elapsed = time.monotonic() - start
            with self._counters_lock:
                self._counters.store_seconds += elapsed
        with self._counters_lock:
            self._counters.imported += len(batch)
            self._counters.flushes += 1

    def _log_stats(self, message: str) -> None:
        counters = self.counters
        logger.bind(import_stats=dataclasses.asdict(counters)).info(
            f"{message} (cumulative: {counters.imported} persisted, {counters.duplicates} duplicate, "
            f"store time {counters.store_seconds:.3f}s)"
        )
