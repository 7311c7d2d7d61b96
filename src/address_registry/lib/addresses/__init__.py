"""Addresses library public API.

Provides the address record type, the dedup hash, the field-length policy,
and the chunked CSV reader.
"""

from address_registry.lib.addresses.hashing import raw_text_hash
from address_registry.lib.addresses.parser import parse_address_chunks
from address_registry.lib.addresses.truncation import FIELD_LIMITS, head, truncate_fields
from address_registry.lib.addresses.types import AddressRecord

__all__ = [
    "FIELD_LIMITS",
    "AddressRecord",
    "head",
    "parse_address_chunks",
    "raw_text_hash",
    "truncate_fields",
]
