"""Field-length policy for persisted addresses.

Oversized fields are head-truncated rather than rejected.  ``raw_text`` is
truncated last, after its dedup hash has been taken.
"""

from address_registry.lib.addresses.types import AddressRecord

_BMP_MAX = 0xFFFF

# Applied in this order; widths match the ``addresses`` table columns
FIELD_LIMITS: tuple[tuple[str, int], ...] = (
    ("text", 100),
    ("village", 5),
    ("road", 8),
    ("road_num", 10),
    ("building_num", 20),
    ("raw_text", 150),
)


def utf16_length(value: str) -> int:
    """Return the length of ``value`` in UTF-16 code units."""
    return len(value) + sum(1 for char in value if ord(char) > _BMP_MAX)


def head(value: str, length: int) -> str:
    """Return the longest prefix of ``value`` fitting in ``length`` UTF-16 code units.

    Lengths are measured like the dedup hash measures text.  A character
    outside the BMP counts as two units and is dropped whole when only one
    unit is left.
    """
    if utf16_length(value) <= length:
        return value
    units = 0
    for index, char in enumerate(value):
        units += 2 if ord(char) > _BMP_MAX else 1
        if units > length:
            return value[:index]
    return value


def truncate_fields(record: AddressRecord) -> list[str]:
    """Truncate every oversized field of a record in place.

    Args:
        record: Address to truncate.

    Returns:
        Names of the fields that were shortened.
    """
    truncated: list[str] = []
    for field_name, limit in FIELD_LIMITS:
        value = getattr(record, field_name)
        if value is None:
            setattr(record, field_name, "")
            continue
        if utf16_length(value) > limit:
            setattr(record, field_name, head(value, limit))
            truncated.append(field_name)
    return truncated
