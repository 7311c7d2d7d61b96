"""Address data types."""

from dataclasses import dataclass


@dataclass
class AddressRecord:
    """Pre-split address as it flows through import and the dedup index.

    ``hash`` is filled in during import from the untruncated ``raw_text``;
    ``id`` is assigned by the store when the record is persisted.
    """

    raw_text: str
    text: str = ""
    village: str = ""
    road: str = ""
    road_num: str = ""
    building_num: str = ""
    province_id: int = 0
    city_id: int = 0
    county_id: int = 0
    hash: int | None = None
    id: int | None = None
