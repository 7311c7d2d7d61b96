"""Region data types and the fixed naming rules of the Chinese hierarchy."""

from dataclasses import dataclass, field
from enum import StrEnum


class RegionType(StrEnum):
    """Administrative level of a region, derived from its name and position."""

    COUNTRY = "country"
    PROVINCE = "province"
    # Municipality at the province level (e.g. 北京 directly under 中国)
    PROVINCE_LEVEL_CITY1 = "province_level_city1"
    # Municipality repeated at the city level (e.g. 北京市 under 北京)
    PROVINCE_LEVEL_CITY2 = "province_level_city2"
    CITY = "city"
    CITY_LEVEL_COUNTY = "city_level_county"
    COUNTY = "county"


# Leaf levels: the cache never fetches children below these
LEAF_TYPES = frozenset({RegionType.COUNTY, RegionType.CITY_LEVEL_COUNTY})

PROVINCE_LEVEL_CITIES = frozenset(
    {
        "北京",
        "北京市",
        "上海",
        "上海市",
        "重庆",
        "重庆市",
        "天津",
        "天津市",
    }
)

# Placeholder nodes ("other counties", "other districts") carried by source datasets
UNSPECIFIED_PREFIXES = ("其它", "其他")

DEFAULT_ROOT_NAME = "中国"


@dataclass
class RegionNode:
    """One region with its (optionally populated) ordered children."""

    name: str
    id: int | None = None
    parent_id: int = 0
    type: RegionType | None = None
    children: list["RegionNode"] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        """Whether this region sits at a level the hierarchy never expands."""
        return self.type in LEAF_TYPES

    def iter_tree(self):
        """Yield this region and all populated descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.iter_tree()
