"""Region type classification by tree position and name."""

from address_registry.lib.regions.types import (
    PROVINCE_LEVEL_CITIES,
    UNSPECIFIED_PREFIXES,
    RegionNode,
    RegionType,
)


def is_unspecified(name: str) -> bool:
    """Check whether a region name is an "other/unspecified" placeholder.

    Args:
        name: Region name from the source dataset.

    Returns:
        True if the name starts with one of the placeholder markers.
    """
    return name.startswith(UNSPECIFIED_PREFIXES)


def classify_province(node: RegionNode) -> RegionType:
    """Classify a second-level region."""
    if node.name in PROVINCE_LEVEL_CITIES:
        return RegionType.PROVINCE_LEVEL_CITY1
    return RegionType.PROVINCE


def classify_city(node: RegionNode) -> RegionType:
    """Classify a third-level region.

    A municipality repeated under its province is ``PROVINCE_LEVEL_CITY2``;
    otherwise a city with counties below it is ``CITY`` and a childless one
    is a ``CITY_LEVEL_COUNTY`` leaf.
    """
    if node.name in PROVINCE_LEVEL_CITIES:
        return RegionType.PROVINCE_LEVEL_CITY2
    if node.children:
        return RegionType.CITY
    return RegionType.CITY_LEVEL_COUNTY
