"""Regions library public API.

Provides region types, position/name classification, and the JSON tree reader.
"""

from address_registry.lib.regions.classifier import classify_city, classify_province, is_unspecified
from address_registry.lib.regions.tree_loader import load_region_tree, parse_region_tree
from address_registry.lib.regions.types import (
    DEFAULT_ROOT_NAME,
    LEAF_TYPES,
    PROVINCE_LEVEL_CITIES,
    UNSPECIFIED_PREFIXES,
    RegionNode,
    RegionType,
)

__all__ = [
    "DEFAULT_ROOT_NAME",
    "LEAF_TYPES",
    "PROVINCE_LEVEL_CITIES",
    "UNSPECIFIED_PREFIXES",
    "RegionNode",
    "RegionType",
    "classify_city",
    "classify_province",
    "is_unspecified",
    "load_region_tree",
    "parse_region_tree",
]
