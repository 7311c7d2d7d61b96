"""Region tree reader for nested JSON source files.

Reads a document of the shape ``{"name": "中国", "children": [{"name": ...,
"children": [...]}, ...]}`` and returns an unpersisted :class:`RegionNode`
tree ready for import.
"""

import json
from pathlib import Path

from loguru import logger
from pydantic import BaseModel, Field, ValidationError

from address_registry.lib.regions.types import RegionNode


class RegionTreeSchema(BaseModel):
    """Validated shape of one node in a region tree file."""

    name: str = Field(min_length=1, max_length=50)
    children: list["RegionTreeSchema"] = Field(default_factory=list)

    def to_node(self) -> RegionNode:
        """Convert to an unpersisted RegionNode, preserving child order."""
        return RegionNode(
            name=self.name.strip(),
            children=[child.to_node() for child in self.children],
        )


def parse_region_tree(data: object) -> RegionNode:
    """Validate decoded JSON and build the region tree.

    Args:
        data: Decoded JSON document.

    Returns:
        Root RegionNode with children populated.

    Raises:
        ValueError: If the document does not describe a region tree.
    """
    try:
        schema = RegionTreeSchema.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid region tree: {exc.error_count()} validation error(s): {exc}"
        raise ValueError(msg) from exc
    return schema.to_node()


def load_region_tree(file_path: Path) -> RegionNode:
    """Read a region tree JSON file.

    Args:
        file_path: Path to the JSON file (UTF-8).

    Returns:
        Root RegionNode with children populated.

    Raises:
        ValueError: If the file is not valid JSON or not a region tree.
    """
    try:
        data = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Region tree file {file_path} is not valid JSON: {exc}"
        raise ValueError(msg) from exc

    root = parse_region_tree(data)
    logger.info(f"Loaded region tree '{root.name}' from {file_path} ({sum(1 for _ in root.iter_tree())} nodes)")
    return root
