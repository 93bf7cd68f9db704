"""Shared utilities for layout, viewport and the organism tab."""

from .graph import build_lineage_graph, find_lineage_cycles
from .naming import dedupe_display_names, find_unique_name
from .schemas import SpriteDescriptor, normalize_descriptors

__all__ = [
    "SpriteDescriptor",
    "build_lineage_graph",
    "dedupe_display_names",
    "find_lineage_cycles",
    "find_unique_name",
    "normalize_descriptors",
]
