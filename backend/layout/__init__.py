"""Layout module - computes the generational life tree layout for sprite lineages."""

from .constants import ROOT_ID
from .tree_layout import (
    LayoutInvariantError,
    calc_group_width,
    compute_lifetree_layout,
    update_frontier_layout,
)

__all__ = [
    "ROOT_ID",
    "LayoutInvariantError",
    "calc_group_width",
    "compute_lifetree_layout",
    "update_frontier_layout",
]
