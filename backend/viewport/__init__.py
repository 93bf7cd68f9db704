"""Viewport module - pan/zoom state over the life tree layout."""

from .stage import StageDimensions, get_stage_dimensions
from .viz import (
    Measures,
    Point,
    ViewBox,
    Viewport,
    Viz,
    calc_viz,
    pointer_down,
    pointer_move,
    pointer_up,
    resize,
    wheel_to_zoom,
    zoom,
)

__all__ = [
    "Measures",
    "Point",
    "StageDimensions",
    "ViewBox",
    "Viewport",
    "Viz",
    "calc_viz",
    "get_stage_dimensions",
    "pointer_down",
    "pointer_move",
    "pointer_up",
    "resize",
    "wheel_to_zoom",
    "zoom",
]
