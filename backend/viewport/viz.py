"""
Viewport model for the life tree: a logical view box mapped onto the on-screen viewport.

Every transition is a pure function: it takes the current Viz and returns a new one
(models are frozen, nested boxes are replaced, never mutated). Points are always in
layout coordinates; converting raw pointer coordinates is the renderer's job.
"""

from typing import Optional

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, computed_field

from layout.constants import (
    DEFAULT_DELTA_H,
    DEFAULT_DELTA_W,
    DEFAULT_NODE_H,
    DEFAULT_NODE_W,
    MIN_ZOOM,
    RESERVED_HEIGHT,
    RESERVED_WIDTH,
    ZOOM_IN_FACTOR,
    ZOOM_OUT_FACTOR,
)

from .stage import get_stage_dimensions


class Point(BaseModel):
    model_config = ConfigDict(frozen=True)
    x: float
    y: float


class Viewport(BaseModel):
    """Physical pixels available for drawing the tree."""
    model_config = ConfigDict(frozen=True)
    width: float
    height: float


class ViewBox(BaseModel):
    """Logical window (layout coordinates) shown in the viewport."""
    model_config = ConfigDict(frozen=True)
    x: float
    y: float
    width: float
    height: float


class Measures(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    node_w: float = Field(default=DEFAULT_NODE_W, alias="nodeWidth")
    node_h: float = Field(default=DEFAULT_NODE_H, alias="nodeHeight")
    delta_w: float = Field(default=DEFAULT_DELTA_W, alias="deltaWidth")
    delta_h: float = Field(default=DEFAULT_DELTA_H, alias="deltaHeight")

    @computed_field(alias="levelHeight")
    @property
    def level_h(self) -> float:
        """Vertical distance between two generations."""
        return self.node_h + (self.delta_h * 2)


class Viz(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    viewport: Viewport
    view_box: ViewBox = Field(..., alias="viewBox")
    measures: Measures = Field(default_factory=Measures)
    zoom: float = 1.0
    is_pointer_down: bool = Field(default=False, alias="isPointerDown")
    pointer_origin: Optional[Point] = Field(default=None, alias="pointerOrigin")


def _calc_viewport(
    stage_size: str,
    is_full_screen: bool,
    screen_width: float,
    screen_height: float,
) -> Viewport:
    stage = get_stage_dimensions(stage_size, is_full_screen, screen_width, screen_height)
    return Viewport(
        width=screen_width - stage.width - RESERVED_WIDTH,
        height=screen_height - RESERVED_HEIGHT,
    )


def calc_viz(
    stage_size: str,
    is_full_screen: bool,
    screen_width: float,
    screen_height: float,
    measures: Optional[Measures] = None,
) -> Viz:
    """Initial Viz: view box as large as the viewport, horizontally centered on x=0."""
    vp = _calc_viewport(stage_size, is_full_screen, screen_width, screen_height)
    return Viz(
        viewport=vp,
        view_box=ViewBox(x=-vp.width / 2, y=0, width=vp.width, height=vp.height),
        measures=measures or Measures(),
    )


def resize(
    viz: Viz,
    stage_size: str,
    is_full_screen: bool,
    screen_width: float,
    screen_height: float,
) -> Viz:
    """Recompute the viewport for a new screen size, keeping pan position and zoom."""
    vp = _calc_viewport(stage_size, is_full_screen, screen_width, screen_height)
    view_box = viz.view_box.model_copy(update={
        "width": vp.width * viz.zoom,
        "height": vp.height * viz.zoom,
    })
    return viz.model_copy(update={"viewport": vp, "view_box": view_box})


def pointer_down(viz: Viz, point: Point, on_surface: bool = True) -> Viz:
    """Start a pan. Presses landing on a child element (a node) are ignored."""
    if not on_surface:
        return viz
    return viz.model_copy(update={"is_pointer_down": True, "pointer_origin": point})


def pointer_move(viz: Viz, point: Point) -> Viz:
    if not viz.is_pointer_down or viz.pointer_origin is None:
        return viz
    origin = viz.pointer_origin
    view_box = viz.view_box.model_copy(update={
        "x": viz.view_box.x - (point.x - origin.x),
        "y": viz.view_box.y - (point.y - origin.y),
    })
    return viz.model_copy(update={"view_box": view_box})


def pointer_up(viz: Viz) -> Viz:
    if not viz.is_pointer_down:
        return viz
    return viz.model_copy(update={"is_pointer_down": False})


def zoom(viz: Viz, factor: float, anchor: Point) -> Viz:
    """
    Scale the view box by factor keeping anchor fixed in layout space.
    factor > 1 zooms out; refused once zoom is already past MIN_ZOOM.
    """
    if viz.zoom > MIN_ZOOM and factor > 1.0:
        logger.debug("Zoom out refused at zoom={:.3f}", viz.zoom)
        return viz
    old = viz.view_box
    view_box = ViewBox(
        x=(old.x * factor) + (anchor.x - (anchor.x * factor)),
        y=(old.y * factor) + (anchor.y - (anchor.y * factor)),
        width=old.width * factor,
        height=old.height * factor,
    )
    return viz.model_copy(update={"zoom": viz.zoom * factor, "view_box": view_box})


def wheel_to_zoom(viz: Viz, point: Point, delta_y: float) -> Viz:
    """Wheel down zooms out, anything else zooms in."""
    if delta_y > 0:
        return zoom(viz, ZOOM_OUT_FACTOR, point)
    return zoom(viz, ZOOM_IN_FACTOR, point)
