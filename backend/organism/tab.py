"""
Organism tab - host-side controller for the sprite life tree.
Owns the sprite list, the last computed layout and the viewport state; the host UI
calls its entry points on data updates, resizes and pointer input.
"""

from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from layout import compute_lifetree_layout
from shared import dedupe_display_names, normalize_descriptors
from viewport import Point, Viz, calc_viz, pointer_down, pointer_move, pointer_up, resize, wheel_to_zoom, zoom


class PointerEvent(BaseModel):
    """Raw pointer/wheel input in screen coordinates."""
    model_config = ConfigDict(populate_by_name=True)
    client_x: float = Field(..., alias="clientX")
    client_y: float = Field(..., alias="clientY")
    # False when the press landed on a child element (a node) rather than the drag surface
    on_surface: bool = Field(default=True, alias="onSurface")
    delta_y: float = Field(default=0.0, alias="deltaY")


EventLike = Union[PointerEvent, Dict[str, Any]]


class OrganismTab:
    def __init__(
        self,
        stage_size: str,
        is_full_screen: bool,
        screen_size: Callable[[], Tuple[float, float]],
        screen_to_layout: Callable[[Point], Point],
        sprite_loader: Optional[Callable[[], Optional[List[Any]]]] = None,
    ):
        self.stage_size = stage_size
        self.is_full_screen = is_full_screen
        self._screen_size = screen_size
        self._screen_to_layout = screen_to_layout
        self._sprite_loader = sprite_loader
        self.lib_sprites: List[Dict[str, Any]] = []
        self._layout: Optional[Dict[str, Dict[str, Any]]] = None
        width, height = screen_size()
        self.viz: Viz = calc_viz(stage_size, is_full_screen, width, height)

    @property
    def last_layout(self) -> Optional[Dict[str, Dict[str, Any]]]:
        """Most recently computed layout, None until sprites are loaded."""
        return self._layout

    def event_handlers(self) -> Dict[str, Callable[[], Any]]:
        """Entry points for the host to subscribe to its update/resize notifications."""
        return {"sprites-updated": self.update_sprites, "resize": self.update_viz}

    def update_sprites(self, sprites: Optional[List[Any]] = None) -> Optional[Dict[str, Dict[str, Any]]]:
        """Refresh the sprite list: dedupe display names, then recompute the layout."""
        if sprites is None:
            if self._sprite_loader is None:
                logger.error("Sprite library loader is not configured")
                return None
            sprites = self._sprite_loader()
        if sprites is None:
            self.lib_sprites = []
            self._layout = None
            return None

        lib_sprites = dedupe_display_names(normalize_descriptors(sprites))
        self._layout = compute_lifetree_layout(self.viz, lib_sprites)
        self.lib_sprites = lib_sprites
        logger.info("Life tree refreshed with {} sprites", len(lib_sprites))
        return self._layout

    def update_viz(self) -> Viz:
        """Resize: new viewport, same pan and zoom. A loaded layout is recomputed against it."""
        width, height = self._screen_size()
        self.viz = resize(self.viz, self.stage_size, self.is_full_screen, width, height)
        if self._layout is not None:
            self._layout = compute_lifetree_layout(self.viz, self.lib_sprites)
        return self.viz

    def _point_from_event(self, event: PointerEvent) -> Point:
        return self._screen_to_layout(Point(x=event.client_x, y=event.client_y))

    @staticmethod
    def _as_event(event: EventLike) -> PointerEvent:
        if isinstance(event, PointerEvent):
            return event
        return PointerEvent.model_validate(event)

    def handle_drag_start(self, event: EventLike) -> Viz:
        ev = self._as_event(event)
        if not ev.on_surface:
            return self.viz
        self.viz = pointer_down(self.viz, self._point_from_event(ev))
        return self.viz

    def handle_drag_move(self, event: EventLike) -> Viz:
        if not self.viz.is_pointer_down:
            return self.viz
        self.viz = pointer_move(self.viz, self._point_from_event(self._as_event(event)))
        return self.viz

    def handle_drag_stop(self, event: Optional[EventLike] = None) -> Viz:
        self.viz = pointer_up(self.viz)
        return self.viz

    def zoom(self, factor: float, point: Point) -> Viz:
        self.viz = zoom(self.viz, factor, point)
        return self.viz

    def handle_wheel(self, event: EventLike) -> Viz:
        ev = self._as_event(event)
        self.viz = wheel_to_zoom(self.viz, self._point_from_event(ev), ev.delta_y)
        return self.viz

    def render_props(self) -> Dict[str, Any]:
        """What the renderer draws from: layout keyed by identity and the camelCase viz."""
        return {"layout": self._layout, "viz": self.viz.model_dump(by_alias=True)}
