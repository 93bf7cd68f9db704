"""Tests for the organism tab controller."""

import pytest

from layout import ROOT_ID
from organism import OrganismTab, PointerEvent
from viewport import Point


def _halve(p: Point) -> Point:
    return Point(x=p.x / 2, y=p.y / 2)


@pytest.fixture
def screen():
    return [1920, 1080]


@pytest.fixture
def tab(screen):
    return OrganismTab("large", False, lambda: tuple(screen), _halve)


class TestSprites:
    def test_starts_without_layout(self, tab):
        assert tab.last_layout is None
        assert tab.viz.viewport.width == 1400

    def test_update_with_list(self, tab):
        layout = tab.update_sprites([
            {"identity": "a", "displayName": "cat"},
            {"identity": "b", "parentIdentity": "a", "displayName": "cat"},
        ])
        assert layout is tab.last_layout
        assert set(layout) == {ROOT_ID, "a", "b"}
        assert [s["display_name"] for s in tab.lib_sprites] == ["cat", "cat 1"]
        assert layout["b"]["display_name"] == "cat 1"

    def test_update_from_loader(self, screen):
        calls = []

        def loader():
            calls.append(1)
            return [{"identity": "a", "displayName": "sprite1"}, {"identity": "b", "displayName": "sprite1"}]

        tab = OrganismTab("small", False, lambda: tuple(screen), _halve, sprite_loader=loader)
        layout = tab.update_sprites()
        assert calls == [1]
        assert layout["b"]["display_name"] == "sprite2"

    def test_without_loader(self, tab):
        assert tab.update_sprites() is None
        assert tab.last_layout is None

    def test_loader_not_ready(self, screen):
        tab = OrganismTab("large", False, lambda: tuple(screen), _halve, sprite_loader=lambda: None)
        assert tab.update_sprites() is None
        assert tab.lib_sprites == []

    def test_event_handlers(self, tab):
        handlers = tab.event_handlers()
        assert handlers["sprites-updated"] == tab.update_sprites
        assert handlers["resize"] == tab.update_viz

    def test_bad_record_does_not_block_refresh(self, tab):
        tab.update_sprites([{"identity": "a"}, {"identity": "b", "parentIdentity": "a"}])
        layout = tab.update_sprites([
            {"identity": "a"},
            {"identity": "b", "parentIdentity": "a"},
            {"identity": "c"},
            {"identity": "bad", "parentIdentity": "bad"},
        ])
        assert tab.last_layout is layout
        assert layout["c"]["visible"] is True
        assert layout["c"]["x"] is not None
        assert layout["bad"]["x"] is None

    def test_null_display_name(self, tab):
        layout = tab.update_sprites([
            {"identity": "a", "displayName": None},
            {"identity": "b", "displayName": None},
        ])
        assert layout["a"]["display_name"] == ""
        assert layout["b"]["display_name"] == " 1"


class TestResize:
    def test_update_viz_recomputes_layout(self, tab, screen):
        tab.update_sprites([{"identity": "a"}])
        old_root_y = tab.last_layout[ROOT_ID]["y"]
        screen[:] = [1600, 900]
        viz = tab.update_viz()
        assert viz.viewport.width == 1600 - 480 - 40
        assert viz.viewport.height == 800
        assert tab.last_layout[ROOT_ID]["y"] == old_root_y - 180

    def test_update_viz_before_load(self, tab, screen):
        screen[:] = [1600, 900]
        tab.update_viz()
        assert tab.last_layout is None


class TestPointer:
    def test_drag(self, tab):
        x0 = tab.viz.view_box.x
        tab.handle_drag_start({"clientX": 100, "clientY": 100})
        assert tab.viz.pointer_origin == Point(x=50, y=50)
        tab.handle_drag_move(PointerEvent(client_x=120, client_y=90))
        assert tab.viz.view_box.x == x0 - 10
        assert tab.viz.view_box.y == 5
        tab.handle_drag_stop()
        assert tab.viz.is_pointer_down is False

    def test_press_on_node_does_not_pan(self, tab):
        before = tab.viz
        tab.handle_drag_start({"clientX": 100, "clientY": 100, "onSurface": False})
        tab.handle_drag_move({"clientX": 300, "clientY": 300})
        assert tab.viz is before

    def test_wheel(self, tab):
        tab.handle_wheel({"clientX": 0, "clientY": 0, "deltaY": 3})
        assert tab.viz.zoom == 1.05
        tab.handle_wheel({"clientX": 0, "clientY": 0, "deltaY": -3})
        assert tab.viz.zoom == pytest.approx(1.05 * 0.95)

    def test_explicit_zoom(self, tab):
        tab.zoom(0.5, Point(x=0, y=0))
        assert tab.viz.zoom == 0.5
        assert tab.viz.view_box.width == 700

    def test_render_props(self, tab):
        tab.update_sprites([])
        props = tab.render_props()
        assert list(props["layout"]) == [ROOT_ID]
        assert props["viz"]["viewBox"]["width"] == 1400
        assert props["viz"]["isPointerDown"] is False
