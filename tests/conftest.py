"""Shared fixtures for life tree tests."""

import pytest

from viewport import Measures, ViewBox, Viewport, Viz


@pytest.fixture
def viz():
    """800x600 viewport, default measures, view box anchored at the origin."""
    return Viz(
        viewport=Viewport(width=800, height=600),
        view_box=ViewBox(x=0, y=0, width=800, height=600),
        measures=Measures(),
    )


@pytest.fixture
def abc_sprites():
    return [
        {"identity": "a", "display_name": "a"},
        {"identity": "b", "parent_identity": "a", "display_name": "b"},
        {"identity": "c", "parent_identity": "a", "display_name": "c"},
    ]
