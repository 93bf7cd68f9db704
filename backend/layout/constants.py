"""
Shared layout constants for the life tree and its viewport.
Horizontal and vertical measures are kept apart because group widths use the vertical pair.
"""

import os


def _float_env(name: str, default: float) -> float:
    v = os.environ.get(name)
    return float(v) if v is not None else default


def _int_env(name: str, default: int) -> int:
    v = os.environ.get(name)
    return int(v) if v is not None else default


# Fictitious root every parentless sprite hangs from (never rendered)
ROOT_ID = "parent_0"

# Node dimensions
DEFAULT_NODE_W = _float_env("LIFETREE_NODE_W", 100)
DEFAULT_NODE_H = _float_env("LIFETREE_NODE_H", 150)

# Half gaps: horizontal between siblings, vertical between generations
DEFAULT_DELTA_W = _float_env("LIFETREE_DELTA_W", 25)
DEFAULT_DELTA_H = _float_env("LIFETREE_DELTA_H", 15)

# Screen space taken by surrounding chrome (menu bar, tabs, margins)
RESERVED_WIDTH = _int_env("LIFETREE_RESERVED_WIDTH", 40)
RESERVED_HEIGHT = _int_env("LIFETREE_RESERVED_HEIGHT", 100)

# Zoom-out is refused once zoom exceeds this
MIN_ZOOM = 2.0
ZOOM_OUT_FACTOR = 1.05
ZOOM_IN_FACTOR = 0.95
