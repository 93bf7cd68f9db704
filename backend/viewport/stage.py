"""
Stage dimensions - on-screen size of the project stage shown beside the life tree.
The tree gets whatever horizontal space the stage leaves free.
"""

import math

from pydantic import BaseModel, ConfigDict, Field

STAGE_WIDTH_DEFAULT = 480
STAGE_HEIGHT_DEFAULT = 360

STAGE_SIZE_SCALES = {
    "large": 1.0,
    "largeConstrained": 0.85,
    "small": 0.5,
}

# Full screen: stage menu height + top/bottom margins and borders
MENU_HEIGHT_ADJUSTMENT = 44
FULL_SCREEN_SPACING_BORDER_ADJUSTMENT = 12


class StageDimensions(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)
    width: int
    height: int
    scale: float
    width_default: int = Field(default=STAGE_WIDTH_DEFAULT, alias="widthDefault")
    height_default: int = Field(default=STAGE_HEIGHT_DEFAULT, alias="heightDefault")


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def get_stage_dimensions(
    stage_size: str,
    is_full_screen: bool,
    screen_width: float,
    screen_height: float,
) -> StageDimensions:
    """
    Stage size in pixels. Full screen fits a 4:3 stage into the screen;
    otherwise the named stage size picks a fixed scale.
    Raises ValueError for an unknown stage size (windowed mode only).
    """
    if is_full_screen:
        height = screen_height - MENU_HEIGHT_ADJUSTMENT - FULL_SCREEN_SPACING_BORDER_ADJUSTMENT
        width = height + (height / 3)
        if width > screen_width:
            width = screen_width
            height = width * 0.75
        scale = width / STAGE_WIDTH_DEFAULT
    else:
        if stage_size not in STAGE_SIZE_SCALES:
            raise ValueError(f"Unknown stage size: {stage_size}. Available: {list(STAGE_SIZE_SCALES.keys())}")
        scale = STAGE_SIZE_SCALES[stage_size]
        width = scale * STAGE_WIDTH_DEFAULT
        height = scale * STAGE_HEIGHT_DEFAULT

    return StageDimensions(width=_round_half_up(width), height=_round_half_up(height), scale=scale)
