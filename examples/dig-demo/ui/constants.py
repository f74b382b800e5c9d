"""Layout constants and color definitions."""
from __future__ import annotations

from delve_tiles import TerrainState

# Timing
FPS = 60

# Layout
DEFAULT_TILE_SIZE = 32
STATUS_H = 52

# Quadrant colors for the fallback atlas
TERRAIN_COLORS: dict[TerrainState, tuple[int, int, int]] = {
    TerrainState.EMPTY: (232, 244, 248),
    TerrainState.DIGGABLE: (139, 115, 85),
    TerrainState.UNDIGGABLE: (44, 44, 44),
}
DIGGABLE_DOT = (118, 98, 72)
UNDIGGABLE_LINE = (70, 70, 70)
TILE_OUTLINE = (220, 220, 220)

# Base-grid debug view
DEBUG_COLORS: dict[TerrainState, tuple[int, int, int]] = {
    TerrainState.EMPTY: (252, 252, 252),
    TerrainState.DIGGABLE: (188, 188, 188),
    TerrainState.UNDIGGABLE: (124, 124, 124),
}
DEBUG_HOME_BASE = (170, 240, 170)
DEBUG_TEXT = (0, 0, 0)
DEBUG_HOME_TEXT = (0, 100, 0)

# Home base tint
HOME_BASE_COLOR = (144, 238, 144)
HOME_BASE_BORDER = (110, 190, 110)
HOME_BASE_TILE_ALPHA = 77

# Player
PLAYER_COLOR = (74, 144, 226)
PLAYER_FACING_COLOR = (44, 90, 160)
DIG_PREVIEW_COLOR = (255, 200, 0)

# UI colors
BG_COLOR = (248, 248, 248)
GRID_LINE_COLOR = (200, 200, 200)
BORDER_COLOR = (51, 51, 51)
STATUS_BG = (30, 30, 40)
TEXT_COLOR = (200, 200, 200)
TEXT_DIM = (130, 130, 140)


def compute_layout(width: int, height: int, tile_size: int) -> dict[str, int]:
    """Compute layout dimensions from the logical grid size.

    The visual tile layer sits half a tile down and right of the logical
    grid, so the map area is one extra tile wide and tall.
    """
    grid_w = (width + 1) * tile_size
    grid_h = (height + 1) * tile_size
    return {
        "tile_size": tile_size,
        "grid_w": grid_w,
        "grid_h": grid_h,
        "screen_w": max(grid_w, 480),
        "screen_h": grid_h + STATUS_H,
    }
