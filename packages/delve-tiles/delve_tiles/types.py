"""Terrain states, corner patterns, and tagged tile references."""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

Cell = tuple[int, int]


class TerrainState(IntEnum):
    """Logical value of a single base-grid cell.

    Ordinals are stable; renderers index color tables with them.
    """

    EMPTY = 0
    DIGGABLE = 1
    UNDIGGABLE = 2

    @property
    def glyph(self) -> str:
        return _GLYPHS[self]


_GLYPHS = {
    TerrainState.EMPTY: ".",
    TerrainState.DIGGABLE: "+",
    TerrainState.UNDIGGABLE: "#",
}


class CornerPattern(NamedTuple):
    """The four logical cells sampled by one visual tile."""

    top_left: int
    top_right: int
    bottom_left: int
    bottom_right: int

    @property
    def name(self) -> str:
        """Ordinals joined, e.g. ``"1202"``."""
        return "".join(str(int(v)) for v in self)

    def is_empty(self) -> bool:
        return not any(self)


EMPTY_PATTERN = CornerPattern(0, 0, 0, 0)


@dataclass(frozen=True, slots=True)
class PatternEntry:
    """A catalog slot: a corner pattern and its place in the tile atlas.

    Attributes:
        pattern: The sampled corners.
        tile_index: Sequential index, -1 for the all-empty sentinel.
        atlas_x: Column in the atlas (``tile_index % columns``).
        atlas_y: Row in the atlas (``tile_index // columns``).
    """

    pattern: CornerPattern
    tile_index: int
    atlas_x: int
    atlas_y: int


@dataclass(frozen=True, slots=True)
class Tile:
    """An atlas tile addressed by index."""

    index: int


@dataclass(frozen=True, slots=True)
class EmptyTile:
    """All four corners empty: draw background, nothing from the atlas."""


EMPTY_TILE = EmptyTile()

TileRef = EmptyTile | Tile


class CatalogError(LookupError):
    """Raised on catalog integrity defects and lookups outside the catalog."""
