"""delve-tiles - Dual-grid autotiling for a three-state terrain lattice."""
from delve_tiles.catalog import EMPTY_INDEX, PatternCatalog, enumerate_patterns
from delve_tiles.grid import TerrainGrid
from delve_tiles.tiler import AutoTiler
from delve_tiles.types import (
    EMPTY_PATTERN,
    EMPTY_TILE,
    CatalogError,
    Cell,
    CornerPattern,
    EmptyTile,
    PatternEntry,
    TerrainState,
    Tile,
    TileRef,
)

__all__ = [
    "AutoTiler",
    "CatalogError",
    "Cell",
    "CornerPattern",
    "EMPTY_INDEX",
    "EMPTY_PATTERN",
    "EMPTY_TILE",
    "EmptyTile",
    "PatternCatalog",
    "PatternEntry",
    "TerrainGrid",
    "TerrainState",
    "Tile",
    "TileRef",
    "enumerate_patterns",
]
