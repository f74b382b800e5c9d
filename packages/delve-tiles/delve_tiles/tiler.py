"""AutoTiler - dual-grid corner sampling and dirty-tile computation."""
from __future__ import annotations

from typing import Callable, Iterable

from delve_tiles.catalog import PatternCatalog
from delve_tiles.grid import TerrainGrid
from delve_tiles.types import Cell, CornerPattern, TileRef

# Visual tiles whose 2x2 window contains logical cell (0, 0), as offsets.
_WINDOW_OFFSETS = [(-1, -1), (0, -1), (-1, 0), (0, 0)]


class AutoTiler:
    """Resolves visual tiles from the four logical cells at their corners.

    Visual tile ``(x, y)`` sits between logical cells ``(x, y)``,
    ``(x+1, y)``, ``(x, y+1)`` and ``(x+1, y+1)``. The visual range is the
    same ``width x height`` as the logical grid; the last column and row
    sample one synthetic out-of-bounds corner, which reads UNDIGGABLE, so
    the map edges always render enclosed.

    Holds a reference to the grid, never a copy: queries always see the
    latest mutation.
    """

    def __init__(self, grid: TerrainGrid, catalog: PatternCatalog | None = None) -> None:
        self._grid = grid
        self._catalog = catalog if catalog is not None else PatternCatalog()

    @property
    def grid(self) -> TerrainGrid:
        return self._grid

    @property
    def catalog(self) -> PatternCatalog:
        return self._catalog

    def in_visual_range(self, x: int, y: int) -> bool:
        return 0 <= x < self._grid.width and 0 <= y < self._grid.height

    # --- Resolution ---

    def sample(self, x: int, y: int) -> CornerPattern:
        get = self._grid.get
        return CornerPattern(get(x, y), get(x + 1, y), get(x, y + 1), get(x + 1, y + 1))

    def resolve_ref(self, x: int, y: int) -> TileRef:
        return self._catalog.lookup(self.sample(x, y))

    def resolve(self, x: int, y: int) -> int:
        """Atlas index for a visual tile, -1 when all four corners are empty."""
        return self._catalog.lookup_index(self.sample(x, y))

    def resolve_all(self) -> dict[Cell, int]:
        """Resolve every visual tile."""
        return {
            (x, y): self.resolve(x, y)
            for y in range(self._grid.height)
            for x in range(self._grid.width)
        }

    def tile_touches(self, x: int, y: int, predicate: Callable[[int, int], bool]) -> bool:
        """True if any of the tile's four logical corners satisfies *predicate*."""
        return any(
            predicate(x + dx, y + dy) for dx, dy in ((0, 0), (1, 0), (0, 1), (1, 1))
        )

    # --- Invalidation ---

    def dirty_tiles_for(self, cell_x: int, cell_y: int) -> set[Cell]:
        """Visual tiles whose sample window includes logical cell ``(cell_x, cell_y)``.

        After a single-cell mutation only these tiles can change; every other
        visual tile resolves exactly as before.
        """
        result: set[Cell] = set()
        for dx, dy in _WINDOW_OFFSETS:
            tx, ty = cell_x + dx, cell_y + dy
            if self.in_visual_range(tx, ty):
                result.add((tx, ty))
        return result

    def dirty_tiles_for_many(self, cells: Iterable[Cell]) -> set[Cell]:
        """Union of :meth:`dirty_tiles_for` over a batch of mutated cells."""
        result: set[Cell] = set()
        for cx, cy in cells:
            result |= self.dirty_tiles_for(cx, cy)
        return result
