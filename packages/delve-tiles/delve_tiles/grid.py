"""TerrainGrid - the logical lattice of terrain states."""
from __future__ import annotations

from typing import Iterator, Sequence

from delve_tiles.types import Cell, TerrainState

_DIRS = [(0, -1), (-1, 0), (1, 0), (0, 1)]


class TerrainGrid:
    """Dense ``width x height`` lattice of TerrainState.

    Reads outside the grid report UNDIGGABLE and writes outside it are
    ignored, so corner sampling along the edges never special-cases bounds.
    ``dig`` is the gameplay mutation path; ``set`` is for authoring tools.
    """

    def __init__(
        self,
        width: int,
        height: int,
        fill: TerrainState = TerrainState.EMPTY,
    ) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Grid size must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        fill = TerrainState(fill)
        self._rows: list[list[TerrainState]] = [
            [fill] * width for _ in range(height)
        ]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> TerrainGrid:
        """Build a grid from row-major content (``rows[y][x]``)."""
        _check_rows(rows)
        grid = cls(len(rows[0]), len(rows))
        grid.replace(rows)
        return grid

    # --- Properties ---

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    # --- Reads ---

    def get(self, x: int, y: int) -> TerrainState:
        if not self.in_bounds(x, y):
            return TerrainState.UNDIGGABLE
        return self._rows[y][x]

    def cells(self) -> Iterator[tuple[int, int, TerrainState]]:
        """Yield ``(x, y, state)`` in row-major order."""
        for y, row in enumerate(self._rows):
            for x, state in enumerate(row):
                yield x, y, state

    def count(self, state: TerrainState) -> int:
        return sum(row.count(state) for row in self._rows)

    def neighbors(self, x: int, y: int) -> list[Cell]:
        """4-connected in-bounds neighbors."""
        result: list[Cell] = []
        for dx, dy in _DIRS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                result.append((nx, ny))
        return result

    def rows(self) -> list[list[TerrainState]]:
        """Copy of the content, row-major."""
        return [list(row) for row in self._rows]

    def render_text(self) -> str:
        """``.`` empty, ``+`` diggable, ``#`` undiggable; one line per row."""
        return "\n".join("".join(s.glyph for s in row) for row in self._rows)

    # --- Mutation ---

    def set(self, x: int, y: int, state: TerrainState) -> None:
        if self.in_bounds(x, y):
            self._rows[y][x] = TerrainState(state)

    def dig(self, x: int, y: int) -> bool:
        """Turn a DIGGABLE cell EMPTY. Returns False (no change) otherwise."""
        if self.get(x, y) is not TerrainState.DIGGABLE:
            return False
        self._rows[y][x] = TerrainState.EMPTY
        return True

    def fill_rect(self, x1: int, y1: int, x2: int, y2: int, state: TerrainState) -> None:
        """Fill an inclusive rectangle, clipped to the grid."""
        lo_x, hi_x = max(0, min(x1, x2)), min(self._width - 1, max(x1, x2))
        lo_y, hi_y = max(0, min(y1, y2)), min(self._height - 1, max(y1, y2))
        state = TerrainState(state)
        for y in range(lo_y, hi_y + 1):
            for x in range(lo_x, hi_x + 1):
                self._rows[y][x] = state

    def replace(self, rows: Sequence[Sequence[int]]) -> None:
        """Swap in new content wholesale; width and height follow it."""
        _check_rows(rows)
        self._rows = [[TerrainState(v) for v in row] for row in rows]
        self._height = len(self._rows)
        self._width = len(self._rows[0])


def _check_rows(rows: Sequence[Sequence[int]]) -> None:
    if not rows or not rows[0]:
        raise ValueError("Grid content must have at least one row and column")
    width = len(rows[0])
    for y, row in enumerate(rows):
        if len(row) != width:
            raise ValueError(
                f"Ragged grid content: row {y} has {len(row)} cells, expected {width}"
            )
