"""Player - grid position, facing, and digging through the terrain grid."""
from __future__ import annotations

import logging

from delve_tiles import AutoTiler, Cell, TerrainState

logger = logging.getLogger(__name__)

# Direction keys accepted by Player.step.
DIRECTIONS: dict[str, Cell] = {
    "up": (0, -1),
    "down": (0, 1),
    "left": (-1, 0),
    "right": (1, 0),
}


class Player:
    """A digger on the logical grid.

    Holds the tiler (and through it the grid) by reference. Moves only into
    empty in-bounds cells; the facing direction follows every attempted
    move, blocked or not, so the player can turn to face a wall and dig it.
    """

    def __init__(self, tiler: AutoTiler, x: int, y: int) -> None:
        self._tiler = tiler
        self.x = x
        self.y = y
        self.facing: Cell = (0, 1)

    @property
    def position(self) -> Cell:
        return (self.x, self.y)

    def can_move_to(self, x: int, y: int) -> bool:
        grid = self._tiler.grid
        return grid.in_bounds(x, y) and grid.get(x, y) is TerrainState.EMPTY

    def move(self, dx: int, dy: int) -> bool:
        """Attempt a one-cell move. Returns True if the player moved."""
        if dx == 0 and dy == 0:
            return False
        self.facing = (dx, dy)
        nx, ny = self.x + dx, self.y + dy
        if not self.can_move_to(nx, ny):
            return False
        self.x, self.y = nx, ny
        return True

    def step(self, direction: str) -> bool:
        """Move by direction name (``up``, ``down``, ``left``, ``right``)."""
        dx, dy = DIRECTIONS[direction]
        return self.move(dx, dy)

    def place(self, x: int, y: int) -> bool:
        """Teleport to an empty cell, e.g. the spawn point after regeneration."""
        if not self.can_move_to(x, y):
            return False
        self.x, self.y = x, y
        return True

    def target(self) -> Cell:
        """The cell in front of the player."""
        return (self.x + self.facing[0], self.y + self.facing[1])

    def can_dig(self) -> bool:
        tx, ty = self.target()
        return self._tiler.grid.get(tx, ty) is TerrainState.DIGGABLE

    def dig(self) -> set[Cell] | None:
        """Dig the cell in front. Returns the visual tiles to redraw, or None."""
        tx, ty = self.target()
        if not self._tiler.grid.dig(tx, ty):
            return None
        logger.debug("dug (%d, %d)", tx, ty)
        return self._tiler.dirty_tiles_for(tx, ty)
