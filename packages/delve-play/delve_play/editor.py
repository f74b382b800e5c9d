"""TileEditor - authoring-time terrain cycling with home-base protection."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from delve_mapgen import MapGenerator
from delve_tiles import AutoTiler, Cell, TerrainState

from delve_play.player import Player

logger = logging.getLogger(__name__)

_CYCLE = {
    TerrainState.EMPTY: TerrainState.DIGGABLE,
    TerrainState.DIGGABLE: TerrainState.UNDIGGABLE,
    TerrainState.UNDIGGABLE: TerrainState.EMPTY,
}


@dataclass(frozen=True)
class EditResult:
    x: int
    y: int
    before: TerrainState
    after: TerrainState
    dirty: frozenset[Cell]


class TileEditor:
    """Cycles a cell Empty -> Diggable -> Undiggable -> Empty.

    Writes through ``TerrainGrid.set``. Refuses cells outside the grid,
    inside the home base, and under the player.
    """

    def __init__(self, tiler: AutoTiler, generator: MapGenerator, player: Player) -> None:
        self._tiler = tiler
        self._generator = generator
        self._player = player

    def can_edit(self, x: int, y: int) -> bool:
        if not self._tiler.grid.in_bounds(x, y):
            return False
        if self._generator.is_in_home_base(x, y):
            logger.debug("cannot edit (%d, %d): home base", x, y)
            return False
        if self._player.position == (x, y):
            logger.debug("cannot edit (%d, %d): player is here", x, y)
            return False
        return True

    def cycle(self, x: int, y: int) -> EditResult | None:
        if not self.can_edit(x, y):
            return None
        grid = self._tiler.grid
        before = grid.get(x, y)
        after = _CYCLE[before]
        grid.set(x, y, after)
        logger.info("tile (%d, %d): %s -> %s", x, y, before.name, after.name)
        return EditResult(x, y, before, after, frozenset(self._tiler.dirty_tiles_for(x, y)))
