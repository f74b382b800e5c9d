"""Build the demo state and (re)generate maps."""
from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass

from delve_mapgen import MapGenerator, Strategy
from delve_play import Player, TileEditor
from delve_tiles import EMPTY_INDEX, AutoTiler, PatternCatalog, TerrainGrid

logger = logging.getLogger(__name__)


@dataclass
class DemoState:
    """Holds the core objects; every collaborator shares the one grid."""
    generator: MapGenerator
    grid: TerrainGrid
    tiler: AutoTiler
    player: Player
    editor: TileEditor
    # UI state
    view_mode: str = "draw"
    grid_lines: bool = False
    edit_mode: bool = False


def build_demo(strategy: Strategy | str, seed: int | None, strict: bool) -> DemoState:
    generator = MapGenerator(seed=seed, strict=strict)
    generator.set_strategy(strategy)
    logger.info("map seed %d", generator.seed)

    grid = TerrainGrid.from_rows(generator.generate())
    tiler = AutoTiler(grid, PatternCatalog())
    player = Player(tiler, *generator.spawn_position())
    editor = TileEditor(tiler, generator, player)
    return DemoState(generator, grid, tiler, player, editor)


def regenerate(state: DemoState, strategy: Strategy | None = None) -> None:
    """Replace the grid contents in place and put the player back at spawn."""
    if strategy is not None:
        state.generator.set_strategy(strategy)
    state.grid.replace(state.generator.generate())
    sx, sy = state.generator.spawn_position()
    state.player.place(sx, sy)
    state.player.facing = (0, 1)


def pattern_usage(tiler: AutoTiler) -> Counter[int]:
    """How many visual tiles resolve to each tile index."""
    return Counter(tiler.resolve_all().values())


def log_pattern_report(state: DemoState, top: int = 10) -> None:
    tiler = state.tiler
    usage = pattern_usage(tiler)
    logger.info("unique patterns in use: %d/%d (including empty)",
                len(usage), len(tiler.catalog) + 1)
    for index, count in usage.most_common(top):
        if index == EMPTY_INDEX:
            logger.info("  empty tile (0000): %d times", count)
        else:
            logger.info("  tile %d (%s): %d times",
                        index, tiler.catalog.lookup_pattern(index).pattern.name, count)

    x, y = state.player.position
    logger.info("player at (%d, %d): pattern %s -> tile %d, home base %s",
                x, y, tiler.sample(x, y).name, tiler.resolve(x, y),
                tiler.tile_touches(x, y, state.generator.is_in_home_base))
