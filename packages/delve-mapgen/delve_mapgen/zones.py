"""Shared structural pipeline: border, home base, separator, neck.

Every strategy starts from the rows built here and only differs in how
the body is filled.
"""
from __future__ import annotations

import logging
import random

from delve_tiles import Cell, TerrainState

from delve_mapgen.config import MapConfig
from delve_mapgen.types import Rows, Zone

logger = logging.getLogger(__name__)

E, D, U = TerrainState.EMPTY, TerrainState.DIGGABLE, TerrainState.UNDIGGABLE


# --- Pipeline steps ---


def fill_base(config: MapConfig) -> Rows:
    """Whole grid undiggable, then the interior carved empty."""
    rows = [[U] * config.width for _ in range(config.height)]
    for y in range(1, config.height - 1):
        for x in config.interior_columns:
            rows[y][x] = E
    return rows


def stamp_border(rows: Rows, config: MapConfig) -> None:
    last_x, last_y = config.width - 1, config.height - 1
    for y in range(config.height):
        rows[y][0] = U
        rows[y][last_x] = U
    for x in range(config.width):
        rows[0][x] = U
        rows[last_y][x] = U


def fill_home_base(rows: Rows, config: MapConfig) -> None:
    for y in range(1, config.home_base_height):
        for x in config.interior_columns:
            rows[y][x] = E


def stamp_separator(rows: Rows, config: MapConfig) -> None:
    """Undiggable separator row with a centred diggable entrance gap."""
    row = rows[config.separator_row]
    for x in range(config.width):
        row[x] = U
    for x in config.entrance_columns:
        row[x] = D


def fill_neck(rows: Rows, config: MapConfig, rng: random.Random) -> None:
    """Walls outside a centred corridor; corridor mostly empty, some dig, a few obstacles."""
    corridor = config.neck_columns
    for y in config.neck_rows:
        for x in config.interior_columns:
            if x not in corridor:
                rows[y][x] = U
            elif rng.random() < config.neck_diggable_chance:
                rows[y][x] = D
            else:
                rows[y][x] = E
    for y in config.neck_rows:
        for x in corridor:
            if rng.random() < config.neck_obstacle_chance:
                rows[y][x] = U


def build_structure(config: MapConfig, rng: random.Random) -> Rows:
    """Run the shared steps in order and return the rows, body still empty."""
    rows = fill_base(config)
    stamp_border(rows, config)
    fill_home_base(rows, config)
    stamp_separator(rows, config)
    fill_neck(rows, config, rng)
    return rows


def carve_entrance_shaft(rows: Rows, config: MapConfig) -> list[Cell]:
    """Guarantee a non-undiggable path from the entrance gap into the body.

    Walks down the entrance's middle column from below the separator,
    turning undiggable cells diggable, through the neck and on into the
    body until it meets a body cell that is already open or diggable.
    Returns the carved cells.
    """
    column = config.entrance_columns[len(config.entrance_columns) // 2]
    carved: list[Cell] = []
    for y in range(config.separator_row + 1, config.height - 1):
        in_body = y >= config.body_start
        if rows[y][column] is U:
            rows[y][column] = D
            carved.append((column, y))
        elif in_body:
            break
    if carved:
        logger.debug("entrance shaft carved %d cells in column %d", len(carved), column)
    return carved


# --- Zone queries ---


def spawn_position(config: MapConfig) -> Cell:
    """Horizontal centre of the map, vertical centre of the home base rows."""
    return (config.width // 2, config.home_base_height // 2)


def in_home_base(config: MapConfig, x: int, y: int) -> bool:
    """Strictly inside the home base: excludes the border ring and separator row."""
    return 0 < y < config.home_base_height and 0 < x < config.width - 1


def in_body(config: MapConfig, x: int, y: int) -> bool:
    return config.body_start <= y <= config.body_end and 0 < x < config.width - 1


def zone_of(config: MapConfig, x: int, y: int) -> Zone | None:
    """Zone a logical cell belongs to; None outside the grid."""
    if not (0 <= x < config.width and 0 <= y < config.height):
        return None
    if x in (0, config.width - 1) or y in (0, config.height - 1):
        return Zone.BORDER
    if y < config.home_base_height:
        return Zone.HOME_BASE
    if y == config.separator_row:
        return Zone.SEPARATOR
    if config.neck_start <= y < config.neck_end:
        return Zone.NECK
    if y >= config.body_start:
        return Zone.BODY
    return Zone.GAP
