"""Body-fill strategies.

Each filler writes only the body rows (``config.body_rows`` x
``config.interior_columns``) of rows already built by
:func:`delve_mapgen.zones.build_structure`.
"""
from __future__ import annotations

import math
import random
from typing import Callable

from delve_tiles import Cell, TerrainState

from delve_mapgen.config import MapConfig
from delve_mapgen.types import Cavern, FillWeights, Rows, Strategy

E, D, U = TerrainState.EMPTY, TerrainState.DIGGABLE, TerrainState.UNDIGGABLE

BodyFiller = Callable[[Rows, MapConfig, random.Random], None]


def _span(lo: int, hi: int) -> tuple[int, int]:
    """Inclusive randint bounds, collapsed to a point when the range is empty."""
    if hi < lo:
        mid = (lo + hi) // 2
        return mid, mid
    return lo, hi


def _fill_uniform(rows: Rows, config: MapConfig, state: TerrainState) -> None:
    for y in config.body_rows:
        for x in config.interior_columns:
            rows[y][x] = state


def _fill_weighted(
    rows: Rows, config: MapConfig, weights: FillWeights, rng: random.Random
) -> None:
    for y in config.body_rows:
        for x in config.interior_columns:
            rows[y][x] = weights.pick(rng)


def _random_body_point(config: MapConfig, rng: random.Random, margin: int) -> Cell:
    """A point at least *margin* cells away from the side walls and body edges."""
    x_lo, x_hi = _span(margin, config.width - 1 - margin)
    y_lo, y_hi = _span(config.body_start + margin // 2, config.body_end - margin // 2)
    return rng.randint(x_lo, x_hi), rng.randint(y_lo, y_hi)


# --- Helpers ---


def carve_random_paths(rows: Rows, config: MapConfig, rng: random.Random) -> list[list[Cell]]:
    """Carve ``path_count`` empty random walks from the body's top row to its bottom.

    At each row a walker steps left, right, or straight down, staying one
    cell clear of the side walls where the map is wide enough.
    """
    x_lo, x_hi = _span(2, config.width - 3)
    paths: list[list[Cell]] = []
    for _ in range(config.path_count):
        x = rng.randint(x_lo, x_hi)
        path: list[Cell] = []
        for y in config.body_rows:
            rows[y][x] = E
            path.append((x, y))
            roll = rng.random()
            if roll < config.path_left_chance:
                x = max(x_lo, x - 1)
            elif roll < config.path_left_chance + config.path_right_chance:
                x = min(x_hi, x + 1)
        paths.append(path)
    return paths


def clear_disc(rows: Rows, config: MapConfig, cx: int, cy: int, radius: int) -> int:
    """Empty every body cell within *radius* of ``(cx, cy)``. Returns cells touched."""
    touched = 0
    for dy in range(-radius, radius + 1):
        for dx in range(-radius, radius + 1):
            x, y = cx + dx, cy + dy
            if dx * dx + dy * dy > radius * radius:
                continue
            if 0 < x < config.width - 1 and config.body_start <= y <= config.body_end:
                rows[y][x] = E
                touched += 1
    return touched


def body_center(config: MapConfig) -> Cell:
    return (config.width // 2, (config.body_start + config.body_end) // 2)


def place_caverns(config: MapConfig, rng: random.Random) -> list[Cavern]:
    caverns: list[Cavern] = []
    for _ in range(config.cavern_count):
        x, y = _random_body_point(config, rng, margin=4)
        radius = rng.uniform(config.cavern_min_radius, config.cavern_max_radius)
        caverns.append(Cavern(x, y, radius))
    return caverns


def carve_tunnel(rows: Rows, config: MapConfig, start: Cell, end: Cell) -> list[Cell]:
    """Axis-stepped tunnel: horizontal along the start row, then vertical.

    Only undiggable body cells are converted (to diggable); open cavern
    floor stays open.
    """
    x, y = start
    tx, ty = end
    carved: list[Cell] = []

    def carve(cx: int, cy: int) -> None:
        if (
            0 < cx < config.width - 1
            and config.body_start <= cy <= config.body_end
            and rows[cy][cx] is U
        ):
            rows[cy][cx] = D
            carved.append((cx, cy))

    while x != tx:
        carve(x, y)
        x += 1 if x < tx else -1
    while y != ty:
        carve(x, y)
        y += 1 if y < ty else -1
    carve(x, y)
    return carved


# --- Strategies ---


def fill_bell_jar(rows: Rows, config: MapConfig, rng: random.Random) -> None:
    """Mostly diggable with sprinkled voids and rocks, plus guaranteed walk paths."""
    _fill_weighted(rows, config, config.bell_jar_weights, rng)
    carve_random_paths(rows, config, rng)


def fill_simple_box(rows: Rows, config: MapConfig, rng: random.Random) -> None:
    """Solid diggable body. Uses no randomness."""
    _fill_uniform(rows, config, D)


def fill_open_field(rows: Rows, config: MapConfig, rng: random.Random) -> None:
    """Open mix of terrain with a central clearing and random clearings."""
    _fill_weighted(rows, config, config.open_field_weights, rng)
    cx, cy = body_center(config)
    clear_disc(rows, config, cx, cy, config.clearing_radius)
    for _ in range(config.clearing_count):
        x, y = _random_body_point(config, rng, margin=4)
        clear_disc(rows, config, x, y, config.clearing_radius)


def fill_maze(rows: Rows, config: MapConfig, rng: random.Random) -> None:
    """Diggable body with a regular undiggable post lattice and punched openings."""
    _fill_uniform(rows, config, D)
    for y in range(config.body_start, config.height - 1, config.maze_stride):
        for x in range(2, config.width - 1, config.maze_stride):
            rows[y][x] = U
    for _ in range(config.maze_openings):
        x = rng.randint(1, config.width - 2)
        y = rng.randint(config.body_start, config.body_end)
        rows[y][x] = E


def fill_cavern(rows: Rows, config: MapConfig, rng: random.Random) -> None:
    """Solid rock with round chambers, diggable rims, and tunnels between chambers."""
    _fill_uniform(rows, config, U)
    caverns = place_caverns(config, rng)
    for y in config.body_rows:
        for x in config.interior_columns:
            state = U
            for cavern in caverns:
                dist = math.hypot(x - cavern.x, y - cavern.y)
                if dist < cavern.radius:
                    state = E
                    break
                if dist < cavern.radius + config.cavern_ring:
                    state = D
            rows[y][x] = state
    for a, b in zip(caverns, caverns[1:]):
        carve_tunnel(rows, config, (a.x, a.y), (b.x, b.y))


BODY_FILLERS: dict[Strategy, BodyFiller] = {
    Strategy.BELL_JAR: fill_bell_jar,
    Strategy.SIMPLE_BOX: fill_simple_box,
    Strategy.OPEN_FIELD: fill_open_field,
    Strategy.MAZE: fill_maze,
    Strategy.CAVERN: fill_cavern,
}
