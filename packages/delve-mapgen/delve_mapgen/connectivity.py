"""Reachability over generated content.

A cell is traversable for reachability purposes when it is not
undiggable: empty cells can be walked, diggable ones can be dug through.
"""
from __future__ import annotations

from collections import deque
from typing import Iterable, Sequence

from delve_tiles import Cell, TerrainState

_DIRS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def open_cell(rows: Sequence[Sequence[int]], x: int, y: int) -> bool:
    if not (0 <= y < len(rows) and 0 <= x < len(rows[0])):
        return False
    return rows[y][x] != TerrainState.UNDIGGABLE


def reachable_from(rows: Sequence[Sequence[int]], start: Cell) -> set[Cell]:
    """4-connected flood fill from *start* across non-undiggable cells.

    Returns an empty set if *start* itself is undiggable or out of range.
    """
    sx, sy = start
    if not open_cell(rows, sx, sy):
        return set()
    visited = {start}
    queue = deque([start])
    while queue:
        cx, cy = queue.popleft()
        for dx, dy in _DIRS:
            nxt = (cx + dx, cy + dy)
            if nxt not in visited and open_cell(rows, *nxt):
                visited.add(nxt)
                queue.append(nxt)
    return visited


def unreachable_cells(
    rows: Sequence[Sequence[int]],
    start: Cell,
    region: Iterable[Cell],
) -> list[Cell]:
    """Non-undiggable cells of *region* that cannot be reached from *start*."""
    reached = reachable_from(rows, start)
    return [
        (x, y) for x, y in region if open_cell(rows, x, y) and (x, y) not in reached
    ]
