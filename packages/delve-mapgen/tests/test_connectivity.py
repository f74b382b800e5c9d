"""
Test suite for flood-fill reachability.

Tests cover:
- Cell passability
- Flood fill from a start cell
- Unreachable open cells in a region
"""
from __future__ import annotations

from delve_mapgen.connectivity import open_cell, reachable_from, unreachable_cells
from delve_tiles import TerrainGrid


def parse(text: str):
    glyphs = {".": 0, "+": 1, "#": 2}
    return [[glyphs[c] for c in line] for line in text.strip().splitlines()]


ROOMS = parse(
    """
#######
#..#+.#
#..#..#
#######
"""
)


class TestOpenCell:
    """Passability of single cells, out-of-range included."""

    def test_undiggable_closed(self) -> None:
        assert not open_cell(ROOMS, 0, 0)

    def test_diggable_open(self) -> None:
        assert open_cell(ROOMS, 4, 1)

    def test_out_of_range_closed(self) -> None:
        assert not open_cell(ROOMS, -1, 1)
        assert not open_cell(ROOMS, 7, 1)
        assert not open_cell(ROOMS, 1, 4)


class TestReachableFrom:
    """4-connected flood fill from a start cell."""

    def test_fills_own_room_only(self) -> None:
        assert reachable_from(ROOMS, (1, 1)) == {(1, 1), (2, 1), (1, 2), (2, 2)}

    def test_diggable_counts_as_passable(self) -> None:
        assert (4, 1) in reachable_from(ROOMS, (5, 2))

    def test_blocked_start(self) -> None:
        assert reachable_from(ROOMS, (3, 1)) == set()

    def test_no_diagonal_steps(self) -> None:
        rows = parse(
            """
.#
#.
"""
        )
        assert reachable_from(rows, (0, 0)) == {(0, 0)}

    def test_accepts_grid_rows(self) -> None:
        grid = TerrainGrid.from_rows(ROOMS)
        assert len(reachable_from(grid.rows(), (4, 2))) == 4


class TestUnreachableCells:
    """Open cells in a region the flood fill never reaches."""

    def test_other_room_unreachable(self) -> None:
        region = [(x, y) for y in range(4) for x in range(7)]
        stranded = unreachable_cells(ROOMS, (1, 1), region)
        assert sorted(stranded) == [(4, 1), (4, 2), (5, 1), (5, 2)]

    def test_walls_never_reported(self) -> None:
        assert unreachable_cells(ROOMS, (1, 1), [(0, 0), (3, 2)]) == []
