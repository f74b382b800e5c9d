"""
Test suite for MapGenerator.

Tests cover:
- Zone invariants for every strategy
- The deterministic simple-box layout
- Seed reproducibility
- Strategy selection and unknown-strategy fallback
- Strict reachability mode
"""
from __future__ import annotations

import logging
import random

import pytest

from delve_mapgen import strategies
from delve_mapgen.config import MapConfig
from delve_mapgen.connectivity import reachable_from
from delve_mapgen.generator import MapGenerator
from delve_mapgen.types import GenerationError, Strategy, Zone
from delve_tiles import AutoTiler, TerrainGrid, TerrainState

E, D, U = TerrainState.EMPTY, TerrainState.DIGGABLE, TerrainState.UNDIGGABLE


def render(rows) -> list[str]:
    return ["".join(s.glyph for s in row) for row in rows]


class TestZoneInvariants:
    """Structural guarantees that hold for every strategy and seed."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    @pytest.mark.parametrize("seed", range(10))
    def test_invariants(self, strategy: Strategy, seed: int) -> None:
        gen = MapGenerator(seed=seed)
        cfg = gen.config
        rows = gen.generate(strategy)

        assert len(rows) == 24 and all(len(r) == 20 for r in rows)
        for x in range(cfg.width):
            assert rows[0][x] is U
            assert rows[cfg.height - 1][x] is U
        for y in range(cfg.height):
            assert rows[y][0] is U
            assert rows[y][cfg.width - 1] is U

        for y in range(1, cfg.home_base_height):
            for x in cfg.interior_columns:
                assert rows[y][x] is E

        separator = rows[cfg.separator_row]
        gap = [x for x, s in enumerate(separator) if s is D]
        assert gap == list(cfg.entrance_columns)
        assert all(s is U for x, s in enumerate(separator) if x not in gap)

        sx, sy = gen.spawn_position()
        assert gen.is_in_home_base(sx, sy)
        assert rows[sy][sx] is E

    @pytest.mark.parametrize("strategy", list(Strategy))
    @pytest.mark.parametrize("seed", range(10))
    def test_entrance_leads_into_body(self, strategy: Strategy, seed: int) -> None:
        gen = MapGenerator(seed=seed)
        rows = gen.generate(strategy)
        reached = reachable_from(rows, gen.spawn_position())
        assert any(gen.is_in_body(x, y) for x, y in reached)


class TestSimpleBox:
    """The simple box layout is fully determined outside the neck."""

    EXPECTED_TOP = [
        "####################",
        "#..................#",
        "#..................#",
        "########+++#########",
    ]
    BODY_ROW = "#++++++++++++++++++#"

    def test_layout(self) -> None:
        rows = render(MapGenerator(seed=1).generate(Strategy.SIMPLE_BOX))
        assert rows[:4] == self.EXPECTED_TOP
        assert rows[8:23] == [self.BODY_ROW] * 15
        assert rows[23] == "#" * 20

    def test_layout_independent_of_seed(self) -> None:
        a = render(MapGenerator(seed=1).generate(Strategy.SIMPLE_BOX))
        b = render(MapGenerator(seed=2).generate(Strategy.SIMPLE_BOX))
        assert a[:4] == b[:4]
        assert a[8:] == b[8:]

    def test_same_seed_identical(self) -> None:
        a = MapGenerator(seed=77).generate(Strategy.SIMPLE_BOX)
        b = MapGenerator(seed=77).generate(Strategy.SIMPLE_BOX)
        assert a == b


class TestReproducibility:
    """Seeds and injected generators fully determine output."""

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_same_seed_same_map(self, strategy: Strategy) -> None:
        assert (
            MapGenerator(seed=123).generate(strategy)
            == MapGenerator(seed=123).generate(strategy)
        )

    def test_different_seeds_differ(self) -> None:
        a = MapGenerator(seed=1).generate(Strategy.CAVERN)
        b = MapGenerator(seed=2).generate(Strategy.CAVERN)
        assert a != b

    def test_reseed_restarts_sequence(self) -> None:
        gen = MapGenerator(seed=5)
        first = gen.generate(Strategy.OPEN_FIELD)
        gen.generate(Strategy.OPEN_FIELD)
        gen.reseed(5)
        assert gen.generate(Strategy.OPEN_FIELD) == first

    def test_auto_seed(self) -> None:
        assert isinstance(MapGenerator().seed, int)

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_injected_rng_matches_seed(self, strategy: Strategy) -> None:
        injected = MapGenerator(rng=random.Random(5)).generate(strategy)
        assert injected == MapGenerator(seed=5).generate(strategy)

    def test_injected_rng_is_advanced(self) -> None:
        rng = random.Random(5)
        gen = MapGenerator(rng=rng)
        gen.generate(Strategy.CAVERN)
        assert rng.getstate() != random.Random(5).getstate()

    def test_injected_rng_keeps_given_seed(self) -> None:
        assert MapGenerator(rng=random.Random(5)).seed is None
        assert MapGenerator(seed=5, rng=random.Random(5)).seed == 5


class TestStrategySelection:
    """Default strategy, string names, and unknown-name fallback."""

    def test_default_is_bell_jar(self) -> None:
        gen = MapGenerator(seed=0)
        assert gen.strategy is Strategy.BELL_JAR
        gen.generate()
        assert gen.last_strategy is Strategy.BELL_JAR

    def test_string_strategy(self) -> None:
        gen = MapGenerator(seed=0)
        gen.generate("maze")
        assert gen.last_strategy is Strategy.MAZE

    def test_set_strategy(self) -> None:
        gen = MapGenerator(seed=0)
        assert gen.set_strategy("cavern") is True
        gen.generate()
        assert gen.last_strategy is Strategy.CAVERN

    def test_set_unknown_strategy_keeps_current(self, caplog) -> None:
        gen = MapGenerator(seed=0)
        gen.set_strategy(Strategy.MAZE)
        with caplog.at_level(logging.WARNING, logger="delve_mapgen"):
            assert gen.set_strategy("volcano") is False
        assert gen.strategy is Strategy.MAZE
        assert "volcano" in caplog.text

    def test_unknown_strategy_falls_back_with_warning(self, caplog) -> None:
        gen = MapGenerator(seed=0)
        with caplog.at_level(logging.WARNING, logger="delve_mapgen"):
            rows = gen.generate("volcano")
        assert gen.last_strategy is Strategy.BELL_JAR
        assert any(r.levelno == logging.WARNING for r in caplog.records)
        assert len(rows) == 24

    def test_fallback_matches_bell_jar(self) -> None:
        assert (
            MapGenerator(seed=9).generate("volcano")
            == MapGenerator(seed=9).generate(Strategy.BELL_JAR)
        )


class TestZoneQueries:
    """Spawn point and per-cell zone predicates."""

    def test_spawn_is_home_base_center(self) -> None:
        assert MapGenerator(seed=0).spawn_position() == (10, 1)

    def test_spawn_independent_of_strategy(self) -> None:
        gen = MapGenerator(seed=0)
        gen.generate(Strategy.CAVERN)
        assert gen.spawn_position() == (10, 1)

    def test_custom_config_spawn(self) -> None:
        cfg = MapConfig(width=30, height=30, home_base_height=5,
                        neck_start=6, neck_end=10, body_start=10)
        gen = MapGenerator(cfg, seed=0)
        assert gen.spawn_position() == (15, 2)
        assert gen.is_in_home_base(15, 2)

    def test_is_in_home_base(self) -> None:
        gen = MapGenerator(seed=0)
        assert gen.is_in_home_base(1, 2)
        assert not gen.is_in_home_base(1, 3)
        assert not gen.is_in_home_base(0, 1)

    def test_zone_of(self) -> None:
        gen = MapGenerator(seed=0)
        assert gen.zone_of(10, 12) is Zone.BODY

    def test_body_cells(self) -> None:
        cells = MapGenerator(seed=0).body_cells()
        assert len(cells) == 15 * 18
        assert (1, 8) in cells and (18, 22) in cells


class TestStrictMode:
    """Regeneration until every open body cell is reachable."""

    def test_strict_maze_succeeds(self) -> None:
        gen = MapGenerator(seed=3, strict=True)
        rows = gen.generate(Strategy.MAZE)
        reached = reachable_from(rows, gen.spawn_position())
        open_body = [c for c in gen.body_cells() if rows[c[1]][c[0]] is not U]
        assert all(c in reached for c in open_body)

    def test_strict_retries_until_reachable(self, monkeypatch, caplog) -> None:
        calls = {"n": 0}

        def pocketed_first(rows, cfg, rng):
            strategies.fill_simple_box(rows, cfg, rng)
            calls["n"] += 1
            if calls["n"] == 1:
                for y in cfg.body_rows:
                    for x in cfg.interior_columns:
                        if rows[y][x] is D:
                            rows[y][x] = U
                rows[20][2] = E

        monkeypatch.setitem(strategies.BODY_FILLERS, Strategy.SIMPLE_BOX, pocketed_first)
        gen = MapGenerator(seed=0, strict=True)
        with caplog.at_level(logging.WARNING, logger="delve_mapgen"):
            rows = gen.generate(Strategy.SIMPLE_BOX)
        assert calls["n"] == 2
        assert "regenerating" in caplog.text
        assert rows[8][1] is D

    def test_strict_gives_up(self, monkeypatch) -> None:
        def always_pocketed(rows, cfg, rng):
            for y in cfg.body_rows:
                for x in cfg.interior_columns:
                    rows[y][x] = U
            rows[20][2] = E

        monkeypatch.setitem(strategies.BODY_FILLERS, Strategy.MAZE, always_pocketed)
        gen = MapGenerator(seed=0, strict=True, max_attempts=3)
        with pytest.raises(GenerationError, match="after 3 attempts"):
            gen.generate(Strategy.MAZE)

    def test_non_strict_accepts_pockets(self, monkeypatch) -> None:
        def always_pocketed(rows, cfg, rng):
            for y in cfg.body_rows:
                for x in cfg.interior_columns:
                    rows[y][x] = U
            rows[20][2] = E

        monkeypatch.setitem(strategies.BODY_FILLERS, Strategy.MAZE, always_pocketed)
        rows = MapGenerator(seed=0).generate(Strategy.MAZE)
        assert rows[20][2] is E

    def test_invalid_max_attempts(self) -> None:
        with pytest.raises(ValueError):
            MapGenerator(max_attempts=0)


class TestGridIntegration:
    """Generated content drives the terrain grid and autotiler."""

    def test_replace_grid_and_resolve(self) -> None:
        gen = MapGenerator(seed=4)
        grid = TerrainGrid(2, 2)
        grid.replace(gen.generate(Strategy.SIMPLE_BOX))
        assert (grid.width, grid.height) == (20, 24)
        tiler = AutoTiler(grid)
        assert tiler.resolve(19, 23) == 79
        assert tiler.resolve(0, 0) == 77
        assert tiler.resolve(1, 1) == -1

    def test_dig_in_body(self) -> None:
        gen = MapGenerator(seed=4)
        grid = TerrainGrid.from_rows(gen.generate(Strategy.SIMPLE_BOX))
        assert grid.dig(5, 12)
        assert not grid.dig(0, 12)
