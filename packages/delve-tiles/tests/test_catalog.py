"""
Test suite for PatternCatalog.

Tests cover:
- Pattern enumeration
- Lookups in both directions
- Atlas shape and debug output
- Validation and hand-authored layouts
"""
from __future__ import annotations

import itertools

import pytest

from delve_tiles.catalog import EMPTY_INDEX, PatternCatalog, enumerate_patterns
from delve_tiles.types import (
    EMPTY_TILE,
    CatalogError,
    CornerPattern,
    TerrainState,
    Tile,
)

E, D, U = TerrainState.EMPTY, TerrainState.DIGGABLE, TerrainState.UNDIGGABLE


class TestEnumeration:
    """Pattern order, indices, and atlas slots."""

    def test_three_states_yield_eighty_entries(self) -> None:
        assert len(enumerate_patterns(3)) == 80

    def test_every_combination_once_except_all_empty(self) -> None:
        patterns = [tuple(e.pattern) for e in enumerate_patterns(3)]
        expected = [
            c for c in itertools.product(range(3), repeat=4) if c != (0, 0, 0, 0)
        ]
        assert sorted(patterns) == sorted(expected)
        assert len(set(patterns)) == len(patterns)

    def test_indices_are_gapless(self) -> None:
        assert [e.tile_index for e in enumerate_patterns(3)] == list(range(80))

    def test_nesting_order_top_left_outermost(self) -> None:
        entries = enumerate_patterns(3)
        assert tuple(entries[0].pattern) == (0, 0, 0, 1)
        assert tuple(entries[1].pattern) == (0, 0, 0, 2)
        assert tuple(entries[2].pattern) == (0, 0, 1, 0)
        assert tuple(entries[25].pattern) == (0, 2, 2, 2)
        assert tuple(entries[26].pattern) == (1, 0, 0, 0)
        assert tuple(entries[79].pattern) == (2, 2, 2, 2)

    def test_atlas_positions_follow_columns(self) -> None:
        for e in enumerate_patterns(3, columns=10):
            assert e.atlas_x == e.tile_index % 10
            assert e.atlas_y == e.tile_index // 10

    def test_enumeration_is_reproducible(self) -> None:
        assert enumerate_patterns(3) == enumerate_patterns(3)

    def test_two_states(self) -> None:
        assert len(enumerate_patterns(2)) == 15

    def test_invalid_state_count(self) -> None:
        with pytest.raises(ValueError):
            enumerate_patterns(0)

    def test_invalid_columns(self) -> None:
        with pytest.raises(ValueError):
            enumerate_patterns(3, columns=0)


class TestLookups:
    """Pattern to index and index to pattern."""

    def test_sentinel_for_all_empty(self) -> None:
        catalog = PatternCatalog()
        assert catalog.lookup_index((E, E, E, E)) == -1
        assert catalog.lookup((0, 0, 0, 0)) is EMPTY_TILE

    def test_tagged_tile(self) -> None:
        catalog = PatternCatalog()
        assert catalog.lookup((0, 0, 0, 1)) == Tile(0)
        assert catalog.lookup((U, U, U, U)) == Tile(79)

    def test_bijection_pattern_to_index(self) -> None:
        catalog = PatternCatalog()
        for entry in catalog:
            assert catalog.lookup_pattern(catalog.lookup_index(entry.pattern)) == entry

    def test_bijection_index_to_pattern(self) -> None:
        catalog = PatternCatalog()
        for index in range(80):
            assert catalog.lookup_index(catalog.lookup_pattern(index).pattern) == index

    def test_empty_entry_at_origin(self) -> None:
        entry = PatternCatalog().lookup_pattern(EMPTY_INDEX)
        assert entry.tile_index == -1
        assert tuple(entry.pattern) == (0, 0, 0, 0)
        assert (entry.atlas_x, entry.atlas_y) == (0, 0)

    def test_unknown_state_is_catalog_miss(self) -> None:
        with pytest.raises(CatalogError):
            PatternCatalog().lookup_index((0, 0, 0, 3))

    def test_out_of_range_index(self) -> None:
        catalog = PatternCatalog()
        with pytest.raises(CatalogError):
            catalog.lookup_pattern(80)
        with pytest.raises(CatalogError):
            catalog.lookup_pattern(-2)

    def test_catalog_error_is_lookup_error(self) -> None:
        with pytest.raises(LookupError):
            PatternCatalog().lookup_pattern(500)

    def test_membership(self) -> None:
        catalog = PatternCatalog()
        assert CornerPattern(1, 2, 0, 1) in catalog
        assert (0, 0, 0, 0) not in catalog

    def test_source_rect(self) -> None:
        catalog = PatternCatalog(columns=10)
        # index 23 -> column 3, row 2
        assert catalog.source_rect(23, 100) == (300, 200, 100, 100)

    def test_alternate_state_count(self) -> None:
        catalog = PatternCatalog(state_count=2, columns=4)
        assert len(catalog) == 15
        assert catalog.rows == 4
        assert catalog.lookup_index((1, 1, 1, 1)) == 14


class TestCatalogShape:
    """Atlas dimensions and debug output."""

    def test_default_atlas_is_ten_by_eight(self) -> None:
        catalog = PatternCatalog()
        assert catalog.columns == 10
        assert catalog.rows == 8

    def test_entries_returns_copy(self) -> None:
        catalog = PatternCatalog()
        entries = catalog.entries()
        entries.clear()
        assert len(catalog) == 80

    def test_describe_lists_every_tile_and_sentinel(self) -> None:
        lines = PatternCatalog().describe()
        assert len(lines) == 81
        assert lines[0] == "0: (0,0,0,1) -> atlas(0,0)"
        assert lines[-1].startswith("-1: (0000)")

    def test_pattern_name(self) -> None:
        assert CornerPattern(1, 2, 0, 2).name == "1202"


class TestValidation:
    """Integrity checks and hand-authored layouts."""

    def test_default_catalog_validates(self) -> None:
        PatternCatalog().validate()

    def test_custom_layout_applied(self) -> None:
        layout = {i: (i // 20, i % 20) for i in range(80)}
        catalog = PatternCatalog(columns=4, layout=layout)
        entry = catalog.lookup_pattern(21)
        assert (entry.atlas_x, entry.atlas_y) == (1, 1)

    def test_layout_missing_slot_fails_at_startup(self) -> None:
        layout = {i: (i % 4, i // 4) for i in range(79)}
        with pytest.raises(CatalogError, match="no slot for tile 79"):
            PatternCatalog(columns=4, layout=layout)

    def test_layout_collision_fails_at_startup(self) -> None:
        layout = {i: (i % 4, i // 4) for i in range(80)}
        layout[5] = (0, 0)
        with pytest.raises(CatalogError, match="share atlas slot"):
            PatternCatalog(columns=4, layout=layout)

    def test_layout_negative_slot(self) -> None:
        layout = {i: (i % 4, i // 4) for i in range(80)}
        layout[3] = (-1, 0)
        with pytest.raises(CatalogError, match="negative"):
            PatternCatalog(columns=4, layout=layout)

    def test_layout_slot_past_last_column(self) -> None:
        layout = {i: (i % 4, i // 4) for i in range(80)}
        layout[7] = (4, 30)
        with pytest.raises(CatalogError, match="past the 4-column atlas"):
            PatternCatalog(columns=4, layout=layout)

    def test_rows_follow_layout(self) -> None:
        layout = {i: (i % 4, i // 4) for i in range(80)}
        layout[79] = (3, 25)
        assert PatternCatalog(columns=4, layout=layout).rows == 26
