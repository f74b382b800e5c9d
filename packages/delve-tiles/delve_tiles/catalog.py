"""PatternCatalog - enumerates 4-corner terrain combinations and their atlas slots."""
from __future__ import annotations

import itertools
import logging
from typing import Iterator, Mapping

from delve_tiles.types import (
    EMPTY_PATTERN,
    EMPTY_TILE,
    CatalogError,
    CornerPattern,
    PatternEntry,
    Tile,
    TileRef,
)

logger = logging.getLogger(__name__)

EMPTY_INDEX = -1

DEFAULT_STATE_COUNT = 3
DEFAULT_COLUMNS = 10


def enumerate_patterns(
    state_count: int = DEFAULT_STATE_COUNT,
    columns: int = DEFAULT_COLUMNS,
) -> list[PatternEntry]:
    """Enumerate every non-empty corner pattern in a fixed order.

    Each corner runs ``0..state_count-1`` with top-left outermost and
    bottom-right innermost. The all-zero pattern is skipped; indices are
    assigned in visitation order starting at 0, so an atlas authored
    against this order can be addressed by index.

    >>> [e.pattern.name for e in enumerate_patterns(3)[:4]]
    ['0001', '0002', '0010', '0011']
    """
    if state_count < 1:
        raise ValueError(f"state_count must be >= 1, got {state_count}")
    if columns < 1:
        raise ValueError(f"columns must be >= 1, got {columns}")
    entries: list[PatternEntry] = []
    for corners in itertools.product(range(state_count), repeat=4):
        pattern = CornerPattern(*corners)
        if pattern == EMPTY_PATTERN:
            continue
        index = len(entries)
        entries.append(
            PatternEntry(pattern, index, index % columns, index // columns)
        )
    return entries


class PatternCatalog:
    """O(1) lookups between corner patterns and atlas tile indices.

    Built once and injected into the tilers and renderers that need it.
    The all-empty pattern is a sentinel: it has no atlas slot and resolves
    to index -1 (``EMPTY_TILE`` in tagged form).

    An optional *layout* overrides the computed atlas positions with a
    hand-authored ``tile_index -> (atlas_x, atlas_y)`` mapping, for atlases
    whose artist did not follow enumeration order. The layout must cover
    every index and place no two tiles on the same slot.
    """

    def __init__(
        self,
        state_count: int = DEFAULT_STATE_COUNT,
        columns: int = DEFAULT_COLUMNS,
        layout: Mapping[int, tuple[int, int]] | None = None,
    ) -> None:
        self._state_count = state_count
        self._columns = columns
        entries = enumerate_patterns(state_count, columns)
        if layout is not None:
            entries = [_relocate(e, layout) for e in entries]
        self._entries = entries
        self._by_pattern: dict[CornerPattern, int] = {
            e.pattern: e.tile_index for e in entries
        }
        self._empty_entry = PatternEntry(EMPTY_PATTERN, EMPTY_INDEX, 0, 0)
        self.validate()
        logger.debug(
            "pattern catalog ready: %d tiles (+1 empty sentinel), %dx%d atlas",
            len(entries), columns, self.rows,
        )

    # --- Properties ---

    @property
    def state_count(self) -> int:
        return self._state_count

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def rows(self) -> int:
        """Atlas rows needed for every slot: the largest ``atlas_y`` plus one."""
        if not self._entries:
            return 0
        return max(e.atlas_y for e in self._entries) + 1

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self._entries)

    def __contains__(self, pattern: object) -> bool:
        return pattern in self._by_pattern

    def entries(self) -> list[PatternEntry]:
        return list(self._entries)

    # --- Lookups ---

    def lookup(self, pattern: CornerPattern | tuple[int, int, int, int]) -> TileRef:
        """Resolve a pattern to ``EMPTY_TILE`` or ``Tile(index)``.

        Raises CatalogError if the pattern holds a state outside the catalog.
        """
        key = CornerPattern(*pattern)
        if key == EMPTY_PATTERN:
            return EMPTY_TILE
        index = self._by_pattern.get(key)
        if index is None:
            raise CatalogError(
                f"Pattern {tuple(int(v) for v in key)} is not in a "
                f"{self._state_count}-state catalog"
            )
        return Tile(index)

    def lookup_index(self, pattern: CornerPattern | tuple[int, int, int, int]) -> int:
        """Integer form of :meth:`lookup`; -1 means "render as empty"."""
        ref = self.lookup(pattern)
        if isinstance(ref, Tile):
            return ref.index
        return EMPTY_INDEX

    def lookup_pattern(self, index: int) -> PatternEntry:
        """Inverse lookup. Index -1 maps to the synthetic all-empty entry at (0, 0)."""
        if index == EMPTY_INDEX:
            return self._empty_entry
        if not 0 <= index < len(self._entries):
            raise CatalogError(
                f"Tile index {index} outside catalog range -1..{len(self._entries) - 1}"
            )
        return self._entries[index]

    def source_rect(self, index: int, tile_size: int) -> tuple[int, int, int, int]:
        """Atlas sub-rectangle ``(x, y, w, h)`` in pixels for a tile index."""
        entry = self.lookup_pattern(index)
        return (entry.atlas_x * tile_size, entry.atlas_y * tile_size, tile_size, tile_size)

    # --- Validation ---

    def validate(self) -> None:
        """Check catalog integrity. Raises CatalogError on the first defect.

        - size is ``state_count ** 4 - 1``
        - indices are exactly ``0..len-1``
        - every non-empty combination is present exactly once
        - atlas positions are injective, non-negative, and inside the
          atlas columns
        """
        expected = self._state_count ** 4 - 1
        if len(self._entries) != expected:
            raise CatalogError(
                f"Catalog holds {len(self._entries)} entries, expected {expected}"
            )
        indices = [e.tile_index for e in self._entries]
        if indices != list(range(expected)):
            raise CatalogError("Tile indices are not a gapless 0-based sequence")
        if len(self._by_pattern) != expected:
            raise CatalogError("Duplicate corner patterns in catalog")
        for corners in itertools.product(range(self._state_count), repeat=4):
            pattern = CornerPattern(*corners)
            if pattern != EMPTY_PATTERN and pattern not in self._by_pattern:
                raise CatalogError(f"Missing pattern {pattern.name}")
        seen: dict[tuple[int, int], int] = {}
        for e in self._entries:
            slot = (e.atlas_x, e.atlas_y)
            if e.atlas_x < 0 or e.atlas_y < 0:
                raise CatalogError(f"Tile {e.tile_index} has negative atlas slot {slot}")
            if e.atlas_x >= self._columns:
                raise CatalogError(
                    f"Tile {e.tile_index} atlas slot {slot} is past the "
                    f"{self._columns}-column atlas"
                )
            if slot in seen:
                raise CatalogError(
                    f"Tiles {seen[slot]} and {e.tile_index} share atlas slot {slot}"
                )
            seen[slot] = e.tile_index

    def describe(self) -> list[str]:
        """One debug line per entry, sentinel last."""
        lines = [
            f"{e.tile_index}: ({','.join(str(int(v)) for v in e.pattern)}) "
            f"-> atlas({e.atlas_x},{e.atlas_y})"
            for e in self._entries
        ]
        lines.append(f"{EMPTY_INDEX}: ({EMPTY_PATTERN.name}) -> empty, no atlas tile")
        return lines


def _relocate(entry: PatternEntry, layout: Mapping[int, tuple[int, int]]) -> PatternEntry:
    slot = layout.get(entry.tile_index)
    if slot is None:
        raise CatalogError(
            f"Atlas layout has no slot for tile {entry.tile_index} "
            f"(pattern {entry.pattern.name})"
        )
    return PatternEntry(entry.pattern, entry.tile_index, slot[0], slot[1])
