"""MapGenerator - strategy-selectable terrain generation over a shared zone layout."""
from __future__ import annotations

import logging
import os
import random

from delve_tiles import Cell

from delve_mapgen import zones
from delve_mapgen.config import MapConfig
from delve_mapgen.connectivity import unreachable_cells
from delve_mapgen.strategies import BODY_FILLERS
from delve_mapgen.types import DEFAULT_STRATEGY, GenerationError, Rows, Strategy, Zone

logger = logging.getLogger(__name__)


class MapGenerator:
    """Fills a logical lattice with structurally valid terrain.

    All strategies share the border, home base, separator/entrance and neck
    rows and differ only in the body. The result is row-major content
    (``rows[y][x]``) for :meth:`delve_tiles.TerrainGrid.replace`.

    With ``strict=True`` every generated map is flood-filled from the spawn
    point; maps with an unreachable non-undiggable body cell are discarded
    and regenerated, up to *max_attempts* times.

    An *rng* may be injected in place of *seed*; it is used as is and
    advanced by every :meth:`generate`.
    """

    def __init__(
        self,
        config: MapConfig | None = None,
        seed: int | None = None,
        rng: random.Random | None = None,
        strict: bool = False,
        max_attempts: int = 32,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._config = config if config is not None else MapConfig()
        if rng is not None:
            self._seed = seed
            self._rng = rng
        else:
            if seed is None:
                seed = int.from_bytes(os.urandom(8))
            self._seed = seed
            self._rng = random.Random(seed)
        self._strict = strict
        self._max_attempts = max_attempts
        self._strategy = DEFAULT_STRATEGY
        self._last_strategy: Strategy | None = None

    # --- Properties ---

    @property
    def config(self) -> MapConfig:
        return self._config

    @property
    def seed(self) -> int | None:
        """Seed the generator was built with; None for an injected rng with no seed given."""
        return self._seed

    @property
    def strategy(self) -> Strategy:
        """Strategy used when :meth:`generate` is called without one."""
        return self._strategy

    @property
    def last_strategy(self) -> Strategy | None:
        """Strategy actually used by the most recent :meth:`generate`."""
        return self._last_strategy

    @property
    def strict(self) -> bool:
        return self._strict

    def set_strategy(self, value: Strategy | str) -> bool:
        """Change the default strategy. Unknown values are logged and ignored."""
        strategy = Strategy.parse(value)
        if strategy is None:
            logger.warning("invalid map strategy %r, keeping %s", value, self._strategy.value)
            return False
        self._strategy = strategy
        logger.info("map strategy set to %s", strategy.value)
        return True

    def reseed(self, seed: int) -> None:
        self._seed = seed
        self._rng.seed(seed)

    # --- Generation ---

    def resolve_strategy(self, value: Strategy | str | None) -> Strategy:
        """Map a requested strategy to a known one, falling back to the default."""
        if value is None:
            return self._strategy
        strategy = Strategy.parse(value)
        if strategy is None:
            logger.warning(
                "unknown map strategy %r, using %s", value, DEFAULT_STRATEGY.value
            )
            return DEFAULT_STRATEGY
        return strategy

    def generate(self, strategy: Strategy | str | None = None) -> Rows:
        """Build fresh content with *strategy* (or the current default)."""
        chosen = self.resolve_strategy(strategy)
        self._last_strategy = chosen
        cfg = self._config
        logger.info(
            "generating %s map %dx%d (seed=%s)", chosen.value, cfg.width, cfg.height, self._seed
        )
        for attempt in range(1, self._max_attempts + 1):
            rows = self._build(chosen)
            if not self._strict:
                return rows
            stranded = unreachable_cells(rows, self.spawn_position(), self.body_cells())
            if not stranded:
                return rows
            logger.warning(
                "attempt %d/%d: %d body cells unreachable from spawn, regenerating",
                attempt, self._max_attempts, len(stranded),
            )
        raise GenerationError(
            f"No fully reachable {chosen.value} map after {self._max_attempts} attempts"
        )

    def _build(self, strategy: Strategy) -> Rows:
        rows = zones.build_structure(self._config, self._rng)
        BODY_FILLERS[strategy](rows, self._config, self._rng)
        zones.carve_entrance_shaft(rows, self._config)
        return rows

    # --- Zone queries ---

    def spawn_position(self) -> Cell:
        """Home-base centre; the same for every strategy."""
        return zones.spawn_position(self._config)

    def is_in_home_base(self, x: int, y: int) -> bool:
        return zones.in_home_base(self._config, x, y)

    def is_in_body(self, x: int, y: int) -> bool:
        return zones.in_body(self._config, x, y)

    def zone_of(self, x: int, y: int) -> Zone | None:
        return zones.zone_of(self._config, x, y)

    def body_cells(self) -> list[Cell]:
        cfg = self._config
        return [(x, y) for y in cfg.body_rows for x in cfg.interior_columns]
