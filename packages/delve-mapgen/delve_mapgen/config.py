"""MapConfig - the generator's constructor-time configuration surface."""
from __future__ import annotations

from dataclasses import dataclass, field

from delve_mapgen.types import FillWeights


@dataclass(frozen=True)
class MapConfig:
    """Grid size, zone row boundaries, and per-strategy fill constants.

    Row layout, top to bottom:

    - row 0: border
    - rows ``1 .. home_base_height-1``: home base
    - row ``home_base_height``: separator with a centred entrance gap
    - rows ``neck_start .. neck_end-1``: neck
    - rows ``body_start .. height-2``: body
    - row ``height-1``: border

    Attributes:
        width, height: Logical grid size.
        home_base_height: First row after the home base; also the separator row.
        neck_start, neck_end: Neck row range (end exclusive).
        body_start: First body row.
        entrance_width: Diggable cells in the separator gap.
        neck_width: Centred corridor width inside the neck.
        neck_diggable_chance: Odds a corridor cell starts diggable (else empty).
        neck_obstacle_chance: Independent odds of an undiggable corridor cell.
        bell_jar_weights, open_field_weights: Body fill odds.
        path_count: Random-walk paths carved through a bell-jar body.
        path_left_chance, path_right_chance: Per-row sidestep odds of a path.
        clearing_count, clearing_radius: Open-field clearings.
        maze_stride, maze_openings: Maze wall lattice spacing and punched holes.
        cavern_count, cavern_min_radius, cavern_max_radius, cavern_ring:
            Cavern chambers and the diggable ring around each.
    """

    width: int = 20
    height: int = 24
    home_base_height: int = 3
    neck_start: int = 4
    neck_end: int = 8
    body_start: int = 8
    entrance_width: int = 3
    neck_width: int = 8
    neck_diggable_chance: float = 0.3
    neck_obstacle_chance: float = 0.1
    bell_jar_weights: FillWeights = field(
        default_factory=lambda: FillWeights(empty=0.04, diggable=0.9, undiggable=0.06)
    )
    open_field_weights: FillWeights = field(
        default_factory=lambda: FillWeights(empty=0.4, diggable=0.4, undiggable=0.2)
    )
    path_count: int = 2
    path_left_chance: float = 0.3
    path_right_chance: float = 0.3
    clearing_count: int = 3
    clearing_radius: int = 2
    maze_stride: int = 3
    maze_openings: int = 8
    cavern_count: int = 4
    cavern_min_radius: float = 2.0
    cavern_max_radius: float = 4.0
    cavern_ring: float = 1.5

    def __post_init__(self) -> None:
        if self.width < 3 or self.height < 3:
            raise ValueError(f"Grid must be at least 3x3, got {self.width}x{self.height}")
        if self.home_base_height < 2:
            raise ValueError(
                f"home_base_height must be >= 2, got {self.home_base_height}"
            )
        if not (
            self.separator_row < self.neck_start
            <= self.neck_end <= self.body_start <= self.height - 2
        ):
            raise ValueError(
                "Zone rows must satisfy separator < neck_start <= neck_end "
                f"<= body_start <= height-2, got separator={self.separator_row} "
                f"neck={self.neck_start}..{self.neck_end} body_start={self.body_start} "
                f"height={self.height}"
            )
        if not 1 <= self.entrance_width <= self.width - 2:
            raise ValueError(
                f"entrance_width must be in 1..{self.width - 2}, got {self.entrance_width}"
            )
        if not 1 <= self.neck_width <= self.width - 2:
            raise ValueError(
                f"neck_width must be in 1..{self.width - 2}, got {self.neck_width}"
            )
        for name in (
            "neck_diggable_chance",
            "neck_obstacle_chance",
            "path_left_chance",
            "path_right_chance",
        ):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"{name} must be in [0, 1], got {value}")
        if self.path_left_chance + self.path_right_chance > 1.0:
            raise ValueError("path_left_chance + path_right_chance must be <= 1")
        if self.maze_stride < 1:
            raise ValueError(f"maze_stride must be >= 1, got {self.maze_stride}")
        if not 0 < self.cavern_min_radius <= self.cavern_max_radius:
            raise ValueError("Cavern radii must satisfy 0 < min <= max")
        for name in ("path_count", "clearing_count", "clearing_radius",
                     "maze_openings", "cavern_count"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be >= 0, got {getattr(self, name)}")
        if self.cavern_ring < 0:
            raise ValueError(f"cavern_ring must be >= 0, got {self.cavern_ring}")

    # --- Derived layout ---

    @property
    def separator_row(self) -> int:
        return self.home_base_height

    @property
    def body_end(self) -> int:
        """Last body row (inclusive)."""
        return self.height - 2

    @property
    def interior_columns(self) -> range:
        return range(1, self.width - 1)

    @property
    def body_rows(self) -> range:
        return range(self.body_start, self.height - 1)

    @property
    def neck_rows(self) -> range:
        return range(self.neck_start, self.neck_end)

    @property
    def entrance_columns(self) -> range:
        start = (self.width - self.entrance_width) // 2
        return range(start, start + self.entrance_width)

    @property
    def neck_columns(self) -> range:
        start = (self.width - self.neck_width) // 2
        return range(start, start + self.neck_width)
