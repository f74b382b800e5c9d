"""Strategy and zone enums, fill weights, and generator errors."""
from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

from delve_tiles import TerrainState

Rows = list[list[TerrainState]]


class Strategy(str, Enum):
    """Body-fill algorithm. Values are the identifiers used in saved settings and CLIs."""

    BELL_JAR = "bellJar"
    SIMPLE_BOX = "simpleBox"
    OPEN_FIELD = "openField"
    MAZE = "maze"
    CAVERN = "cavern"

    @classmethod
    def parse(cls, value: object) -> Strategy | None:
        """Accept a Strategy, its value, or its name; None if unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value in (member.value, member.name):
                    return member
        return None


DEFAULT_STRATEGY = Strategy.BELL_JAR


class Zone(Enum):
    """Row band a logical cell belongs to."""

    BORDER = "border"
    HOME_BASE = "home_base"
    SEPARATOR = "separator"
    NECK = "neck"
    BODY = "body"
    GAP = "gap"


@dataclass(frozen=True)
class FillWeights:
    """Relative odds of each terrain state in an independently randomized fill.

    Weights need not sum to 1; they are normalised on use.
    """

    empty: float
    diggable: float
    undiggable: float

    def __post_init__(self) -> None:
        for name in ("empty", "diggable", "undiggable"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} weight must be >= 0, got {getattr(self, name)}")
        if self.total <= 0:
            raise ValueError("At least one fill weight must be positive")

    @property
    def total(self) -> float:
        return self.empty + self.diggable + self.undiggable

    def pick(self, rng: random.Random) -> TerrainState:
        roll = rng.random() * self.total
        if roll < self.empty:
            return TerrainState.EMPTY
        if roll < self.empty + self.diggable:
            return TerrainState.DIGGABLE
        return TerrainState.UNDIGGABLE


class Cavern(NamedTuple):
    x: int
    y: int
    radius: float


class GenerationError(RuntimeError):
    """Raised when strict generation cannot produce a fully reachable map."""
