"""delve-mapgen - Zone-structured procedural maps for the delve terrain grid."""
from delve_mapgen.config import MapConfig
from delve_mapgen.connectivity import reachable_from, unreachable_cells
from delve_mapgen.generator import MapGenerator
from delve_mapgen.strategies import BODY_FILLERS
from delve_mapgen.types import (
    DEFAULT_STRATEGY,
    Cavern,
    FillWeights,
    GenerationError,
    Rows,
    Strategy,
    Zone,
)

__all__ = [
    "BODY_FILLERS",
    "Cavern",
    "DEFAULT_STRATEGY",
    "FillWeights",
    "GenerationError",
    "MapConfig",
    "MapGenerator",
    "Rows",
    "Strategy",
    "Zone",
    "reachable_from",
    "unreachable_cells",
]
