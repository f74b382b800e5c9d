"""delve-play - Player and editor collaborators for the delve terrain grid."""
from delve_play.editor import EditResult, TileEditor
from delve_play.player import DIRECTIONS, Player

__all__ = [
    "DIRECTIONS",
    "EditResult",
    "Player",
    "TileEditor",
]
