"""
Engine Core - Board state and the move/spawn rules.

The engine is the runtime that:
1. Holds the 4x4 Grid of tiles
2. Applies directional moves (compaction + merge + shift)
3. Spawns new tiles after a move that changed the board
4. Notifies observers after every mutation
"""

from .grid import BOARD_SIZE, Grid, GridIndexError, Position, Tile
from .move import Axis, Direction, InvalidDirectionError, Merge, MoveResult, merge_line
from .engine import GameEngine

__all__ = [
    "BOARD_SIZE",
    "Grid",
    "GridIndexError",
    "Position",
    "Tile",
    "Axis",
    "Direction",
    "InvalidDirectionError",
    "Merge",
    "MoveResult",
    "merge_line",
    "GameEngine",
]
