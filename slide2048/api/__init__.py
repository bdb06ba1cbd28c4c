"""
API Module - Serializable views of the engine.

A presentation layer reads these snapshots after each change
notification instead of touching the engine's grid directly.
"""

from .schemas import BoardSnapshot, MoveSummary, SimulationReport, TileInfo

__all__ = [
    "BoardSnapshot",
    "MoveSummary",
    "SimulationReport",
    "TileInfo",
]
