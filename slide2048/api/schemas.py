"""
Pydantic Schemas - Read-only snapshots of the game for rendering.

These models define the contract between the engine and whatever
draws the board. Coordinates are (column, row), zero-based.
"""

from __future__ import annotations
from typing import Optional
from pydantic import BaseModel, Field

from ..engine_core.engine import GameEngine
from ..engine_core.grid import BOARD_SIZE
from ..engine_core.move import Direction, MoveResult


class TileInfo(BaseModel):
    """A tile and where it sits."""
    tile_id: int
    value: int = Field(ge=2)
    column: int = Field(ge=0, lt=BOARD_SIZE)
    row: int = Field(ge=0, lt=BOARD_SIZE)


class BoardSnapshot(BaseModel):
    """Full board state after a change notification."""
    rows: list[list[Optional[int]]] = Field(description="Tile values indexed [row][column]")
    tiles: list[TileInfo] = Field(default_factory=list)
    last_direction: Direction
    version: int = 0
    empty_cells: int = 0

    @classmethod
    def from_engine(cls, engine: GameEngine) -> BoardSnapshot:
        grid = engine.block_matrix
        tiles = [
            TileInfo(tile_id=tile.tile_id, value=tile.value, column=col, row=row)
            for (col, row), tile in grid.tiles()
        ]
        return cls(
            rows=grid.values(),
            tiles=tiles,
            last_direction=engine.last_gesture_direction,
            version=engine.version,
            empty_cells=len(grid.empty_cells()),
        )


class MoveSummary(BaseModel):
    """What one move did."""
    direction: Direction
    changed: bool
    merges: int = 0
    spawned: list[tuple[int, int]] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: MoveResult) -> MoveSummary:
        return cls(
            direction=result.direction,
            changed=result.changed,
            merges=len(result.merges),
            spawned=list(result.spawned),
        )


class SimulationReport(BaseModel):
    """A replayed move sequence and the final board."""
    seed: Optional[int] = None
    moves: list[MoveSummary] = Field(default_factory=list)
    board: BoardSnapshot
