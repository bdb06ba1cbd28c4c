"""
Grid - Fixed 4x4 container of optional tiles.

Coordinates are (column, row), zero-based; column is the horizontal axis.
Cells hold either nothing or exactly one Tile.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Iterator, Optional

BOARD_SIZE = 4
STARTING_VALUE = 2

Position = tuple[int, int]  # (column, row)


class GridIndexError(IndexError):
    """Raised when a coordinate falls outside the board."""

    def __init__(self, col: int, row: int):
        self.col = col
        self.row = row
        super().__init__(
            f"Cell ({col}, {row}) is outside the {BOARD_SIZE}x{BOARD_SIZE} board"
        )


@dataclass(frozen=True)
class Tile:
    """
    A numbered block on the board.

    The identity is assigned once at creation and never reused.
    A merge produces a new Tile with the same identity and a doubled value.
    """
    tile_id: int
    value: int = STARTING_VALUE

    def doubled(self) -> Tile:
        return Tile(tile_id=self.tile_id, value=self.value * 2)


class Grid:
    """
    A 4x4 board mapping (column, row) to an optional Tile.

    No validation of tile values happens here; the engine owns the rules.
    """

    def __init__(self):
        # Stored row-major: self._cells[row][col]
        self._cells: list[list[Tile | None]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def from_values(
        cls,
        rows: list[list[Optional[int]]],
        id_source: Callable[[], int],
    ) -> Grid:
        """
        Build a grid from a value matrix indexed [row][col].

        Zero and None both mean an empty cell. Identities are drawn
        from id_source in row-major order.
        """
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError(f"Expected a {BOARD_SIZE}x{BOARD_SIZE} value matrix")

        grid = cls()
        for row, values in enumerate(rows):
            for col, value in enumerate(values):
                if value:
                    grid.set(col, row, Tile(tile_id=id_source(), value=value))
        return grid

    def get(self, col: int, row: int) -> Tile | None:
        """Get the tile at (col, row), or None if the cell is empty."""
        self._check(col, row)
        return self._cells[row][col]

    def set(self, col: int, row: int, tile: Tile | None) -> None:
        """Place a tile at (col, row), or clear the cell with None."""
        self._check(col, row)
        if tile is not None and not isinstance(tile, Tile):
            raise TypeError(f"Expected Tile or None, got {type(tile).__name__}")
        self._cells[row][col] = tile

    def empty_cells(self) -> list[Position]:
        """All empty coordinates, row outer and column inner."""
        return [
            (col, row)
            for row in range(BOARD_SIZE)
            for col in range(BOARD_SIZE)
            if self._cells[row][col] is None
        ]

    def tiles(self) -> Iterator[tuple[Position, Tile]]:
        """Yield (position, tile) for every occupied cell, row-major."""
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                tile = self._cells[row][col]
                if tile is not None:
                    yield (col, row), tile

    def values(self) -> list[list[int | None]]:
        """Value matrix indexed [row][col]."""
        return [
            [tile.value if tile else None for tile in row]
            for row in self._cells
        ]

    def clone(self) -> Grid:
        """Independent copy. Tiles are immutable so they are shared."""
        copy = Grid()
        copy._cells = [list(row) for row in self._cells]
        return copy

    def __len__(self) -> int:
        return sum(1 for _ in self.tiles())

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self.values()!r})"

    @staticmethod
    def _check(col: int, row: int) -> None:
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            raise GridIndexError(col, row)
