"""
Move System - Directions, line extraction, and the single-line merge.

A move processes the board as four independent lines:
1. Horizontal moves (left/right) take each row, scanning columns 0..3
2. Vertical moves (up/down) take each column, scanning rows 0..3
3. Each line is compacted, merged toward the direction of travel,
   and re-padded so empties trail behind

The merge itself is a pure function over a compact list of tiles,
shared by all four directions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .grid import BOARD_SIZE, Position, Tile


class InvalidDirectionError(ValueError):
    """Raised when a direction name cannot be parsed."""

    def __init__(self, text: str):
        self.text = text
        valid = ", ".join(d.value for d in Direction)
        super().__init__(f"Unknown direction {text!r} (expected one of: {valid})")


class Axis(Enum):
    """Which way lines run across the board."""
    HORIZONTAL = "horizontal"  # lines are rows
    VERTICAL = "vertical"  # lines are columns


class Direction(Enum):
    """Swipe directions."""
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def axis(self) -> Axis:
        if self in (Direction.LEFT, Direction.RIGHT):
            return Axis.HORIZONTAL
        return Axis.VERTICAL

    @property
    def toward_end(self) -> bool:
        """True when tiles collapse toward index 3 of each line."""
        return self in (Direction.RIGHT, Direction.DOWN)

    @classmethod
    def parse(cls, text: str) -> Direction:
        """Parse a direction name, case-insensitively."""
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise InvalidDirectionError(text) from None


def line_positions(axis: Axis, index: int) -> list[Position]:
    """
    Coordinates of one line in scan order (0 -> 3).

    For HORIZONTAL the line is row `index`; for VERTICAL it is
    column `index` (the transpose).
    """
    if axis is Axis.HORIZONTAL:
        return [(i, index) for i in range(BOARD_SIZE)]
    return [(index, i) for i in range(BOARD_SIZE)]


@dataclass(frozen=True)
class Merge:
    """A pair of equal tiles that combined during a move."""
    tile: Tile  # The resulting tile (surviving identity, doubled value)
    absorbed: Tile  # The tile that disappeared


def merge_line(tiles: list[Tile], reverse: bool = False) -> tuple[list[Tile], list[Merge]]:
    """
    Merge a compact line of tiles toward its start.

    With reverse=True the line is flipped before and after merging so
    that merges collapse toward the end instead.

    Each output tile is the product of at most one merge, so
    [2, 2, 2, 2] becomes [4, 4] and never [8]. The merged tile keeps
    the identity of the tile scanned second.

    Returns (merged tiles, merge records).
    """
    working = list(reversed(tiles)) if reverse else list(tiles)

    out: list[Tile] = []
    merged: list[bool] = []
    merges: list[Merge] = []

    for tile in working:
        if out and not merged[-1] and out[-1].value == tile.value:
            absorbed = out.pop()
            merged.pop()
            combined = tile.doubled()
            out.append(combined)
            merged.append(True)
            merges.append(Merge(tile=combined, absorbed=absorbed))
        else:
            out.append(tile)
            merged.append(False)

    if reverse:
        out.reverse()
    return out, merges


def pad_line(tiles: list[Tile], toward_end: bool) -> list[Tile | None]:
    """Pad a merged line to full length; empties trail behind the travel direction."""
    gap: list[Tile | None] = [None] * (BOARD_SIZE - len(tiles))
    if toward_end:
        return gap + list(tiles)
    return list(tiles) + gap


@dataclass
class MoveResult:
    """
    Result of applying one move.

    Contains:
    - The direction applied
    - Whether any cell's value changed
    - Merges that happened
    - Positions of the tiles spawned afterwards (empty if none)
    """
    direction: Direction
    changed: bool = False
    merges: list[Merge] = field(default_factory=list)
    spawned: list[Position] = field(default_factory=list)
