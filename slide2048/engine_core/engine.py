"""
Game Engine - Owns the board and applies moves.

The engine is the single point of state mutation:
- move() transforms every line, then spawns if anything changed
- new_game() clears the board and places the opening tiles
- Observers are notified exactly once per public mutating call

Design principles:
- Synchronous: each call completes before returning
- One direction-agnostic line algorithm for all four moves
- Tile identities come from an engine-owned counter and are never reused
"""

from __future__ import annotations
from typing import Any, Callable, Optional
import logging
import random

from ..config import EngineConfig
from .grid import BOARD_SIZE, STARTING_VALUE, Grid, Position, Tile
from .move import Direction, MoveResult, line_positions, merge_line, pad_line

logger = logging.getLogger(__name__)

Observer = Callable[["GameEngine"], Any]

TILES_PER_SPAWN = 2


class GameEngine:
    """
    The sliding-tile game.

    Usage:
        engine = GameEngine(rng=random.Random(7))
        unsubscribe = engine.subscribe(lambda e: redraw(e.block_matrix))

        result = engine.move(Direction.LEFT)
        if result.changed:
            ...
    """

    def __init__(self, config: EngineConfig | None = None, rng: random.Random | None = None):
        self._setup(config, rng)
        self.new_game()

    def _setup(self, config: EngineConfig | None, rng: random.Random | None) -> None:
        self.config = config or EngineConfig()
        self._rng = rng if rng is not None else random.Random(self.config.random_seed)

        self._grid = Grid()
        self._last_direction = Direction.UP
        self._last_id = 0
        self._observers: list[Observer] = []
        self._version = 0

    @classmethod
    def from_values(
        cls,
        rows: list[list[Optional[int]]],
        config: EngineConfig | None = None,
        rng: random.Random | None = None,
    ) -> GameEngine:
        """
        Create an engine over a given value matrix ([row][col]).

        No tiles are spawned; identities are allocated in row-major order.
        """
        engine = cls.__new__(cls)
        engine._setup(config, rng)
        engine._grid = Grid.from_values(rows, engine._next_id)
        return engine

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def block_matrix(self) -> Grid:
        """Snapshot of the board; mutating it does not affect the engine."""
        return self._grid.clone()

    @property
    def last_gesture_direction(self) -> Direction:
        return self._last_direction

    @property
    def version(self) -> int:
        """Increments once per change notification."""
        return self._version

    @property
    def tile_count(self) -> int:
        return len(self._grid)

    @property
    def value_sum(self) -> int:
        return sum(tile.value for _, tile in self._grid.tiles())

    # -------------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """
        Register a callback invoked with the engine after each change.

        Returns a function that removes the callback.
        """
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        self._version += 1
        for observer in list(self._observers):
            observer(self)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def new_game(self) -> None:
        """Clear the board, reset the gesture direction, place two tiles."""
        self._grid = Grid()
        self._last_direction = Direction.UP
        spawned = self._spawn_tiles()
        logger.info("New game started with tiles at %s", spawned)
        self._notify()

    def move(self, direction: Direction) -> MoveResult:
        """
        Apply one move.

        Every line along the direction's axis is compacted, merged and
        re-padded. If any cell's value differs afterwards, two new tiles
        are spawned. The direction is recorded either way.
        """
        self._last_direction = direction
        result = MoveResult(direction=direction)

        for index in range(BOARD_SIZE):
            positions = line_positions(direction.axis, index)
            before = [self._grid.get(col, row) for col, row in positions]

            compact = [tile for tile in before if tile is not None]
            merged, merges = merge_line(compact, reverse=direction.toward_end)
            after = pad_line(merged, direction.toward_end)
            result.merges.extend(merges)

            for (col, row), old, new in zip(positions, before, after):
                if _value(old) != _value(new):
                    result.changed = True
                self._grid.set(col, row, new)

        if result.changed:
            result.spawned = self._spawn_tiles()

        logger.debug(
            "Move %s: changed=%s merges=%d spawned=%s",
            direction.value, result.changed, len(result.merges), result.spawned,
        )
        self._notify()
        return result

    def spawn_tiles(self) -> list[Position]:
        """
        Place two new tiles in random empty cells.

        Does nothing (and notifies no one) when fewer than two cells are empty.
        """
        spawned = self._spawn_tiles()
        if spawned:
            self._notify()
        return spawned

    def _spawn_tiles(self) -> list[Position]:
        empty = self._grid.empty_cells()
        if len(empty) < TILES_PER_SPAWN:
            logger.debug("Spawn skipped: only %d empty cell(s)", len(empty))
            return []

        spawned: list[Position] = []
        for _ in range(TILES_PER_SPAWN):
            index = self._rng.randrange(len(empty))
            col, row = empty[index]
            self._grid.set(col, row, Tile(tile_id=self._next_id(), value=STARTING_VALUE))
            spawned.append((col, row))

            # Swap-remove: order of the remaining cells does not matter
            empty[index] = empty[-1]
            empty.pop()

        logger.debug("Spawned tiles at %s", spawned)
        return spawned

    def _next_id(self) -> int:
        self._last_id += 1
        return self._last_id


def _value(tile: Tile | None) -> int | None:
    return tile.value if tile is not None else None
