"""
Tests for random tile spawning.
"""

import random

import pytest

from ..engine_core.engine import GameEngine
from .conftest import ScriptedRng

EMPTY = [None] * 4


class TestSpawnTiles:
    """Tests for spawn_tiles()."""

    def test_picks_by_swap_remove(self, make_engine):
        """The second pick indexes the list after the first cell is swapped out."""
        engine = make_engine([EMPTY, EMPTY, EMPTY, EMPTY], picks=[0, 0])
        spawned = engine.spawn_tiles()

        # (0,0) is taken, (3,3) is swapped into slot 0, then picked
        assert spawned == [(0, 0), (3, 3)]
        assert engine.block_matrix.values() == [
            [2, None, None, None], EMPTY, EMPTY, [None, None, None, 2],
        ]

    def test_uniform_bounds(self):
        """Each pick draws from the cells still available."""
        source = ScriptedRng([5, 5])
        engine = GameEngine.from_values([EMPTY, EMPTY, EMPTY, EMPTY], rng=source)
        engine.spawn_tiles()
        assert source.bounds == [16, 15]

    def test_two_distinct_cells(self, rng):
        """Two different cells are always filled."""
        for _ in range(50):
            engine = GameEngine(rng=rng)
            assert len(set(p for p, _ in engine.block_matrix.tiles())) == 2

    def test_exactly_two_empty(self, make_engine):
        """With two empty cells both get filled."""
        rows = [[2, 4, 8, 16], [32, 64, 128, 256], [512, 1024, 2048, 4096], [8, 16, None, None]]
        engine = make_engine(rows)
        spawned = engine.spawn_tiles()

        assert sorted(spawned) == [(2, 3), (3, 3)]
        assert engine.block_matrix.empty_cells() == []

    @pytest.mark.parametrize("empty_cells", [0, 1])
    def test_too_few_cells_is_a_no_op(self, make_engine, empty_cells):
        """Fewer than two empty cells spawns nothing and draws no numbers."""
        values = [2 ** (i % 11 + 1) for i in range(16)]
        for i in range(empty_cells):
            values[i] = None
        rows = [values[r * 4:(r + 1) * 4] for r in range(4)]
        engine = make_engine(rows, picks=[])
        calls = []
        engine.subscribe(calls.append)

        assert engine.spawn_tiles() == []
        assert engine.tile_count == 16 - empty_cells
        assert calls == []

    def test_public_spawn_notifies(self, make_engine):
        """A spawn that places tiles notifies once."""
        engine = make_engine([EMPTY, EMPTY, EMPTY, EMPTY])
        calls = []
        engine.subscribe(calls.append)

        engine.spawn_tiles()

        assert len(calls) == 1
        assert engine.version == 1

    def test_spawned_values_are_two(self):
        engine = GameEngine(rng=random.Random(3))
        engine.spawn_tiles()
        assert [t.value for _, t in engine.block_matrix.tiles()] == [2, 2, 2, 2]
