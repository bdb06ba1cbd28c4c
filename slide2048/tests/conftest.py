"""
Pytest fixtures for Slide2048 tests.
"""

import random
import pytest

from ..engine_core.engine import GameEngine


class ScriptedRng:
    """
    Stand-in for random.Random that returns scripted indices.

    Records every randrange bound it was asked for.
    """

    def __init__(self, picks):
        self.picks = list(picks)
        self.bounds: list[int] = []

    def randrange(self, n):
        self.bounds.append(n)
        pick = self.picks.pop(0) if self.picks else 0
        assert 0 <= pick < n, f"scripted pick {pick} out of range for {n}"
        return pick


@pytest.fixture
def rng() -> random.Random:
    """Seeded random source so placement is repeatable."""
    return random.Random(2048)


@pytest.fixture
def engine(rng) -> GameEngine:
    """A fresh game with two opening tiles."""
    return GameEngine(rng=rng)


@pytest.fixture
def make_engine():
    """
    Build an engine over a value matrix ([row][col], None for empty).

    Pass picks to script where spawned tiles land.
    """
    def factory(rows, picks=None):
        source = ScriptedRng(picks) if picks is not None else random.Random(7)
        return GameEngine.from_values(rows, rng=source)

    return factory


@pytest.fixture
def notifications():
    """Collects the engines passed to an observer."""
    return []
