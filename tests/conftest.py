"""
Pytest configuration and shared fixtures for the snake test suite.
"""

import sys
from pathlib import Path

import pytest

# Ensure project root is on PYTHONPATH so 'src.pocket_snake' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from src.pocket_snake.config import PLAYING, RIGHT  # noqa: E402
from src.pocket_snake.engine import SimulationEngine  # noqa: E402


class SequenceRng:
    """
    Stand-in for random.Random that hands out a fixed sequence from
    randrange(). Returns 0 once the sequence is exhausted.
    """

    def __init__(self, values=()):
        self.values = list(values)
        self.calls = 0

    def randrange(self, n):
        self.calls += 1
        if not self.values:
            return 0
        value = self.values.pop(0)
        assert 0 <= value < n, f"scripted value {value} out of range({n})"
        return value


@pytest.fixture
def rng():
    return SequenceRng()


@pytest.fixture
def engine(rng):
    """Engine on the default 15x15 grid driven by a scripted RNG."""
    return SimulationEngine(rng=rng)


@pytest.fixture
def place():
    """
    Put an engine into an exact board position.

    Usage: place(engine, snake=[(5, 5), (4, 5)], direction=RIGHT, food=(0, 0))
    """

    def _place(engine, snake, direction=RIGHT, food=(0, 0), phase=PLAYING, score=0):
        state = engine.state
        state.snake = list(snake)
        state.direction = direction
        state.food = food
        state.phase = phase
        state.score = score
        return engine

    return _place
