"""
Pytest configuration and fixtures for the coverage planner tests.

Fixtures provide common grids:
- Open and fully blocked grids
- The blocked-middle-row 3x3 grid
- A T-shaped corridor that forces one backtrack step
"""

import sys
from pathlib import Path

import matplotlib
import pytest

# Headless plotting for viz/animate tests
matplotlib.use("Agg")

# Ensure project root is in path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from grid import Grid  # noqa: E402
from planners import PLANNERS  # noqa: E402


@pytest.fixture
def planner():
    """The registered greedy planner with fresh timing stats."""
    algo = PLANNERS["GreedyFrontier"]
    algo.reset_stats()
    return algo


@pytest.fixture
def open_5x5():
    return Grid.create(5, 5)


@pytest.fixture
def blocked_2x2():
    return Grid.create(2, 2, [(0, 0), (0, 1), (1, 0), (1, 1)])


@pytest.fixture
def middle_row_blocked():
    """3x3 with row 1 fully blocked."""
    return Grid.create(3, 3, [(1, 0), (1, 1), (1, 2)])


@pytest.fixture
def t_corridor():
    """
    ...
    #.#
    #.#
    """
    return Grid.create(3, 3, [(1, 0), (1, 2), (2, 0), (2, 2)])
