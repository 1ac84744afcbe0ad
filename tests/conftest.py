"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, GameConfig, GameController


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_board() -> Board:
    """Create a 4x4 board with a single hazard in the far corner."""
    return Board.from_hazards(4, 4, {(3, 3)})


@pytest.fixture
def center_board() -> Board:
    """Create a 3x3 board with the hazard in the centre."""
    return Board.from_hazards(3, 3, {(1, 1)})


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no hazards for cascade testing."""
    return Board.from_hazards(5, 5, set())


@pytest.fixture
def walled_board() -> Board:
    """
    Create a 5x5 board split by a column of hazards.

    Column 2 is all hazards, so a cascade started on the left can
    never reach column 4.
    """
    return Board.from_hazards(5, 5, {(2, y) for y in range(5)})


# ============================================================================
# Controller Fixtures
# ============================================================================

@pytest.fixture
def rng() -> random.Random:
    """Seeded random source for reproducible boards."""
    return random.Random(1234)


@pytest.fixture
def controller(rng: random.Random) -> GameController:
    """Create a default controller with a seeded board."""
    return GameController(GameConfig(), rng=rng)


@pytest.fixture
def safe_controller() -> GameController:
    """Create a controller on a 5x5 board with no hazards."""
    return GameController(GameConfig(5, 5, 0, cell_size=10.0))


@pytest.fixture
def doomed_controller() -> GameController:
    """Create a controller where every cell is a hazard."""
    return GameController(GameConfig(3, 3, 9, cell_size=10.0))
