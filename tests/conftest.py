"""
Pytest configuration and shared fixtures.
"""
import random
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, WinRule


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 8 mines."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """Create a default board with reproducible mine placement."""
    return Board(BoardConfig(), random.Random(1234))


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board with its single mine in the corner (2, 2)."""
    board = Board(BoardConfig(3, 1))
    board.plant_mines([(2, 2)])
    return board


@pytest.fixture
def wall_board() -> Board:
    """Create a 5x5 board with a column of mines down the middle."""
    board = Board(BoardConfig(5, 5))
    board.plant_mines([(row, 2) for row in range(5)])
    return board


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 0))


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 8)


@pytest.fixture
def strict_config() -> BoardConfig:
    """Configuration that only accepts the true mine set as a win."""
    return BoardConfig(3, 1, WinRule.MARK_SET)


# ============================================================================
# Input Fixtures
# ============================================================================

@pytest.fixture
def scripted_input() -> Callable[[Iterable[str]], Callable[[], str]]:
    """Build a read_line callable that replays lines, then raises EOFError."""

    def make(lines: Iterable[str]) -> Callable[[], str]:
        remaining = iter(lines)

        def read_line() -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read_line

    return make
