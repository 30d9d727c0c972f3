"""
Minesweeper game module.

Provides the board engine, its coordinate type and a Gymnasium wrapper.
"""
from .coordinate import Coordinate
from .board import (
    Board,
    BoardConfig,
    GameState,
    WinRule,
    OutOfBoundsError,
)
from .environment import MinesweeperEnv

__all__ = [
    "Coordinate",
    "Board",
    "BoardConfig",
    "GameState",
    "WinRule",
    "OutOfBoundsError",
    "MinesweeperEnv",
]
