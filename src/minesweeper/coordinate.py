"""
Coordinate module for Minesweeper game.

Identifies a single cell on the board by its 0-indexed (row, col) position.
"""
from typing import NamedTuple


# ============================================================================
# Coordinate Value Type
# ============================================================================

class Coordinate(NamedTuple):
    """
    Position of a cell on the grid.

    Compares, hashes and orders like a plain ``(row, col)`` tuple, so
    sets of coordinates can be checked against literal tuples.

    Attributes:
        row: 0-indexed row.
        col: 0-indexed column.
    """

    row: int
    col: int

    def in_bounds(self, field_size: int) -> bool:
        """Check if this position lies on a square board of given side."""
        return 0 <= self.row < field_size and 0 <= self.col < field_size

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"
