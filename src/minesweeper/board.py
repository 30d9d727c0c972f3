"""
Board module for Minesweeper game.

Implements the board engine: lazy mine placement, flood-fill reveal,
flag marking and win/loss detection.
"""
import logging
import random
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, List, Set, Tuple

import numpy as np

from .coordinate import Coordinate


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class WinRule(Enum):
    """
    How a win is decided from the marked cells.

    MARK_COUNT: as many cells marked as there are mines.
    MARK_SET: the marked cells are exactly the mines.
    """

    MARK_COUNT = auto()
    MARK_SET = auto()


# Observation values for cells that carry no adjacent count
OBS_HIDDEN = -1
OBS_MARKED = -2
OBS_MINE = 9


class OutOfBoundsError(IndexError):
    """Raised when a coordinate does not lie on the board."""

    def __init__(self, cell: Tuple[int, int], field_size: int) -> None:
        super().__init__(
            f"Cell {tuple(cell)} is outside the {field_size}x{field_size} board"
        )
        self.cell = cell
        self.field_size = field_size


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        field_size: Side length of the square grid.
        num_mines: Total mines to place.
        win_rule: How marked cells decide a win.
    """

    field_size: int = 9
    num_mines: int = 8
    win_rule: WinRule = WinRule.MARK_COUNT

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.field_size < 1:
            raise ValueError("Field size must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        max_mines = self.max_mines
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")

    @property
    def max_mines(self) -> int:
        """Largest mine count that still leaves the first reveal safe."""
        return self.field_size * self.field_size - 1


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper board engine.

    Owns the mine, marked and explored sets. Mines are placed on the
    first reveal so that the first revealed cell is never a mine.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    rng: random.Random = field(default_factory=random.Random, repr=False)
    _mines: Set[Coordinate] = field(default_factory=set, repr=False)
    _marked: Set[Coordinate] = field(default_factory=set, repr=False)
    _explored: Set[Coordinate] = field(default_factory=set, repr=False)
    _mines_placed: bool = False
    _lost: bool = False

    # ========================================================================
    # Coordinate Utilities (Low-level)
    # ========================================================================

    def _to_coordinate(self, cell: Tuple[int, int]) -> Coordinate:
        """Convert to a Coordinate, raising OutOfBoundsError if off board."""
        coordinate = Coordinate(*cell)
        if not coordinate.in_bounds(self.config.field_size):
            raise OutOfBoundsError(coordinate, self.config.field_size)
        return coordinate

    def neighbors(self, cell: Tuple[int, int]) -> List[Coordinate]:
        """
        Get in-bounds cells at Chebyshev distance 1.

        Args:
            cell: (row, col) of the center cell.

        Returns:
            Up to 8 coordinates, in row-major order.
        """
        center = self._to_coordinate(cell)
        neighbors = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                candidate = Coordinate(
                    center.row + delta_row, center.col + delta_col
                )
                if candidate.in_bounds(self.config.field_size):
                    neighbors.append(candidate)
        return neighbors

    def adjacent_mine_count(self, cell: Tuple[int, int]) -> int:
        """Count mines among the neighbors of a cell."""
        return sum(1 for neighbor in self.neighbors(cell) if neighbor in self._mines)

    # ========================================================================
    # Mine Placement (Low-level)
    # ========================================================================

    def _place_mines(self, exclude: Coordinate) -> None:
        """
        Place mines uniformly at random, keeping one cell mine-free.

        Draws random positions and retries on collisions with an already
        placed mine or with the excluded cell.

        Args:
            exclude: Position that must not hold a mine.
        """
        size = self.config.field_size
        while len(self._mines) < self.config.num_mines:
            candidate = Coordinate(self.rng.randrange(size), self.rng.randrange(size))
            if candidate == exclude:
                continue
            self._mines.add(candidate)
        self._mines_placed = True
        logger.debug(
            "Placed %d mines avoiding %s", len(self._mines), exclude
        )

    def plant_mines(self, cells: Iterable[Tuple[int, int]]) -> None:
        """
        Place an explicit mine layout before the first reveal.

        Args:
            cells: Exactly num_mines distinct in-bounds positions.

        Raises:
            ValueError: If mines are already placed, or the layout has the
                wrong size or repeats a position.
            OutOfBoundsError: If a position is off the board.
        """
        if self._mines_placed:
            raise ValueError("Mines are already placed")
        layout = [self._to_coordinate(cell) for cell in cells]
        if len(set(layout)) != len(layout):
            raise ValueError("Mine layout contains duplicate cells")
        if len(layout) != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mines, got {len(layout)}"
            )
        self._mines = set(layout)
        self._mines_placed = True

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def mark(self, cell: Tuple[int, int]) -> None:
        """
        Toggle the flag on a cell.

        Args:
            cell: (row, col) to flag or unflag.
        """
        coordinate = self._to_coordinate(cell)
        if coordinate in self._marked:
            self._marked.remove(coordinate)
        else:
            self._marked.add(coordinate)

    def reveal(self, cell: Tuple[int, int]) -> Set[Coordinate]:
        """
        Reveal a cell.

        On the first reveal, places mines avoiding this cell. Revealing a
        mine loses the game and exposes every mine. Revealing a safe cell
        flood-fills its zero-count region and the numbered border.

        Args:
            cell: (row, col) to reveal.

        Returns:
            Cells newly explored by this call (empty when a mine was hit).
        """
        coordinate = self._to_coordinate(cell)

        if not self._mines_placed:
            self._place_mines(coordinate)

        if coordinate in self._mines:
            self._lost = True
            self._explored.update(self._mines)
            logger.debug("Mine revealed at %s", coordinate)
            return set()

        revealed = self._flood_fill(coordinate)
        logger.debug("Reveal at %s explored %d cells", coordinate, len(revealed))
        return revealed

    def _flood_fill(self, start: Coordinate) -> Set[Coordinate]:
        """Explore from start, expanding through zero-count cells."""
        revealed: Set[Coordinate] = set()
        queue = deque([start])
        queued = {start}

        while queue:
            current = queue.popleft()
            self._marked.discard(current)
            if current not in self._explored:
                self._explored.add(current)
                revealed.add(current)

            if self.adjacent_mine_count(current) > 0:
                continue

            for neighbor in self.neighbors(current):
                if neighbor not in self._explored and neighbor not in queued:
                    queued.add(neighbor)
                    queue.append(neighbor)

        return revealed

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def mines(self) -> FrozenSet[Coordinate]:
        """Positions holding mines (empty until placed)."""
        return frozenset(self._mines)

    @property
    def marked(self) -> FrozenSet[Coordinate]:
        """Positions the player has flagged."""
        return frozenset(self._marked)

    @property
    def explored(self) -> FrozenSet[Coordinate]:
        """Positions that have been revealed."""
        return frozenset(self._explored)

    @property
    def mines_placed(self) -> bool:
        """Check if the mine layout exists yet."""
        return self._mines_placed

    @property
    def is_lost(self) -> bool:
        """Check if a mine was revealed."""
        return self._lost

    @property
    def is_won(self) -> bool:
        """Check if the marked cells satisfy the configured win rule."""
        if self.config.num_mines == 0:
            return False
        if self.config.win_rule == WinRule.MARK_SET:
            return self._mines_placed and self._marked == self._mines
        return len(self._marked) == self.config.num_mines

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.game_state == GameState.PLAYING

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self.is_won:
            return GameState.WON
        if self._lost:
            return GameState.LOST
        return GameState.PLAYING

    def is_mine(self, cell: Tuple[int, int]) -> bool:
        return self._to_coordinate(cell) in self._mines

    def is_marked(self, cell: Tuple[int, int]) -> bool:
        return self._to_coordinate(cell) in self._marked

    def is_explored(self, cell: Tuple[int, int]) -> bool:
        return self._to_coordinate(cell) in self._explored

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -2 = marked (takes precedence)
                -1 = unknown
                0-8 = explored safe cell with adjacent count
                9 = explored mine
        """
        size = self.config.field_size
        obs = np.full((size, size), OBS_HIDDEN, dtype=np.int8)
        for row in range(size):
            for col in range(size):
                cell = Coordinate(row, col)
                if cell in self._marked:
                    obs[row, col] = OBS_MARKED
                elif cell in self._explored:
                    if cell in self._mines:
                        obs[row, col] = OBS_MINE
                    else:
                        obs[row, col] = self.adjacent_mine_count(cell)
        return obs

    def reset(self) -> None:
        """Reset board to initial state for new game."""
        self._mines = set()
        self._marked = set()
        self._explored = set()
        self._mines_placed = False
        self._lost = False
