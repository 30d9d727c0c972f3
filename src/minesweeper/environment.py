"""
Gymnasium environment wrapper for Minesweeper.

Lets automated agents play through the same board engine as the console.
"""
import random
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig, WinRule, OBS_MARKED, OBS_MINE
from .coordinate import Coordinate
from .console.renderer import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -2 = marked cell
        - -1 = unknown cell
        - 0-8 = explored cell with adjacent mine count
        - 9 = explored mine (after a loss)

    Actions:
        Discrete action space of size 2 * n * n.
        Action i < n*n reveals cell (i // n, i % n).
        Action i >= n*n toggles the mark on cell i - n*n.

    Rewards:
        - +1 for a reveal that explores new cells
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for revealing an already explored cell
        - 0 for marking
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 8 mines, won
                only by marking exactly the mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig(win_rule=WinRule.MARK_SET)
        self.board = Board(self.config)
        self.render_mode = render_mode

        size = self.config.field_size
        self._num_cells = size * size

        self.observation_space = spaces.Box(
            low=OBS_MARKED,
            high=OBS_MINE,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._num_cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.board.reset()
        self.board.rng = random.Random(int(self.np_random.integers(2**31)))
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Reveal index (cell) or mark index (n*n + cell).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        cell, is_mark = self._decode_action(int(action))
        self._steps += 1

        if is_mark:
            reward = self._mark_reward(cell)
        else:
            reward = self._reveal_reward(cell)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[Coordinate, bool]:
        """Split an action index into a cell and whether it marks."""
        is_mark = action >= self._num_cells
        index = action % self._num_cells
        size = self.config.field_size
        return Coordinate(index // size, index % size), is_mark

    def _reveal_reward(self, cell: Coordinate) -> float:
        """Reveal a cell and score the result."""
        if self.board.is_explored(cell):
            return -0.1

        self.board.reveal(cell)

        if self.board.is_lost:
            return -10.0
        if self.board.is_won:
            return 10.0
        return 1.0

    def _mark_reward(self, cell: Coordinate) -> float:
        """Toggle a mark and score the result."""
        self.board.mark(cell)
        return 10.0 if self.board.is_won else 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "explored": len(self.board.explored),
            "marked": len(self.board.marked),
            "game_state": self.board.game_state.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action. Both reveal and mark
            are valid on unexplored cells.
        """
        unexplored = np.ones(self._num_cells, dtype=bool)
        size = self.config.field_size
        for row, col in self.board.explored:
            unexplored[row * size + col] = False
        return np.concatenate([unexplored, unexplored])
