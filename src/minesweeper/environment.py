"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface over the transition functions.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, DEFAULT, GameState
from .cell import FLAGGED_CODE, HIDDEN_CODE, MINE_CODE
from .generator import generate_from_config
from .transitions import Action, apply


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D int8 array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = open cell with adjacent mine count
        - 9 = open mine

    Actions:
        Discrete action space of size 3 * rows * cols.
        Action a applies Action(a // cells) to flat cell a % cells,
        so the first block reveals, the second flags, the third chords.

    Rewards:
        - +1 per newly opened cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for an action that changed nothing
        - 0 for a flag change
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
            config: Board configuration (default: 8x8 with 20 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or DEFAULT
        self.render_mode = render_mode
        self._cells = self.config.cell_count

        self.observation_space = spaces.Box(
            low=FLAGGED_CODE,
            high=MINE_CODE,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(Action) * self._cells)

        self.board_seed = 0
        self.state: GameState = generate_from_config(self.board_seed, self.config)
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
            seed: Seeds ``np_random``, which picks the board seed.
            options: ``{"board_seed": int}`` forces a specific board.

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if options and "board_seed" in options:
            self.board_seed = int(options["board_seed"])
        else:
            self.board_seed = int(self.np_random.integers(0, 2**32))
        self.state = generate_from_config(self.board_seed, self.config)
        self._steps = 0

        return self.state.board.observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Index into the action space.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        kind, row, col = self.decode_action(action)
        self._steps += 1

        previous = self.state
        self.state = apply(previous, kind, row, col)
        reward = self._calculate_reward(previous, self.state)

        observation = self.state.board.observation()
        terminated = not self.state.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def decode_action(self, action: int) -> Tuple[Action, int, int]:
        """Convert flat action index to (action, row, col)."""
        kind = Action(int(action) // self._cells)
        row, col = divmod(int(action) % self._cells, self.config.cols)
        return kind, row, col

    def encode_action(self, kind: Action, row: int, col: int) -> int:
        """Convert (action, row, col) to flat action index."""
        return kind.value * self._cells + row * self.config.cols + col

    def _calculate_reward(self, previous: GameState, current: GameState) -> float:
        """Reward for the transition from previous to current."""
        if current is previous:
            return -0.1
        if current.is_won:
            return 10.0
        if current.is_lost:
            return -10.0
        return float(previous.board.unopened_count - current.board.unopened_count)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "board_seed": self.board_seed,
            "game_state": self.state.status.name,
            "mines_remaining": self.state.mines_remaining,
            "hidden_remaining": self.state.hidden_remaining,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.state.board.render()
        if self.render_mode == "human":
            print(self.state.board.render())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that pass the per-cell guards.

        A chord on a numbered cell is allowed even when neither of its
        rules fires.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.state.is_playing:
            return mask
        obs = self.state.board.observation().reshape(-1)
        blocks = mask.reshape(len(Action), self._cells)
        blocks[Action.REVEAL.value] = obs == HIDDEN_CODE
        blocks[Action.FLAG.value] = (obs == HIDDEN_CODE) | (obs == FLAGGED_CODE)
        blocks[Action.CHORD.value] = (obs > 0) & (obs < MINE_CODE)
        return mask
