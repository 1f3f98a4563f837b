"""
Game controller.

Owns the current GameState for an interactive front end. Each accepted
action replaces the snapshot; readers only ever see complete snapshots.
"""
import logging
from typing import FrozenSet, Optional, Tuple

from .board import BoardConfig, DEFAULT, DEFAULT_SEED, GameState
from .generator import generate_from_config
from .transitions import Action, apply

logger = logging.getLogger(__name__)


class GameController:
    """
    Single writer of game state.

    Besides the snapshot it tracks the hovered cell, whose in-bounds
    neighborhood is exposed as flat indices for highlighting.
    """

    def __init__(
        self,
        config: BoardConfig = DEFAULT,
        seed: int = DEFAULT_SEED,
    ) -> None:
        """
        Initialize the controller with a freshly generated game.

        Args:
            config: Board dimensions and mine count.
            seed: Seed for the first board.
        """
        self.config = config
        self._seed = seed
        self._state = generate_from_config(seed, config)
        self._hover: Optional[Tuple[int, int]] = None
        self._highlighted: FrozenSet[int] = frozenset()

    @property
    def state(self) -> GameState:
        """Latest snapshot."""
        return self._state

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self, seed: Optional[int] = None) -> GameState:
        """
        Start a new game.

        Args:
            seed: New seed, or None to replay the current one.
        """
        if seed is not None:
            self._seed = seed
        self._state = generate_from_config(self._seed, self.config)
        logger.debug("New game with seed %d", self._seed)
        return self._state

    # ========================================================================
    # Actions
    # ========================================================================

    def apply(self, action: Action, row: int, col: int) -> GameState:
        """Apply an action and keep the resulting snapshot."""
        previous = self._state
        self._state = apply(previous, action, row, col)
        if self._state is not previous:
            logger.debug("%s at (%d, %d)", action.name, row, col)
            if self._state.status != previous.status:
                logger.info(
                    "Game %s (seed %d)", self._state.status.name, self._seed
                )
        return self._state

    def reveal(self, row: int, col: int) -> GameState:
        return self.apply(Action.REVEAL, row, col)

    def toggle_flag(self, row: int, col: int) -> GameState:
        return self.apply(Action.FLAG, row, col)

    def chord(self, row: int, col: int) -> GameState:
        return self.apply(Action.CHORD, row, col)

    # ========================================================================
    # Hover
    # ========================================================================

    @property
    def hovered(self) -> Optional[Tuple[int, int]]:
        return self._hover

    @property
    def highlighted(self) -> FrozenSet[int]:
        """Flat indices of the hovered cell's neighbors."""
        return self._highlighted

    def hover(self, row: int, col: int) -> None:
        """Track the pointer; positions off the board clear the hover."""
        board = self._state.board
        if not board.in_bounds(row, col):
            self.clear_hover()
            return
        self._hover = (row, col)
        self._highlighted = frozenset(board.neighbor_indices(row, col))

    def clear_hover(self) -> None:
        self._hover = None
        self._highlighted = frozenset()
