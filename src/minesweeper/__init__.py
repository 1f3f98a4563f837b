"""
Minesweeper game module.

Provides seeded board generation, pure state transitions and thin
front ends (controller, Gymnasium environment, terminal CLI).
"""
from .cell import Cell, CellView
from .board import (
    Board,
    BoardConfig,
    GameState,
    GameStatus,
    DEFAULT,
    DEFAULT_SEED,
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
)
from .random_source import Mulberry32
from .generator import build_board, generate, generate_board, generate_from_config
from .transitions import Action, apply, chord, reveal, toggle_flag
from .controller import GameController
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellView",
    "Board",
    "BoardConfig",
    "GameState",
    "GameStatus",
    "DEFAULT",
    "DEFAULT_SEED",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "Mulberry32",
    "build_board",
    "generate",
    "generate_board",
    "generate_from_config",
    "Action",
    "apply",
    "chord",
    "reveal",
    "toggle_flag",
    "GameController",
    "MinesweeperEnv",
]
