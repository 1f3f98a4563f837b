"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import Callable, Iterable, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    Board,
    BoardConfig,
    Cell,
    GameState,
    GameStatus,
    build_board,
)


LayoutFactory = Callable[[int, int, Iterable[Tuple[int, int]]], GameState]


def _layout(rows: int, cols: int, mines: Iterable[Tuple[int, int]]) -> GameState:
    mines = list(mines)
    config = BoardConfig(rows, cols, len(mines))
    board = build_board(config, [row * cols + col for row, col in mines])
    return GameState(board, GameStatus.PLAYING)


# ============================================================================
# Game State Fixtures
# ============================================================================

@pytest.fixture
def layout() -> LayoutFactory:
    """Factory building a fresh game from explicit mine positions."""
    return _layout


@pytest.fixture
def center_mine_state() -> GameState:
    """3x3 board with a single mine in the middle; every other cell is a 1."""
    return _layout(3, 3, [(1, 1)])


@pytest.fixture
def wall_state() -> GameState:
    """3x5 board with a column of mines splitting it in two."""
    return _layout(3, 5, [(0, 2), (1, 2), (2, 2)])


@pytest.fixture
def empty_state() -> GameState:
    """5x5 board with no mines for cascade testing."""
    return _layout(5, 5, [])


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create an open cell with adjacent mines."""
    return Cell(neighbor_mines=3).opened()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


@pytest.fixture
def closed_board() -> Board:
    """Mine-free closed 4x6 board for position helpers."""
    return build_board(BoardConfig(4, 6, 0), [])
