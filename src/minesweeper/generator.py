"""
Board generation.

Places mines from a seeded shuffle and computes neighbor counts.
"""
import logging
from typing import Iterable

import numpy as np

from .board import Board, BoardConfig, GameState, GameStatus, NEIGHBOR_OFFSETS
from .cell import Cell
from .random_source import Mulberry32

logger = logging.getLogger(__name__)


def count_neighbor_mines(mines: np.ndarray) -> np.ndarray:
    """
    Count mines in each cell's Moore neighborhood.

    Args:
        mines: Boolean (rows, cols) mine layout.

    Returns:
        Integer (rows, cols) array of counts; mine cells hold 0.
    """
    rows, cols = mines.shape
    padded = np.pad(mines.astype(np.int8), 1)
    counts = np.zeros((rows, cols), dtype=np.int8)
    for delta_row, delta_col in NEIGHBOR_OFFSETS:
        counts += padded[
            1 + delta_row:1 + delta_row + rows,
            1 + delta_col:1 + delta_col + cols,
        ]
    return np.where(mines, 0, counts)


def build_board(config: BoardConfig, mine_indices: Iterable[int]) -> Board:
    """
    Build a closed, unflagged board from an explicit mine layout.

    Args:
        config: Board dimensions and mine count.
        mine_indices: Flat indices (row * cols + col) of the mines.

    Raises:
        ValueError: If the layout does not match ``config.num_mines``
            or an index is off the board.
    """
    mines = np.zeros(config.cell_count, dtype=bool)
    indices = sorted(set(mine_indices))
    if indices and (indices[0] < 0 or indices[-1] >= config.cell_count):
        raise ValueError("Mine position out of bounds")
    mines[np.asarray(indices, dtype=np.intp)] = True

    grid = mines.reshape(config.rows, config.cols)
    counts = count_neighbor_mines(grid)
    cells = tuple(
        Cell(is_mine=bool(is_mine), neighbor_mines=int(count))
        for is_mine, count in zip(grid.flat, counts.flat)
    )
    return Board(config, cells)


def generate_board(seed: int, rows: int, cols: int, num_mines: int) -> Board:
    """
    Generate a board whose layout is fully determined by ``seed``.

    All positions are shuffled with the seeded random source and the
    first ``num_mines`` become mines. The first reveal is not guaranteed
    to be safe.

    Raises:
        ValueError: For non-positive dimensions or an impossible mine count.
    """
    config = BoardConfig(rows, cols, num_mines)
    rng = Mulberry32(seed)
    order = rng.shuffled(range(config.cell_count))
    board = build_board(config, order[:num_mines])
    logger.debug(
        "Generated %dx%d board with %d mines from seed %d",
        rows, cols, num_mines, seed,
    )
    return board


def generate(seed: int, rows: int, cols: int, num_mines: int) -> GameState:
    """Generate a fresh game in the PLAYING state."""
    return GameState(generate_board(seed, rows, cols, num_mines), GameStatus.PLAYING)


def generate_from_config(seed: int, config: BoardConfig) -> GameState:
    """Generate a fresh game from a board configuration."""
    return generate(seed, config.rows, config.cols, config.num_mines)
