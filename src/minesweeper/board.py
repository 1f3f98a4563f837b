"""
Board module for Minesweeper game.

Defines board configuration, the immutable board grid and the
game snapshot that transitions produce.
"""
from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .cell import Cell, CellView


# ============================================================================
# Constants
# ============================================================================

NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if delta_row != 0 or delta_col != 0
)


class GameStatus(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        num_mines: Total mines to place.
    """

    rows: int = 8
    cols: int = 8
    num_mines: int = 20

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        if self.num_mines > self.cell_count:
            raise ValueError(f"Too many mines (max {self.cell_count})")

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols


# Preset board sizes
DEFAULT = BoardConfig(8, 8, 20)
BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

DEFAULT_SEED = 184254


# ============================================================================
# Board Class
# ============================================================================

@dataclass(frozen=True)
class Board:
    """
    Immutable Minesweeper grid.

    Cells are stored flat, indexed by ``row * cols + col``. A new board
    is derived with ``with_cells`` whenever a transition changes any cell.
    """

    config: BoardConfig
    cells: Tuple[Cell, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != self.config.cell_count:
            raise ValueError(
                f"Expected {self.config.cell_count} cells, got {len(self.cells)}"
            )
        mines = sum(1 for cell in self.cells if cell.is_mine)
        if mines != self.config.num_mines:
            raise ValueError(
                f"Expected {self.config.num_mines} mines, got {mines}"
            )

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    # ========================================================================
    # Position Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.rows and 0 <= col < self.cols

    def index(self, row: int, col: int) -> int:
        """Flat index of an in-bounds position."""
        return row * self.cols + col

    def position(self, index: int) -> Tuple[int, int]:
        """(row, col) of a flat index."""
        return divmod(index, self.cols)

    def neighbors(self, row: int, col: int) -> List[Tuple[int, int]]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.in_bounds(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def neighbor_indices(self, row: int, col: int) -> List[int]:
        """Flat indices of in-bounds neighbors."""
        return [self.index(r, c) for r, c in self.neighbors(row, col)]

    def positions(self) -> Iterator[Tuple[int, int]]:
        """Iterate all positions in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield row, col

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, row: int, col: int) -> Optional[Cell]:
        """Get cell at position, or None if invalid."""
        if not self.in_bounds(row, col):
            return None
        return self.cells[self.index(row, col)]

    def view(self, row: int, col: int) -> Optional[CellView]:
        """Get the renderer-safe view of a cell, or None if invalid."""
        cell = self.cell(row, col)
        return None if cell is None else cell.view()

    def with_cells(self, cells: Sequence[Cell]) -> "Board":
        """Return a board with the same config and new cells."""
        return replace(self, cells=tuple(cells))

    # ========================================================================
    # Statistics
    # ========================================================================

    @property
    def flagged_count(self) -> int:
        return sum(1 for cell in self.cells if cell.is_flagged)

    @property
    def unopened_count(self) -> int:
        return sum(1 for cell in self.cells if not cell.is_open)

    @property
    def mines_remaining(self) -> int:
        """Mines minus placed flags; negative when over-flagged."""
        return self.num_mines - self.flagged_count

    @property
    def hidden_remaining(self) -> int:
        """Closed cells that are not flagged."""
        return self.unopened_count - self.flagged_count

    def is_cleared(self) -> bool:
        """Check if all non-mine cells are open."""
        return all(cell.is_mine or cell.is_open for cell in self.cells)

    # ========================================================================
    # Output
    # ========================================================================

    def observation(self) -> np.ndarray:
        """
        Get board state as numpy array for agents.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = open with adjacent count
                9 = open mine
        """
        obs = np.fromiter(
            (cell.to_observation() for cell in self.cells),
            dtype=np.int8,
            count=len(self.cells),
        )
        return obs.reshape(self.rows, self.cols)

    def mine_mask(self) -> np.ndarray:
        """Boolean (rows, cols) array of mine positions."""
        mask = np.fromiter(
            (cell.is_mine for cell in self.cells),
            dtype=bool,
            count=len(self.cells),
        )
        return mask.reshape(self.rows, self.cols)

    def render(self, reveal_all: bool = False) -> str:
        """
        Render board as ASCII string.

        Args:
            reveal_all: Show every cell as if it were open.
        """
        lines = []
        for row in range(self.rows):
            symbols = []
            for col in range(self.cols):
                cell = self.cells[self.index(row, col)]
                if reveal_all:
                    cell = cell.opened()
                symbols.append(_symbol(cell))
            lines.append(" ".join(symbols))
        return "\n".join(lines)


def _symbol(cell: Cell) -> str:
    if not cell.is_open:
        return "F" if cell.is_flagged else "#"
    if cell.is_mine:
        return "*"
    if cell.neighbor_mines == 0:
        return "."
    return str(cell.neighbor_mines)


# ============================================================================
# Game Snapshot
# ============================================================================

@dataclass(frozen=True)
class GameState:
    """
    One immutable point in a game: the board plus its status.

    Transitions return a new GameState, or the same object when the
    action changes nothing.
    """

    board: Board
    status: GameStatus = GameStatus.PLAYING

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.status == GameStatus.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self.status == GameStatus.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self.status == GameStatus.LOST

    @property
    def mines_remaining(self) -> int:
        return self.board.mines_remaining

    @property
    def hidden_remaining(self) -> int:
        return self.board.hidden_remaining
