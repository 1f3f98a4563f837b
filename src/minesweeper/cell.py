"""
Cell module for Minesweeper game.

Represents individual cells on the game board. Open, flagged and mine
are independent flags; the neighbor count is only meaningful for
non-mine cells.
"""
from dataclasses import dataclass, replace
from typing import Optional


# ============================================================================
# Observation Codes
# ============================================================================

HIDDEN_CODE = -1
FLAGGED_CODE = -2
MINE_CODE = 9


# ============================================================================
# Cell Data Classes
# ============================================================================

@dataclass(frozen=True)
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Cells are immutable; transitions build replacements with the
    ``opened`` / ``flagged`` helpers.

    Attributes:
        is_mine: Whether this cell contains a mine.
        is_open: Whether this cell has been revealed.
        is_flagged: Whether the player marked this cell.
        neighbor_mines: Count of mines in neighboring cells (0-8).
    """

    is_mine: bool = False
    is_open: bool = False
    is_flagged: bool = False
    neighbor_mines: int = 0

    @property
    def is_hidden(self) -> bool:
        """Check if cell is closed and unflagged."""
        return not self.is_open and not self.is_flagged

    def opened(self) -> "Cell":
        """Return a copy of this cell marked open."""
        return replace(self, is_open=True)

    def flagged(self, value: bool) -> "Cell":
        """Return a copy of this cell with the given flag state."""
        return replace(self, is_flagged=value)

    def view(self) -> "CellView":
        """Get the player-visible projection of this cell."""
        if not self.is_open:
            return CellView(is_open=False, is_flagged=self.is_flagged)
        return CellView(
            is_open=True,
            is_flagged=self.is_flagged,
            is_mine=self.is_mine,
            neighbor_mines=None if self.is_mine else self.neighbor_mines,
        )

    def to_observation(self) -> int:
        """
        Convert cell to observation value for agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Open cell with adjacent mine count
            9: Open mine (game over state)
        """
        if self.is_open:
            return MINE_CODE if self.is_mine else self.neighbor_mines
        if self.is_flagged:
            return FLAGGED_CODE
        return HIDDEN_CODE


@dataclass(frozen=True)
class CellView:
    """
    What a renderer is allowed to know about a cell.

    ``is_mine`` is only set once the cell is open, ``neighbor_mines``
    only for open non-mine cells.
    """

    is_open: bool
    is_flagged: bool
    is_mine: Optional[bool] = None
    neighbor_mines: Optional[int] = None
