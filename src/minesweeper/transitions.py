"""
Game transitions.

Pure functions mapping a GameState and a cell to the next GameState.
Every action is a no-op (the input object is returned) once the game
is over, for out-of-bounds coordinates, or when the cell's state does
not allow it.
"""
from enum import Enum
from typing import List, Optional

from .board import Board, GameState, GameStatus, NEIGHBOR_OFFSETS
from .cell import Cell


class Action(Enum):
    """Player actions on a single cell."""

    REVEAL = 0
    FLAG = 1
    CHORD = 2


# ============================================================================
# Helpers (Low-level)
# ============================================================================

def _target(state: GameState, row: int, col: int) -> Optional[Cell]:
    """Cell under an action, or None when the action must be ignored."""
    if state.status != GameStatus.PLAYING:
        return None
    return state.board.cell(row, col)


def _open_all_mines(cells: List[Cell]) -> None:
    for i, cell in enumerate(cells):
        if cell.is_mine and not cell.is_open:
            cells[i] = cell.opened()


def _lost(board: Board, cells: List[Cell]) -> GameState:
    _open_all_mines(cells)
    return GameState(board.with_cells(cells), GameStatus.LOST)


def _settled(board: Board) -> GameState:
    status = GameStatus.WON if board.is_cleared() else GameStatus.PLAYING
    return GameState(board, status)


# ============================================================================
# Actions
# ============================================================================

def reveal(state: GameState, row: int, col: int) -> GameState:
    """
    Open a cell, flood-filling through zero-count cells.

    A mine opens every mine on the board and loses the game. Otherwise
    cells are opened from an explicit stack: a cell with no neighboring
    mines pushes all eight neighbors, and each popped position is
    skipped if off the board, already open, or flagged.
    """
    cell = _target(state, row, col)
    if cell is None or cell.is_open or cell.is_flagged:
        return state

    board = state.board
    cells = list(board.cells)

    if cell.is_mine:
        return _lost(board, cells)

    stack = [(row, col)]
    while stack:
        current_row, current_col = stack.pop()
        if not board.in_bounds(current_row, current_col):
            continue
        index = board.index(current_row, current_col)
        current = cells[index]
        if current.is_open or current.is_flagged:
            continue
        cells[index] = current.opened()
        if current.neighbor_mines == 0:
            for delta_row, delta_col in NEIGHBOR_OFFSETS:
                stack.append((current_row + delta_row, current_col + delta_col))

    return _settled(board.with_cells(cells))


def toggle_flag(state: GameState, row: int, col: int) -> GameState:
    """Flip the flag on a closed cell."""
    cell = _target(state, row, col)
    if cell is None or cell.is_open:
        return state

    board = state.board
    cells = list(board.cells)
    cells[board.index(row, col)] = cell.flagged(not cell.is_flagged)
    return GameState(board.with_cells(cells), state.status)


def chord(state: GameState, row: int, col: int) -> GameState:
    """
    Resolve the hidden neighbors of an open numbered cell.

    If the unflagged hidden neighbors must all be mines, they are
    flagged. Otherwise, if the flags already account for every mine,
    the hidden neighbors are opened without cascading. Only one of the
    two happens per call, auto-flag first.
    """
    cell = _target(state, row, col)
    if cell is None or not cell.is_open or cell.is_mine:
        return state
    if cell.neighbor_mines == 0:
        return state

    board = state.board
    flagged_count = 0
    hidden: List[int] = []
    for index in board.neighbor_indices(row, col):
        neighbor = board.cells[index]
        if neighbor.is_flagged:
            flagged_count += 1
        elif not neighbor.is_open:
            hidden.append(index)

    remaining_mines = cell.neighbor_mines - flagged_count
    cells = list(board.cells)

    if remaining_mines > 0 and remaining_mines == len(hidden):
        for index in hidden:
            cells[index] = cells[index].flagged(True)
        return GameState(board.with_cells(cells), state.status)

    if remaining_mines == 0 and hidden:
        hit_mine = False
        for index in hidden:
            hit_mine = hit_mine or cells[index].is_mine
            cells[index] = cells[index].opened()
        if hit_mine:
            return _lost(board, cells)
        return _settled(board.with_cells(cells))

    return state


_DISPATCH = {
    Action.REVEAL: reveal,
    Action.FLAG: toggle_flag,
    Action.CHORD: chord,
}


def apply(state: GameState, action: Action, row: int, col: int) -> GameState:
    """Dispatch an Action to its transition."""
    return _DISPATCH[action](state, row, col)
