"""
Unit tests for Board, BoardConfig and GameState.

Tests configuration validation, position helpers, derived statistics,
observations and rendering.
"""
import pytest
import numpy as np
from minesweeper import (
    BEGINNER,
    DEFAULT,
    EXPERT,
    INTERMEDIATE,
    Board,
    BoardConfig,
    Cell,
    GameState,
    GameStatus,
    toggle_flag,
    reveal,
)


# ============================================================================
# Board Configuration Tests
# ============================================================================

class TestBoardConfig:
    """Test board configuration validation."""

    def test_valid_config_creation(self, valid_config: BoardConfig) -> None:
        """Valid configuration should be created successfully."""
        assert valid_config.rows == 9
        assert valid_config.cols == 9
        assert valid_config.num_mines == 10
        assert valid_config.cell_count == 81

    def test_zero_rows_raises_error(self) -> None:
        """Zero rows should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(0, 9, 10)

    def test_negative_cols_raises_error(self) -> None:
        """Negative columns should raise ValueError."""
        with pytest.raises(ValueError, match="dimensions must be positive"):
            BoardConfig(9, -3, 10)

    def test_negative_mines_raises_error(self) -> None:
        """Negative mine count should raise ValueError."""
        with pytest.raises(ValueError, match="cannot be negative"):
            BoardConfig(9, 9, -1)

    def test_too_many_mines_raises_error(self) -> None:
        """More mines than cells should raise ValueError."""
        with pytest.raises(ValueError, match="Too many mines"):
            BoardConfig(3, 3, 10)

    def test_every_cell_may_be_a_mine(self) -> None:
        """A board full of mines is allowed."""
        assert BoardConfig(3, 3, 9).num_mines == 9

    def test_presets(self) -> None:
        """Presets match the classic sizes."""
        assert DEFAULT == BoardConfig(8, 8, 20)
        assert BEGINNER == BoardConfig(9, 9, 10)
        assert INTERMEDIATE == BoardConfig(16, 16, 40)
        assert EXPERT == BoardConfig(16, 30, 99)


# ============================================================================
# Position Helper Tests
# ============================================================================

class TestPositions:
    """Test indexing and neighbor enumeration."""

    def test_index_and_position_are_row_major(self, closed_board: Board) -> None:
        """Flat index is row * cols + col."""
        assert closed_board.index(2, 3) == 15
        assert closed_board.position(15) == (2, 3)

    @pytest.mark.parametrize(
        "row, col, expected",
        [(0, 0, 3), (0, 5, 3), (3, 0, 3), (0, 2, 5), (2, 0, 5), (1, 1, 8)],
    )
    def test_neighbor_counts_clip_at_edges(
        self, closed_board: Board, row: int, col: int, expected: int
    ) -> None:
        """Corners have 3 neighbors, edges 5, interior 8."""
        assert len(closed_board.neighbors(row, col)) == expected

    def test_neighbors_exclude_self(self, closed_board: Board) -> None:
        """A cell is never its own neighbor."""
        assert (1, 1) not in closed_board.neighbors(1, 1)

    def test_neighbor_indices_match_neighbors(self, closed_board: Board) -> None:
        """Flat neighbor indices correspond to the (row, col) list."""
        assert closed_board.neighbor_indices(0, 0) == [1, 6, 7]

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, -1), (4, 0), (0, 6)])
    def test_cell_out_of_bounds_is_none(
        self, closed_board: Board, row: int, col: int
    ) -> None:
        """Out-of-bounds lookups return None."""
        assert closed_board.cell(row, col) is None
        assert closed_board.view(row, col) is None

    def test_positions_cover_board(self, closed_board: Board) -> None:
        """positions() yields every cell once."""
        assert len(list(closed_board.positions())) == 24

    def test_wrong_cell_count_raises_error(self) -> None:
        """Board refuses a cell tuple of the wrong size."""
        with pytest.raises(ValueError, match="Expected 4 cells"):
            Board(BoardConfig(2, 2, 0), (Cell(),))

    def test_wrong_mine_count_raises_error(self) -> None:
        """Board refuses cells whose mines disagree with the config."""
        cells = (Cell(is_mine=True), Cell(), Cell(), Cell())
        with pytest.raises(ValueError, match="Expected 0 mines, got 1"):
            Board(BoardConfig(2, 2, 0), cells)
        with pytest.raises(ValueError, match="Expected 2 mines, got 1"):
            Board(BoardConfig(2, 2, 2), cells)


# ============================================================================
# Statistics Tests
# ============================================================================

class TestStatistics:
    """Test derived counters shown to the player."""

    def test_new_game_statistics(self, center_mine_state: GameState) -> None:
        """Fresh game: every mine remains and every cell is hidden."""
        assert center_mine_state.mines_remaining == 1
        assert center_mine_state.hidden_remaining == 9

    def test_flag_moves_counters(self, center_mine_state: GameState) -> None:
        """A flag lowers both mines and hidden remaining."""
        state = toggle_flag(center_mine_state, 0, 0)
        assert state.mines_remaining == 0
        assert state.hidden_remaining == 8

    def test_over_flagging_goes_negative(self, center_mine_state: GameState) -> None:
        """mines_remaining is not clamped."""
        state = toggle_flag(center_mine_state, 0, 0)
        state = toggle_flag(state, 0, 1)
        assert state.mines_remaining == -1

    def test_reveal_lowers_hidden(self, center_mine_state: GameState) -> None:
        """Opening a cell lowers hidden remaining only."""
        state = reveal(center_mine_state, 0, 0)
        assert state.hidden_remaining == 8
        assert state.mines_remaining == 1

    def test_status_properties(self, center_mine_state: GameState) -> None:
        """Status helpers reflect the enum."""
        assert center_mine_state.is_playing is True
        lost = GameState(center_mine_state.board, GameStatus.LOST)
        assert lost.is_lost is True
        assert lost.is_won is False


# ============================================================================
# Observation Tests
# ============================================================================

class TestObservation:
    """Test observation array for agents."""

    def test_observation_shape_matches_board(self, closed_board: Board) -> None:
        """Observation should be (rows, cols)."""
        assert closed_board.observation().shape == (4, 6)

    def test_new_board_observation_all_hidden(
        self, center_mine_state: GameState
    ) -> None:
        """New board observation should be all -1."""
        assert np.all(center_mine_state.board.observation() == -1)

    def test_observation_dtype_is_int8(self, closed_board: Board) -> None:
        """Observation should be int8 for memory efficiency."""
        assert closed_board.observation().dtype == np.int8

    def test_observation_codes(self, center_mine_state: GameState) -> None:
        """Flags show -2, open numbers their count, open mines 9."""
        state = toggle_flag(center_mine_state, 2, 2)
        state = reveal(state, 0, 0)
        obs = state.board.observation()
        assert obs[2, 2] == -2
        assert obs[0, 0] == 1

        lost = reveal(state, 1, 1)
        assert lost.board.observation()[1, 1] == 9

    def test_mine_mask(self, wall_state: GameState) -> None:
        """mine_mask marks exactly the mines."""
        mask = wall_state.board.mine_mask()
        assert mask.dtype == bool
        assert mask[:, 2].all()
        assert mask.sum() == 3


# ============================================================================
# Render Tests
# ============================================================================

class TestRender:
    """Test ASCII rendering."""

    def test_render_closed_board(self, center_mine_state: GameState) -> None:
        """Closed cells render as '#'."""
        assert center_mine_state.board.render() == "# # #\n# # #\n# # #"

    def test_render_reveal_all(self, center_mine_state: GameState) -> None:
        """reveal_all shows mines and counts."""
        assert center_mine_state.board.render(reveal_all=True) == (
            "1 1 1\n1 * 1\n1 1 1"
        )

    def test_render_flags_and_zeros(self, empty_state: GameState) -> None:
        """Flags render as 'F', open zero cells as '.'."""
        state = toggle_flag(empty_state, 0, 0)
        state = reveal(state, 4, 4)
        first_line = state.board.render().splitlines()[0]
        assert first_line == "F . . . ."
