"""Unit tests for the Sudoku board and the player grid."""

import pytest
import numpy as np
from sudoku_levels.core.board import SudokuBoard, PlayerGrid
from sudoku_levels.core.validator import find_conflicts
from sudoku_levels.errors import CellLocked

from conftest import TEST_PUZZLE, TEST_SOLUTION, grid_from_text


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_filled() == 0

    def test_wrong_shape_rejected(self):
        """Test that a non 9x9 grid is refused."""
        with pytest.raises(ValueError):
            SudokuBoard(np.zeros((4, 4), dtype=np.int32))

    def test_set_and_get(self):
        """Test setting and getting values."""
        board = SudokuBoard()
        board.set(0, 0, 5)
        assert board.get(0, 0) == 5
        assert board.count_filled() == 1

        board.set(0, 0, 0)
        assert board.get(0, 0) == 0

    def test_set_out_of_range_value(self):
        """Test that values outside 0-9 are rejected."""
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.set(0, 0, 10)
        with pytest.raises(ValueError):
            board.set(0, 0, -1)

    def test_get_peers(self):
        """Every cell has 20 peers: 8 in its row, 8 in its column, 4 more in its box."""
        board = SudokuBoard()
        peers = board.get_peers(4, 4)
        assert len(peers) == 20
        assert (4, 4) not in peers
        assert (3, 5) in peers
        assert (0, 0) not in peers

    def test_rules_live_in_validator(self):
        """The board stores values only; conflict checks go through core.validator."""
        board = SudokuBoard(grid_from_text(TEST_SOLUTION))
        for name in ("is_valid", "is_solved", "get_row", "get_col", "get_box"):
            assert not hasattr(board, name)

        board.set(0, 1, 5)  # duplicates the 5 at (0, 0)
        assert find_conflicts(board) >= {(0, 0), (0, 1)}

    def test_to_list(self):
        """Test converting the board to nested lists."""
        rows = SudokuBoard(grid_from_text(TEST_PUZZLE)).to_list()
        assert len(rows) == 9
        assert rows[0] == [5, 3, 0, 0, 7, 0, 0, 0, 0]

    def test_str_marks_blanks(self):
        """Test that pretty printing shows blanks as dots."""
        text = str(SudokuBoard(grid_from_text(TEST_PUZZLE)))
        assert text.splitlines()[1].startswith("| 5 3 . |")

    def test_values_are_copied(self):
        """Test that a board never aliases the array it was built from."""
        source = grid_from_text(TEST_PUZZLE)
        board = SudokuBoard(source)
        board.set(0, 2, 4)
        assert source[0, 2] == 0


class TestPlayerGrid:
    """Tests for the clue-locked player grid."""

    def test_clue_cells_are_locked(self):
        """Test that non-zero clue cells are locked and blanks are not."""
        grid = PlayerGrid(SudokuBoard(grid_from_text(TEST_PUZZLE)))
        assert grid.is_locked(0, 0)
        assert not grid.is_locked(0, 2)
        assert int(grid.locked_mask().sum()) == 30

    def test_write_to_locked_cell_raises(self):
        """Test that clue cells cannot be overwritten or cleared."""
        grid = PlayerGrid(SudokuBoard(grid_from_text(TEST_PUZZLE)))
        with pytest.raises(CellLocked) as excinfo:
            grid.set(0, 0, 1)
        assert (excinfo.value.row, excinfo.value.col) == (0, 0)
        with pytest.raises(CellLocked):
            grid.set(0, 0, 0)
        assert grid.get(0, 0) == 5

    def test_seed_is_copied(self):
        """Test that editing the grid never touches the clue source."""
        clues = SudokuBoard(grid_from_text(TEST_PUZZLE))
        grid = PlayerGrid(clues)
        grid.set(0, 2, 4)
        assert clues.get(0, 2) == 0

    def test_player_cells_can_be_erased(self):
        """Test that a player entry can be written and erased again."""
        grid = PlayerGrid(SudokuBoard(grid_from_text(TEST_PUZZLE)))
        grid.set(0, 2, 4)
        assert grid.get(0, 2) == 4
        grid.set(0, 2, 0)
        assert grid.get(0, 2) == 0
        assert not grid.is_locked(0, 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
