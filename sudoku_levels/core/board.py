"""Sudoku board representation and the player's editable grid."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional, Set, Sequence, Union

from ..errors import CellLocked

SIZE = 9
BOX_SIZE = 3

GridLike = Union["SudokuBoard", np.ndarray, Sequence[Sequence[int]]]


def as_array(grid: GridLike) -> np.ndarray:
    """Return the 9x9 integer array behind a board, array or nested list."""
    if isinstance(grid, SudokuBoard):
        return grid.grid
    arr = np.asarray(grid, dtype=np.int32)
    if arr.shape != (SIZE, SIZE):
        raise ValueError(f"Grid shape must be ({SIZE}, {SIZE}), got {arr.shape}")
    return arr


class SudokuBoard:
    """
    A 9x9 Sudoku board with 3x3 boxes.

    Cells hold 0 (empty) or a value 1-9. Rule checks live in
    core.validator; the board only stores and prints values.
    """

    def __init__(self, grid: Optional[GridLike] = None):
        """
        Initialize a board.

        Args:
            grid: Optional initial grid (array or nested lists). The values
                are copied. If None, creates an empty board.
        """
        self.size = SIZE
        self.box_size = BOX_SIZE

        if grid is not None:
            arr = as_array(grid)
            if arr.min() < 0 or arr.max() > SIZE:
                raise ValueError(f"Grid values must be 0-{SIZE}")
            self.grid = arr.copy().astype(np.int32)
        else:
            self.grid = np.zeros((SIZE, SIZE), dtype=np.int32)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.grid[row, col] = value

    def get_peers(self, row: int, col: int) -> Set[Tuple[int, int]]:
        """
        Get all peer cell positions (those in same row, column, or box).
        Args:
            row, col: Cell position.
        Returns:
            Set of (r, c) tuples, excluding (row, col) itself.
        """
        peers = set()
        for i in range(self.size):
            peers.add((row, i))
            peers.add((i, col))

        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        for i in range(self.box_size):
            for j in range(self.box_size):
                peers.add((box_row + i, box_col + j))

        peers.remove((row, col))
        return peers

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != 0))

    def to_list(self) -> List[List[int]]:
        """Return the grid as nested Python lists."""
        return self.grid.tolist()

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                row_str += ' .' if val == 0 else f' {val}'
                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(filled={self.count_filled()})"


class PlayerGrid(SudokuBoard):
    """
    The grid a player edits for one level.

    Seeded from the clue grid; every non-zero clue cell is locked for the
    lifetime of the grid and any write to it raises CellLocked.
    """

    def __init__(self, clues: GridLike):
        super().__init__(clues)
        self._locked = self.grid != 0
        self._locked.setflags(write=False)

    def is_locked(self, row: int, col: int) -> bool:
        """True if (row, col) holds a clue."""
        return bool(self._locked[row, col])

    def locked_mask(self) -> np.ndarray:
        """Read-only boolean mask of clue cells."""
        return self._locked

    def set(self, row: int, col: int, value: int) -> None:
        if self.is_locked(row, col):
            raise CellLocked(row, col)
        super().set(row, col, value)

    def __repr__(self) -> str:
        return f"PlayerGrid(locked={int(self._locked.sum())}, filled={self.count_filled()})"
