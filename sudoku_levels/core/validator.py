"""Placement legality and grid validation rules."""

from __future__ import annotations
import numpy as np
from typing import Optional, Set, Tuple

from .board import SIZE, BOX_SIZE, GridLike, as_array
from ..errors import InvalidMove

FULL_UNIT = frozenset(range(1, SIZE + 1))


def _peer_mask(row: int, col: int) -> np.ndarray:
    """Boolean mask of the row, column and box of (row, col), minus the cell itself."""
    mask = np.zeros((SIZE, SIZE), dtype=bool)
    mask[row, :] = True
    mask[:, col] = True
    box_row = (row // BOX_SIZE) * BOX_SIZE
    box_col = (col // BOX_SIZE) * BOX_SIZE
    mask[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE] = True
    mask[row, col] = False
    return mask


def is_placement_legal(grid: GridLike, row: int, col: int, value: int) -> bool:
    """
    Check whether value at (row, col) clashes with another cell.

    The check runs against the grid as it is, so a tentative value already
    written at (row, col) is fine: that cell is excluded from the comparison.

    Args:
        grid: Board or 9x9 array.
        row: Row index.
        col: Column index.
        value: Value to check. 0 (erase) is always legal.

    Returns:
        True if no other cell in the row, column or box holds value.
    """
    if value == 0:
        return True

    arr = as_array(grid)
    return not np.any(arr[_peer_mask(row, col)] == value)


def is_grid_complete(grid: GridLike) -> bool:
    """True iff no cell is empty. Says nothing about correctness."""
    return not np.any(as_array(grid) == 0)


def find_conflicts(grid: GridLike, skip_mask: Optional[np.ndarray] = None) -> Set[Tuple[int, int]]:
    """
    Find every filled cell that duplicates a value in its row, column or box.

    Args:
        grid: Board or 9x9 array.
        skip_mask: Optional boolean mask of cells to leave out (clue cells).

    Returns:
        Set of (row, col) positions that fail is_placement_legal.
    """
    arr = as_array(grid)
    conflicts = set()
    for row in range(SIZE):
        for col in range(SIZE):
            value = int(arr[row, col])
            if value == 0:
                continue
            if skip_mask is not None and skip_mask[row, col]:
                continue
            if not is_placement_legal(arr, row, col, value):
                conflicts.add((row, col))
    return conflicts


def is_valid_solution(grid: GridLike) -> bool:
    """Check that every row, column and box is exactly {1..9}."""
    arr = as_array(grid)
    for i in range(SIZE):
        if set(arr[i, :].tolist()) != FULL_UNIT:
            return False
        if set(arr[:, i].tolist()) != FULL_UNIT:
            return False
    for box_row in range(0, SIZE, BOX_SIZE):
        for box_col in range(0, SIZE, BOX_SIZE):
            box = arr[box_row:box_row + BOX_SIZE, box_col:box_col + BOX_SIZE]
            if set(box.flatten().tolist()) != FULL_UNIT:
                return False
    return True


def clues_match_solution(clues: GridLike, solution: GridLike) -> bool:
    """
    Validate that a solution respects the puzzle's clues.

    Returns:
        True if every non-zero clue equals the solution value at that cell.
    """
    clue_arr = as_array(clues)
    sol_arr = as_array(solution)
    given = clue_arr != 0
    return bool(np.array_equal(clue_arr[given], sol_arr[given]))


def check_placement(grid: GridLike, row: int, col: int, value: int) -> None:
    """
    Raise if the value at (row, col) duplicates a row, column or box peer.

    Raises:
        InvalidMove: Carrying the offending coordinates and value.
    """
    if not is_placement_legal(grid, row, col, value):
        raise InvalidMove(row, col, value)
