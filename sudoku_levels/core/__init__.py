"""Core module for Sudoku board representation and placement rules."""

from .board import SudokuBoard, PlayerGrid
from .validator import (
    is_placement_legal,
    check_placement,
    is_grid_complete,
    find_conflicts,
    is_valid_solution,
    clues_match_solution,
)

__all__ = [
    "SudokuBoard",
    "PlayerGrid",
    "is_placement_legal",
    "check_placement",
    "is_grid_complete",
    "find_conflicts",
    "is_valid_solution",
    "clues_match_solution",
]
