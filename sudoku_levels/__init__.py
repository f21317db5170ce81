"""Fifteen-level Sudoku game engine."""

from .catalog import PuzzleCatalog, Puzzle, Difficulty
from .config import GameConfig
from .errors import GameError, OutOfRange, CellLocked, InvalidMove
from .game import GameSession, GameState, MoveOutcome, compute_level_score

__version__ = "1.0.0"

__all__ = [
    "PuzzleCatalog",
    "Puzzle",
    "Difficulty",
    "GameConfig",
    "GameError",
    "OutOfRange",
    "CellLocked",
    "InvalidMove",
    "GameSession",
    "GameState",
    "MoveOutcome",
    "compute_level_score",
]
