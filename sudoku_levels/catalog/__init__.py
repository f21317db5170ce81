"""Catalog module holding the game's fixed, difficulty-ordered puzzles."""

from .catalog import PuzzleCatalog, Puzzle, Difficulty, DEFAULT_CATALOG, verify_puzzle

__all__ = ["PuzzleCatalog", "Puzzle", "Difficulty", "DEFAULT_CATALOG", "verify_puzzle"]
