"""Difficulty-ordered catalog of the game's fixed puzzles."""

from __future__ import annotations
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional

import numpy as np

from ..core.board import as_array
from ..core.validator import is_valid_solution, clues_match_solution
from ..errors import OutOfRange
from .puzzles import PUZZLES


class Difficulty(Enum):
    """Difficulty tiers shown next to the level number."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        """Display name, e.g. 'Easy'."""
        return self.value.capitalize()

    @classmethod
    def for_level(cls, level: int) -> Difficulty:
        """Tier of a level: 1-5 easy, 6-10 medium, the rest hard."""
        if level <= 5:
            return cls.EASY
        if level <= 10:
            return cls.MEDIUM
        return cls.HARD


def _frozen(grid) -> np.ndarray:
    arr = as_array(grid).astype(np.int32)
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class Puzzle:
    """A level's clue grid and its solution. Both arrays are read-only."""
    level: int
    clues: np.ndarray
    solution: np.ndarray

    @property
    def clue_count(self) -> int:
        return int(np.count_nonzero(self.clues))

    @property
    def difficulty(self) -> Difficulty:
        return Difficulty.for_level(self.level)


class PuzzleCatalog:
    """
    Immutable, level-indexed store of puzzles.

    Levels run from 1 to len(catalog) with no gaps.
    """

    def __init__(self, table: Optional[Mapping[int, Mapping[str, list]]] = None):
        """
        Build a catalog.

        Args:
            table: Mapping of level -> {"clues": grid, "solution": grid}.
                Defaults to the built-in fifteen-level table.
        """
        table = PUZZLES if table is None else table
        levels = sorted(table)
        if levels != list(range(1, len(levels) + 1)):
            raise ValueError(f"Levels must run 1..N without gaps, got {levels}")

        self._puzzles: Dict[int, Puzzle] = {
            level: Puzzle(
                level=level,
                clues=_frozen(table[level]["clues"]),
                solution=_frozen(table[level]["solution"]),
            )
            for level in levels
        }

    @property
    def level_count(self) -> int:
        return len(self._puzzles)

    def levels(self) -> List[int]:
        return list(self._puzzles)

    def has_level(self, level: object) -> bool:
        return (
            isinstance(level, numbers.Integral)
            and not isinstance(level, bool)
            and 1 <= level <= self.level_count
        )

    def get_puzzle(self, level: int) -> Puzzle:
        """
        Get the puzzle for a level.

        Raises:
            OutOfRange: If level is not in 1..N.
        """
        if not self.has_level(level):
            raise OutOfRange(level, self.level_count)
        return self._puzzles[int(level)]

    @staticmethod
    def difficulty_tier(level: int) -> Difficulty:
        return Difficulty.for_level(level)

    def verify(self) -> List[str]:
        """
        Check every puzzle's invariants.

        Returns:
            Human-readable problems; empty when every solution is a valid
            completed grid and every clue agrees with its solution.
        """
        return [problem for puzzle in self for problem in verify_puzzle(puzzle)]

    def __len__(self) -> int:
        return self.level_count

    def __iter__(self) -> Iterator[Puzzle]:
        return iter(self._puzzles.values())

    def __repr__(self) -> str:
        return f"PuzzleCatalog(levels={self.level_count})"


def verify_puzzle(puzzle: Puzzle) -> List[str]:
    """Return the invariant violations of a single puzzle."""
    problems = []
    if not is_valid_solution(puzzle.solution):
        problems.append(f"level {puzzle.level}: solution is not a valid completed grid")
    if not clues_match_solution(puzzle.clues, puzzle.solution):
        problems.append(f"level {puzzle.level}: clues disagree with solution")
    return problems


DEFAULT_CATALOG = PuzzleCatalog()
