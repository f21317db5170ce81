"""Error kinds raised by the game engine."""

from __future__ import annotations


class GameError(Exception):
    """Base class for all game engine errors."""


class OutOfRange(GameError, IndexError):
    """Raised when a level outside the catalog is requested."""

    def __init__(self, level: object, level_count: int):
        self.level = level
        self.level_count = level_count
        super().__init__(f"Level must be 1-{level_count}, got {level!r}")


class CellLocked(GameError):
    """Raised on an attempt to change a prefilled clue cell."""

    def __init__(self, row: int, col: int):
        self.row = row
        self.col = col
        super().__init__(f"Cell ({row}, {col}) is a clue and cannot be changed")


class InvalidMove(GameError):
    """
    A placement that duplicates a value in the same row, column or box.

    Carries the offending coordinates so the front-end can flash the cell.
    """

    def __init__(self, row: int, col: int, value: int):
        self.row = row
        self.col = col
        self.value = value
        super().__init__(f"{value} conflicts at ({row}, {col})")

    @property
    def position(self):
        return (self.row, self.col)
