"""Shared fixtures for the game engine tests."""

import matplotlib
matplotlib.use("Agg")

import numpy as np
import pytest

from sudoku_levels.game import GameSession, LevelTimer


# A known puzzle with a unique solution
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)


def grid_from_text(text):
    """81-character string, 0 for blanks, as a 9x9 int array."""
    return np.array([int(c) for c in text], dtype=np.int32).reshape(9, 9)


class FakeClock:
    """Manually advanced stand-in for time.monotonic."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session(clock):
    return GameSession(timer=LevelTimer(clock=clock))


def empty_cells(session):
    """Editable cells of the current level that are still blank."""
    return [
        (r, c) for r in range(9) for c in range(9)
        if not session.is_locked(r, c) and session.cell(r, c) == 0
    ]


def fill_with_solution(session, cells):
    """Place the solution value in each cell through the public API."""
    results = []
    for row, col in cells:
        assert session.select_cell(row, col)
        results.append(session.place_number(int(session.puzzle.solution[row, col])))
    return results


def conflicting_value(session, row, col):
    """A value already present elsewhere in the row of (row, col)."""
    return next(
        session.cell(row, c) for c in range(9)
        if c != col and session.cell(row, c) != 0
    )
