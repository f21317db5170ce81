"""Game session: level loading, moves, hints, validation and completion."""

from __future__ import annotations
import logging
import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

import numpy as np

from ..catalog import PuzzleCatalog, Puzzle, Difficulty, DEFAULT_CATALOG
from ..config import GameConfig, DEFAULT_CONFIG
from ..core.board import PlayerGrid, SIZE
from ..core.validator import check_placement, is_grid_complete, find_conflicts
from ..errors import GameError, CellLocked, InvalidMove
from .clock import LevelTimer, TimerHandle
from .scoring import ScoringPolicy, LevelResult

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


class GameState(Enum):
    """Per-level lifecycle."""
    LOADING = "loading"
    PLAYING = "playing"
    COMPLETED = "completed"


class MoveOutcome(Enum):
    """What a placement or hint request did."""
    PLACED = "placed"
    ERASED = "erased"
    HINTED = "hinted"
    COMPLETED = "completed"
    INVALID = "invalid"
    LOCKED = "locked"
    IGNORED = "ignored"


@dataclass
class MoveResult:
    """Result of place_number or use_hint, for the front-end to react to."""
    outcome: MoveOutcome
    row: Optional[int] = None
    col: Optional[int] = None
    value: Optional[int] = None
    error: Optional[GameError] = None
    level_score: Optional[int] = None

    @property
    def accepted(self) -> bool:
        """True if the write persisted."""
        return self.outcome in (
            MoveOutcome.PLACED, MoveOutcome.ERASED,
            MoveOutcome.HINTED, MoveOutcome.COMPLETED,
        )

    @property
    def completed(self) -> bool:
        return self.outcome is MoveOutcome.COMPLETED


@dataclass
class SessionState:
    """
    Mutable state of the level being played.

    Replaced on every level load; only cumulative_score carries over.
    """
    current_level: int
    player_grid: PlayerGrid
    mistakes: int = 0
    hints_remaining: int = 3
    cumulative_score: int = 0
    elapsed_seconds: int = 0
    selected_cell: Optional[Position] = None
    state: GameState = GameState.LOADING
    last_level_score: Optional[int] = None


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only copy of the session for display."""
    current_level: int
    level_count: int
    difficulty: Difficulty
    grid: Tuple[Tuple[int, ...], ...]
    locked: Tuple[Tuple[bool, ...], ...]
    mistakes: int
    hints_remaining: int
    cumulative_score: int
    elapsed_seconds: int
    selected_cell: Optional[Position]
    state: GameState
    last_level_score: Optional[int]
    is_game_complete: bool


class GameSession:
    """
    Controller for a run through the puzzle catalog.

    The session is the only writer of its SessionState. Every mutation
    happens synchronously inside one of the public operations; elapsed
    time advances only through tick(), which is gated by the single
    active TimerHandle so a late tick from a previous level is dropped.
    """

    def __init__(
        self,
        catalog: Optional[PuzzleCatalog] = None,
        config: Optional[GameConfig] = None,
        timer: Optional[LevelTimer] = None,
        start_level: int = 1,
    ):
        """
        Initialize the session and load the first level.

        Args:
            catalog: Puzzle source (default: built-in fifteen levels).
            config: Rule constants (default: standard rules).
            timer: Level timer, injectable for tests.
            start_level: Level to load first.
        """
        self.catalog = catalog or DEFAULT_CATALOG
        self.config = config or DEFAULT_CONFIG
        self.scoring = ScoringPolicy.from_config(self.config)
        self.timer = timer or LevelTimer()
        self.history: List[LevelResult] = []

        self._state: Optional[SessionState] = None
        self._puzzle: Optional[Puzzle] = None
        self._timer_handle: Optional[TimerHandle] = None

        self.load_level(start_level)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def current_level(self) -> int:
        return self._state.current_level

    @property
    def puzzle(self) -> Puzzle:
        return self._puzzle

    @property
    def difficulty(self) -> Difficulty:
        return self.catalog.difficulty_tier(self.current_level)

    @property
    def state(self) -> GameState:
        return self._state.state

    @property
    def mistakes(self) -> int:
        return self._state.mistakes

    @property
    def hints_remaining(self) -> int:
        return self._state.hints_remaining

    @property
    def cumulative_score(self) -> int:
        return self._state.cumulative_score

    @property
    def elapsed_seconds(self) -> int:
        return self._state.elapsed_seconds

    @property
    def selected_cell(self) -> Optional[Position]:
        return self._state.selected_cell

    @property
    def last_level_score(self) -> Optional[int]:
        return self._state.last_level_score

    @property
    def timer_handle(self) -> Optional[TimerHandle]:
        return self._timer_handle

    @property
    def grid(self) -> np.ndarray:
        """Copy of the player's grid."""
        return self._state.player_grid.grid.copy()

    def cell(self, row: int, col: int) -> int:
        return self._state.player_grid.get(row, col)

    def is_locked(self, row: int, col: int) -> bool:
        return self._state.player_grid.is_locked(row, col)

    @property
    def is_game_complete(self) -> bool:
        """True once the last level of the catalog has been completed."""
        return (
            self._state.state is GameState.COMPLETED
            and self._state.current_level == self.catalog.level_count
        )

    def snapshot(self) -> SessionSnapshot:
        state = self._state
        grid = state.player_grid
        return SessionSnapshot(
            current_level=state.current_level,
            level_count=self.catalog.level_count,
            difficulty=self.difficulty,
            grid=tuple(tuple(row) for row in grid.to_list()),
            locked=tuple(tuple(row) for row in grid.locked_mask().tolist()),
            mistakes=state.mistakes,
            hints_remaining=state.hints_remaining,
            cumulative_score=state.cumulative_score,
            elapsed_seconds=state.elapsed_seconds,
            selected_cell=state.selected_cell,
            state=state.state,
            last_level_score=state.last_level_score,
            is_game_complete=self.is_game_complete,
        )

    def highlights(self) -> Dict[str, Set[Position]]:
        """
        Cells related to the selection.

        Returns:
            {"peers": cells sharing a row, column or box with the selection,
             "same_number": cells holding the selection's non-zero value}
        """
        result = {"peers": set(), "same_number": set()}
        if self._state.selected_cell is None:
            return result

        row, col = self._state.selected_cell
        grid = self._state.player_grid
        result["peers"] = grid.get_peers(row, col)
        value = grid.get(row, col)
        if value != 0:
            rows, cols = np.nonzero(grid.grid == value)
            result["same_number"] = {(int(r), int(c)) for r, c in zip(rows, cols)}
        return result

    # ------------------------------------------------------------------
    # Level changes
    # ------------------------------------------------------------------

    def load_level(self, level: int) -> None:
        """
        Load a level and reset the per-level state.

        The cumulative score is kept. An invalid level raises before
        anything is touched.

        Raises:
            OutOfRange: If level is not in the catalog.
        """
        puzzle = self.catalog.get_puzzle(level)
        cumulative = self._state.cumulative_score if self._state is not None else 0

        self._state = SessionState(
            current_level=puzzle.level,
            player_grid=PlayerGrid(puzzle.clues),
            hints_remaining=self.config.hints_per_level,
            cumulative_score=cumulative,
        )
        self._puzzle = puzzle
        self._timer_handle = self.timer.start()
        self._state.state = GameState.PLAYING

        logger.info(
            "Loaded level %d (%s, %d clues)",
            puzzle.level, puzzle.difficulty.value, puzzle.clue_count,
        )

    def replay(self) -> None:
        """Restart the current level from its clues."""
        self.load_level(self.current_level)

    def next_level(self) -> bool:
        """Load the following level. Returns False on the last level."""
        if self.current_level >= self.catalog.level_count:
            return False
        self.load_level(self.current_level + 1)
        return True

    def previous_level(self) -> bool:
        """Load the preceding level. Returns False on the first level."""
        if self.current_level <= 1:
            return False
        self.load_level(self.current_level - 1)
        return True

    def restart(self) -> None:
        """Start the whole run again from level 1 with a zero score."""
        self.load_level(1)
        self._state.cumulative_score = 0
        self.history.clear()
        logger.info("Run restarted")

    # ------------------------------------------------------------------
    # Moves
    # ------------------------------------------------------------------

    def select_cell(self, row: int, col: int) -> bool:
        """
        Select a cell for the next placement or hint.

        Returns:
            False (selection unchanged) if the cell is a clue.
        """
        _check_position(row, col)
        try:
            self._require_editable(row, col)
        except CellLocked as exc:
            logger.debug("Selection ignored: %s", exc)
            return False
        self._state.selected_cell = (row, col)
        return True

    def place_number(self, value: int) -> MoveResult:
        """
        Write value (0 erases) into the selected cell.

        A value that duplicates a row, column or box peer counts as a
        mistake and is reverted; the result then carries an InvalidMove.
        Filling the last empty cell completes the level.
        """
        if not isinstance(value, numbers.Integral) or not 0 <= value <= SIZE:
            raise ValueError(f"Value must be 0-{SIZE}, got {value!r}")
        value = int(value)

        if self._state.state is not GameState.PLAYING or self._state.selected_cell is None:
            return MoveResult(MoveOutcome.IGNORED, value=value)

        row, col = self._state.selected_cell
        grid = self._state.player_grid
        previous = grid.get(row, col)
        try:
            grid.set(row, col, value)
        except CellLocked as exc:
            return MoveResult(MoveOutcome.LOCKED, row, col, value, error=exc)

        if value != 0:
            try:
                check_placement(grid, row, col, value)
            except InvalidMove as exc:
                grid.set(row, col, previous)
                self._state.mistakes += 1
                logger.debug("Invalid move: %s (mistakes=%d)", exc, self._state.mistakes)
                return MoveResult(MoveOutcome.INVALID, row, col, value, error=exc)

        outcome = MoveOutcome.PLACED if value else MoveOutcome.ERASED
        return self._after_write(row, col, value, outcome)

    def use_hint(self) -> MoveResult:
        """
        Reveal the solution value in the selected cell.

        Consumes one hint. Hints skip the legality check and never count
        as mistakes.
        """
        state = self._state
        if (
            state.state is not GameState.PLAYING
            or state.hints_remaining <= 0
            or state.selected_cell is None
        ):
            return MoveResult(MoveOutcome.IGNORED)

        row, col = state.selected_cell
        value = int(self._puzzle.solution[row, col])
        try:
            state.player_grid.set(row, col, value)
        except CellLocked as exc:
            return MoveResult(MoveOutcome.LOCKED, row, col, value, error=exc)

        state.hints_remaining -= 1
        logger.debug("Hint at (%d, %d), %d left", row, col, state.hints_remaining)
        return self._after_write(row, col, value, MoveOutcome.HINTED)

    def validate_current_grid(self) -> Set[Position]:
        """
        Sweep the whole grid for conflicts without changing anything.

        Returns:
            Positions of filled, non-clue cells that clash with a peer.
            An empty set means the grid is consistent so far.
        """
        grid = self._state.player_grid
        return find_conflicts(grid, skip_mask=grid.locked_mask())

    # ------------------------------------------------------------------
    # Time
    # ------------------------------------------------------------------

    def tick(self, handle: Optional[TimerHandle] = None) -> bool:
        """
        Advance elapsed time by one second.

        Args:
            handle: The timer handle the tick was scheduled for. Defaults
                to the active one. Ticks for a stale handle are dropped.

        Returns:
            True if the tick was applied.
        """
        if handle is None:
            handle = self._timer_handle
        if self._state.state is not GameState.PLAYING or not self.timer.is_current(handle):
            return False
        self._state.elapsed_seconds += 1
        handle.mark_delivered()
        return True

    def catch_up(self) -> int:
        """Deliver every tick the active timer owes. Returns the count applied."""
        applied = 0
        for _ in range(self.timer.due()):
            if not self.tick():
                break
            applied += 1
        return applied

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_editable(self, row: int, col: int) -> None:
        if self._state.player_grid.is_locked(row, col):
            raise CellLocked(row, col)

    def _after_write(self, row: int, col: int, value: int, outcome: MoveOutcome) -> MoveResult:
        if is_grid_complete(self._state.player_grid):
            score = self._complete_level()
            return MoveResult(MoveOutcome.COMPLETED, row, col, value, level_score=score)
        return MoveResult(outcome, row, col, value)

    def _complete_level(self) -> int:
        state = self._state
        self.timer.stop()
        self._timer_handle = None

        score = self.scoring.level_score(state.elapsed_seconds, state.mistakes)
        state.cumulative_score = self.scoring.accumulate(state.cumulative_score, score)
        state.last_level_score = score
        state.state = GameState.COMPLETED

        self.history.append(LevelResult(
            level=state.current_level,
            elapsed_seconds=state.elapsed_seconds,
            mistakes=state.mistakes,
            hints_used=self.config.hints_per_level - state.hints_remaining,
            score=score,
        ))
        logger.info(
            "Level %d completed in %ds with %d mistakes: +%d (total %d)",
            state.current_level, state.elapsed_seconds, state.mistakes,
            score, state.cumulative_score,
        )
        return score

    def __repr__(self) -> str:
        return (
            f"GameSession(level={self.current_level}, state={self.state.value}, "
            f"score={self.cumulative_score})"
        )


def _check_position(row: int, col: int) -> None:
    if not (0 <= row < SIZE and 0 <= col < SIZE):
        raise ValueError(f"Cell must be within 0-{SIZE - 1}, got ({row}, {col})")
