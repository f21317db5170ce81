"""Game module: session state machine, scoring, timer and key input."""

from .session import GameSession, GameState, MoveOutcome, MoveResult, SessionState, SessionSnapshot
from .scoring import ScoringPolicy, LevelResult, compute_level_score
from .clock import LevelTimer, TimerHandle, format_time
from .keys import key_to_value

__all__ = [
    "GameSession",
    "GameState",
    "MoveOutcome",
    "MoveResult",
    "SessionState",
    "SessionSnapshot",
    "ScoringPolicy",
    "LevelResult",
    "compute_level_score",
    "LevelTimer",
    "TimerHandle",
    "format_time",
    "key_to_value",
]
