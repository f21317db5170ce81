"""Game rule configuration with environment overrides."""

from __future__ import annotations
import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class GameConfig:
    """Rule constants for a run of the game."""
    hints_per_level: int = 3
    base_points: int = 100
    time_bonus_window: int = 300   # seconds before the time bonus reaches zero
    mistake_penalty: int = 10

    @classmethod
    def from_env(cls) -> GameConfig:
        """
        Build a config, letting SUDOKU_* environment variables override
        the scoring and hint defaults.
        """
        defaults = cls()
        return cls(
            hints_per_level=_env_int("SUDOKU_HINTS_PER_LEVEL", defaults.hints_per_level),
            base_points=_env_int("SUDOKU_BASE_POINTS", defaults.base_points),
            time_bonus_window=_env_int("SUDOKU_TIME_BONUS_WINDOW", defaults.time_bonus_window),
            mistake_penalty=_env_int("SUDOKU_MISTAKE_PENALTY", defaults.mistake_penalty),
        )


DEFAULT_CONFIG = GameConfig()
