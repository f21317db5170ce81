"""Level scoring: base points plus a time bonus, minus a mistake penalty."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from ..config import GameConfig, DEFAULT_CONFIG


def compute_level_score(elapsed_seconds: int, mistakes: int) -> int:
    """
    Score for a completed level with the standard rules.

    max(0, 100 + max(0, 300 - elapsed_seconds) - 10 * mistakes)
    """
    return ScoringPolicy().level_score(elapsed_seconds, mistakes)


@dataclass(frozen=True)
class ScoringPolicy:
    """Scoring parameters; the defaults are the standard rules."""
    base_points: int = 100
    time_bonus_window: int = 300
    mistake_penalty: int = 10

    @classmethod
    def from_config(cls, config: Optional[GameConfig] = None) -> ScoringPolicy:
        config = config or DEFAULT_CONFIG
        return cls(
            base_points=config.base_points,
            time_bonus_window=config.time_bonus_window,
            mistake_penalty=config.mistake_penalty,
        )

    def time_bonus(self, elapsed_seconds: int) -> int:
        return max(0, self.time_bonus_window - elapsed_seconds)

    def level_score(self, elapsed_seconds: int, mistakes: int) -> int:
        if elapsed_seconds < 0 or mistakes < 0:
            raise ValueError("elapsed_seconds and mistakes must be non-negative")
        penalty = mistakes * self.mistake_penalty
        return max(0, self.base_points + self.time_bonus(elapsed_seconds) - penalty)

    @staticmethod
    def accumulate(total: int, score: int) -> int:
        """New cumulative total after a level completes."""
        return total + score


@dataclass(frozen=True)
class LevelResult:
    """Outcome of one completed level."""
    level: int
    elapsed_seconds: int
    mistakes: int
    hints_used: int
    score: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
