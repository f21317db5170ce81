"""Single-slot level timer."""

from __future__ import annotations
import time
from typing import Callable, Optional


class TimerHandle:
    """
    One running level timer.

    Ticks are only honoured while the handle is the timer's active one;
    once cancelled it never becomes live again.
    """

    def __init__(self, started_at: float):
        self.started_at = started_at
        self.delivered = 0
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def due(self, now: float) -> int:
        """Whole seconds elapsed since start that have not been ticked yet."""
        if self.cancelled:
            return 0
        return max(0, int(now - self.started_at) - self.delivered)

    def mark_delivered(self, count: int = 1) -> None:
        self.delivered += count

    def __repr__(self) -> str:
        state = "cancelled" if self.cancelled else "running"
        return f"TimerHandle({state}, delivered={self.delivered})"


class LevelTimer:
    """
    Owns at most one active TimerHandle.

    Starting a new handle cancels the previous one, so two levels can
    never be ticking at the same time.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._active: Optional[TimerHandle] = None

    @property
    def active(self) -> Optional[TimerHandle]:
        return self._active

    def start(self) -> TimerHandle:
        self.stop()
        self._active = TimerHandle(self._clock())
        return self._active

    def stop(self) -> None:
        if self._active is not None:
            self._active.cancel()
            self._active = None

    def is_current(self, handle: Optional[TimerHandle]) -> bool:
        return handle is not None and handle is self._active and not handle.cancelled

    def due(self) -> int:
        """Seconds owed to the active handle according to the clock."""
        if self._active is None:
            return 0
        return self._active.due(self._clock())


def format_time(seconds: int) -> str:
    """Format seconds as MM:SS."""
    minutes, secs = divmod(max(0, int(seconds)), 60)
    return f"{minutes:02d}:{secs:02d}"
