"""Tracks elapsed time of a game in progress."""

from __future__ import annotations


class GameClock:
    """Counts whole ticks while running.

    The clock never reads the wall clock itself; an external one-second
    timer drives it through ``tick()``.
    """

    def __init__(self) -> None:
        self._elapsed: int = 0
        self._running: bool = False

    @property
    def elapsed_seconds(self) -> int:
        return self._elapsed

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Reset to zero and begin counting."""
        self._elapsed = 0
        self._running = True

    def stop(self) -> None:
        """Freeze the current value; later ticks are ignored."""
        self._running = False

    def tick(self) -> bool:
        """Advance by one unit.  Returns True if the clock was running."""
        if not self._running:
            return False
        self._elapsed += 1
        return True
