"""Session status and command outcomes reported back to frontends."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class SessionStatus(StrEnum):
    NOT_STARTED = "not_started"
    PLAYING = "playing"
    WON = "won"


class MoveOutcome(StrEnum):
    """Result of ``submit_move`` / ``submit_direction``.

    Only ``MOVED`` changes the board; every other value is a no-op.
    """

    MOVED = "moved"
    ILLEGAL = "illegal"  # target not adjacent to the blank
    BLOCKED = "blocked"  # direction points off the board edge
    OUT_OF_RANGE = "out_of_range"
    NOT_PLAYING = "not_playing"


class ConfigOutcome(StrEnum):
    """Result of ``initialize`` / ``change_size``."""

    STARTED = "started"
    INVALID_SIZE = "invalid_size"
    IGNORED_WHILE_PLAYING = "ignored_while_playing"


@dataclass(frozen=True)
class WinEvent:
    """Fired once when a game transitions into ``SessionStatus.WON``."""

    size: int
    moves: int
    elapsed_seconds: int


@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session for presentation layers."""

    size: int
    tiles: tuple[int, ...]
    blank_index: int
    status: SessionStatus
    moves: int
    elapsed_seconds: int
