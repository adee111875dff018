from backend.models.board import Board, Direction
from backend.models.outcome import (
    ConfigOutcome,
    MoveOutcome,
    SessionSnapshot,
    SessionStatus,
    WinEvent,
)

__all__ = [
    "Board",
    "ConfigOutcome",
    "Direction",
    "MoveOutcome",
    "SessionSnapshot",
    "SessionStatus",
    "WinEvent",
]
