"""Key mapping and tile-number entry for the terminal frontend."""

from __future__ import annotations

import pytest

from backend.models.board import Direction
from frontend.cli.input_handler import feed_digit, resolve_key, to_direction


@pytest.mark.parametrize(
    ("ch", "action"),
    [("w", "up"), ("S", "down"), ("a", "left"), ("D", "right"),
     ("q", "quit"), ("\x03", "quit"), ("r", "restart"), ("\r", "enter"),
     ("7", "7"), ("\x01", "")],
)
def test_resolve_key(ch: str, action: str) -> None:
    assert resolve_key(ch) == action


def test_to_direction() -> None:
    assert to_direction("up") is Direction.UP
    assert to_direction("right") is Direction.RIGHT
    assert to_direction("quit") is None
    assert to_direction(None) is None


@pytest.mark.parametrize(
    ("buffer", "ch", "max_tile", "expected"),
    [
        ("", "5", 8, ("", 5)),
        ("", "1", 15, ("1", None)),
        ("1", "2", 15, ("", 12)),
        ("1", "7", 15, ("", 7)),
        ("", "2", 24, ("2", None)),
        ("2", "4", 24, ("", 24)),
        ("", "3", 24, ("", 3)),
        ("", "0", 15, ("", None)),
        ("1", "x", 15, ("1", None)),
    ],
)
def test_feed_digit(
    buffer: str, ch: str, max_tile: int, expected: tuple[str, int | None]
) -> None:
    assert feed_digit(buffer, ch, max_tile) == expected
