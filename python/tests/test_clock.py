"""Game clock."""

from __future__ import annotations

import pytest

from backend.engine.gamestate import GameClock


def test_idle_clock_ignores_ticks() -> None:
    clock = GameClock()
    assert clock.tick() is False
    assert clock.elapsed_seconds == 0


def test_running_clock_counts_and_freezes() -> None:
    clock = GameClock()
    clock.start()
    for _ in range(3):
        assert clock.tick()
    clock.stop()

    assert clock.tick() is False
    assert clock.elapsed_seconds == 3
    assert not clock.running


def test_start_resets() -> None:
    clock = GameClock()
    clock.start()
    clock.tick()
    clock.start()
    assert clock.elapsed_seconds == 0
    assert clock.running


def test_elapsed_seconds_is_read_only() -> None:
    clock = GameClock()
    clock.start()
    clock.tick()
    with pytest.raises(AttributeError):
        clock.elapsed_seconds = 99
    assert clock.elapsed_seconds == 1
