"""Single-keypress reader for the terminal frontend.

Turns arrow keys, WASD and digits into action strings without requiring
Enter.  Works on macOS / Linux (tty+termios) and Windows (msvcrt).
"""

from __future__ import annotations

import os
import sys

from backend.models.board import Direction


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "W": "up",
    "s": "down",
    "S": "down",
    "a": "left",
    "A": "left",
    "d": "right",
    "D": "right",
    "q": "quit",
    "Q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "restart",
    "R": "restart",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\r": "enter",
    "\n": "enter",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}

_DIRECTIONS: dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
}


def resolve_key(ch: str) -> str:
    """Map a raw character to its action string."""
    return _KEY_MAP.get(ch, ch if ch.isprintable() else "")


def to_direction(action: str | None) -> Direction | None:
    """Return the movement ``Direction`` for *action*, if it is one."""
    if action is None:
        return None
    return _DIRECTIONS.get(action)


def feed_digit(buffer: str, ch: str, max_tile: int) -> tuple[str, int | None]:
    """Accumulate typed digits into a tile number.

    Returns ``(new_buffer, tile)``.  *tile* is set as soon as no further
    digit could extend the number (e.g. ``"2"`` on a 3×3 board, or
    ``"12"`` on a 4×4 board); otherwise the digits stay buffered until
    Enter.  A number that overshoots *max_tile* restarts from *ch*.
    """
    if not ch.isdecimal():
        return buffer, None
    candidate = buffer + ch
    if int(candidate) > max_tile:
        candidate = ch
    if int(candidate) == 0:
        return "", None
    value = int(candidate)
    if value * 10 > max_tile:
        return "", value
    return candidate, None


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — movement (arrows / WASD)
        "quit"                         — q / Ctrl-C / Escape
        "restart"                      — r
        "enter"                        — Enter / Return
        "backspace"                    — Backspace / Delete
        "<char>"                       — unmapped printable char (digits)
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        ch2 = _getch()
        if ch2 == "[":
            ch3 = _getch()
            return _ARROW_MAP.get(ch3, "")
        return "quit"  # bare Escape

    return resolve_key(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress with a timeout.

    Returns the normalised action string (same as ``get_key``) or
    ``None`` if no key was pressed within *timeout* seconds.

    Uses ``os.read`` (unbuffered) so that ``select`` sees the remaining
    bytes of multi-byte escape sequences (arrow keys).
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time as _time

        end = _time.monotonic() + timeout
        while _time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            _time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return None

        ch = os.read(fd, 1).decode("utf-8", errors="ignore")

        # Arrow keys: ESC [ A/B/C/D
        if ch == "\x1b":
            r2, _, _ = select.select([fd], [], [], 0.1)
            if not r2:
                return "quit"  # bare Escape
            ch2 = os.read(fd, 1).decode("utf-8", errors="ignore")
            if ch2 != "[":
                return "quit"
            r3, _, _ = select.select([fd], [], [], 0.1)
            if not r3:
                return ""
            ch3 = os.read(fd, 1).decode("utf-8", errors="ignore")
            return _ARROW_MAP.get(ch3, "")

        return resolve_key(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
