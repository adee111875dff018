"""Game configuration: allowed board sizes and timing."""

from __future__ import annotations

ALLOWED_SIZES: tuple[int, ...] = (3, 4, 5)
DEFAULT_SIZE = 4

# Clock resolution; frontends call ``GameSession.tick()`` once per period.
TICK_SECONDS = 1.0


class InvalidConfiguration(ValueError):
    """Raised when a board size outside ``ALLOWED_SIZES`` is requested."""


def validate_size(size: int) -> int:
    """Return *size* unchanged if it is a supported board dimension."""
    # bool is an int subclass; True would otherwise pass as size 1.
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidConfiguration(f"Board size must be an int, got {size!r}.")
    if size not in ALLOWED_SIZES:
        allowed = ", ".join(str(s) for s in ALLOWED_SIZES)
        raise InvalidConfiguration(
            f"Unsupported board size {size}; choose one of {allowed}."
        )
    return size
