"""Maps keyboard / swipe directions onto board indices."""

from __future__ import annotations

from backend.models.board import Direction


class DirectionMapper:
    """Direction names describe where the *tile* moves.

    E.g. ``Direction.UP`` picks the tile **below** the blank, which then
    slides upward into it.
    """

    @staticmethod
    def resolve(direction: Direction, blank_index: int, size: int) -> int | None:
        """Return the index of the tile that moves, or ``None`` at an edge."""
        row, col = divmod(blank_index, size)

        # UP   → tile at (row+1, col) moves up   → blank shifts down
        # DOWN → tile at (row-1, col) moves down  → blank shifts up
        # LEFT → tile at (row, col+1) moves left  → blank shifts right
        # RIGHT→ tile at (row, col-1) moves right → blank shifts left
        if direction == Direction.UP:
            return blank_index + size if row < size - 1 else None
        if direction == Direction.DOWN:
            return blank_index - size if row > 0 else None
        if direction == Direction.LEFT:
            return blank_index + 1 if col < size - 1 else None
        if direction == Direction.RIGHT:
            return blank_index - 1 if col > 0 else None
        raise ValueError(f"Unknown direction: {direction!r}")
