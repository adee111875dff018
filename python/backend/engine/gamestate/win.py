"""Win condition for the sliding puzzle."""

from __future__ import annotations

from backend.models.board import Board


class WinDetector:
    """Stateless — all methods are static."""

    @staticmethod
    def is_solved(board: Board) -> bool:
        """Check if all tiles are in their goal positions.

        The goal is ``[1, 2, ..., N²-1, 0]``: tile ``i + 1`` at index ``i``
        and the blank in the last cell.
        """
        last = len(board.tiles) - 1
        for i in range(last):
            if board.tiles[i] != i + 1:
                return False
        return board.tiles[last] == 0
