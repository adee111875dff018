"""Move legality and application — the only path that mutates a board."""

from __future__ import annotations

from backend.models.board import Board


class MoveEngine:
    """Stateless — all methods are static."""

    @staticmethod
    def is_adjacent(board: Board, index: int) -> bool:
        """True if the cell at *index* is orthogonally next to the blank."""
        dr = abs(board.row_of(index) - board.blank_row)
        dc = abs(board.col_of(index) - board.blank_col)
        return dr + dc == 1

    @staticmethod
    def neighbors(board: Board) -> list[int]:
        """Indices of every tile that could slide into the blank."""
        return [i for i in range(len(board.tiles)) if MoveEngine.is_adjacent(board, i)]

    @staticmethod
    def try_move(board: Board, target_index: int) -> bool:
        """Slide the tile at *target_index* into the adjacent blank.

        Returns True if the tile was adjacent to the blank and the move
        was applied; otherwise the board is left untouched.
        """
        if not board.contains(target_index):
            return False
        if not MoveEngine.is_adjacent(board, target_index):
            return False

        MoveEngine._swap(board, target_index)
        return True

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _swap(board: Board, target_index: int) -> None:
        bi = board.blank_index
        board.tiles[bi], board.tiles[target_index] = (
            board.tiles[target_index],
            board.tiles[bi],
        )
        board.blank_index = target_index
