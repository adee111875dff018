"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import logging
import random

from backend.engine.gamestate.win import WinDetector
from backend.models.board import Board

logger = logging.getLogger(__name__)


class GameGenerator:
    """Creates solvable puzzles from a uniform shuffle plus a parity fix."""

    @staticmethod
    def solved(size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return Board.solved(size)

    @staticmethod
    def shuffle(board: Board, rng: random.Random | None = None) -> None:
        """Apply a uniform random permutation to *board* in-place.

        Fisher–Yates over every cell, the blank included.  Roughly half of
        the resulting boards are unreachable; see ``make_solvable``.
        """
        rng = rng or random.Random()
        tiles = board.tiles
        for i in range(len(tiles) - 1, 0, -1):
            j = rng.randint(0, i)
            tiles[i], tiles[j] = tiles[j], tiles[i]
        board.blank_index = tiles.index(0)

    @staticmethod
    def inversions(board: Board) -> int:
        """Count tile pairs that appear in the wrong order (blank ignored)."""
        flat = [v for v in board.tiles if v != 0]
        count = 0
        for i in range(len(flat)):
            for j in range(i + 1, len(flat)):
                if flat[i] > flat[j]:
                    count += 1
        return count

    @staticmethod
    def is_solvable(board: Board) -> bool:
        """Return True if *board* can reach the goal state by legal slides."""
        inversions = GameGenerator.inversions(board)
        if board.size % 2 == 1:
            return inversions % 2 == 0
        blank_row_from_bottom = board.size - 1 - board.blank_row
        return (inversions + blank_row_from_bottom) % 2 == 0

    @staticmethod
    def make_solvable(board: Board) -> bool:
        """Fix the parity of *board* in-place.

        Swapping two non-blank tiles flips the inversion parity without
        moving the blank, so one swap always suffices.  Returns True if a
        swap was made.
        """
        if GameGenerator.is_solvable(board):
            return False
        a, b = [i for i, v in enumerate(board.tiles) if v != 0][:2]
        board.tiles[a], board.tiles[b] = board.tiles[b], board.tiles[a]
        return True

    @staticmethod
    def generate(size: int, rng: random.Random | None = None) -> Board:
        """Return a random *solvable*, unsolved board of the given size."""
        rng = rng or random.Random()
        while True:
            board = GameGenerator.solved(size)
            GameGenerator.shuffle(board, rng)
            if GameGenerator.make_solvable(board):
                logger.debug("Shuffle had odd parity; corrected with one swap")

            # Ensure the board is not already solved
            if not WinDetector.is_solved(board):
                return board
            logger.debug("Shuffle produced the solved board; reshuffling")
