"""Shuffle generation — every board must be a solvable permutation.

Solvability is checked two ways: by the parity rule, and for 3×3 by an
independent breadth-first search over the full state space.
"""

from __future__ import annotations

import random
from collections import deque

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay import MoveEngine
from backend.engine.gamestate import WinDetector
from backend.models.board import Board

SEEDS = range(40)


# -- helpers ------------------------------------------------------------------


def _reachable_3x3() -> set[tuple[int, ...]]:
    """Every 3×3 arrangement reachable from the goal (9!/2 states)."""
    start = Board.solved(3)
    seen = {tuple(start.tiles)}
    queue = deque([start])
    while queue:
        board = queue.popleft()
        for target in MoveEngine.neighbors(board):
            nxt = board.copy()
            MoveEngine.try_move(nxt, target)
            key = tuple(nxt.tiles)
            if key not in seen:
                seen.add(key)
                queue.append(nxt)
    return seen


@pytest.fixture(scope="module")
def reachable_3x3() -> set[tuple[int, ...]]:
    return _reachable_3x3()


# -- tests --------------------------------------------------------------------


@pytest.mark.parametrize("size", [3, 4, 5])
@pytest.mark.parametrize("seed", SEEDS)
def test_generate_is_solvable_permutation(size: int, seed: int) -> None:
    board = GameGenerator.generate(size, random.Random(seed))

    assert board.size == size
    assert sorted(board.tiles) == list(range(size * size))
    assert board.tiles[board.blank_index] == 0
    assert GameGenerator.is_solvable(board)
    assert not WinDetector.is_solved(board)


@pytest.mark.timeout(30)
def test_generate_3x3_reachable_by_search(reachable_3x3: set[tuple[int, ...]]) -> None:
    assert len(reachable_3x3) == 181_440
    rng = random.Random(1234)
    for _ in range(200):
        board = GameGenerator.generate(3, rng)
        assert tuple(board.tiles) in reachable_3x3


@pytest.mark.timeout(30)
def test_parity_rule_matches_search_3x3(reachable_3x3: set[tuple[int, ...]]) -> None:
    rng = random.Random(99)
    for _ in range(500):
        board = GameGenerator.solved(3)
        GameGenerator.shuffle(board, rng)
        assert GameGenerator.is_solvable(board) == (tuple(board.tiles) in reachable_3x3)


def test_shuffle_keeps_blank_index_in_sync() -> None:
    rng = random.Random(5)
    for size in (3, 4, 5):
        board = GameGenerator.solved(size)
        GameGenerator.shuffle(board, rng)
        assert board.tiles[board.blank_index] == 0


def test_same_seed_same_board() -> None:
    a = GameGenerator.generate(4, random.Random(42))
    b = GameGenerator.generate(4, random.Random(42))
    assert a.tiles == b.tiles


@pytest.mark.parametrize(
    ("size", "flat", "solvable"),
    [
        (3, [1, 2, 3, 4, 5, 6, 8, 7, 0], False),
        (3, [1, 2, 3, 4, 5, 6, 7, 0, 8], True),
        (4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 15, 14, 0], False),
        # blank one row up from the goal row: even board needs odd inversions
        (4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 15, 12], True),
        (4, [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 0, 13, 14, 12, 15], False),
    ],
    ids=["3x3-swapped", "3x3-one-move", "4x4-swapped", "4x4-one-up", "4x4-odd"],
)
def test_is_solvable_parity(size: int, flat: list[int], solvable: bool) -> None:
    assert GameGenerator.is_solvable(Board.from_flat(size, flat)) is solvable


def test_make_solvable_swaps_two_tiles_without_moving_blank() -> None:
    board = Board.from_flat(3, [0, 2, 1, 3, 4, 5, 6, 7, 8])
    assert not GameGenerator.is_solvable(board)

    assert GameGenerator.make_solvable(board) is True
    assert board.tiles == [0, 1, 2, 3, 4, 5, 6, 7, 8]
    assert board.blank_index == 0
    assert GameGenerator.is_solvable(board)


def test_make_solvable_leaves_solvable_board_alone() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    assert GameGenerator.make_solvable(board) is False
    assert board.tiles == [1, 2, 3, 4, 5, 6, 7, 0, 8]
