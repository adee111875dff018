"""Board model for the sliding puzzle game."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Board:
    """Represents the sliding puzzle board.

    Tiles are stored as a flat row-major list of ints. 0 represents the
    blank space; ``blank_index`` always points at it.
    """

    size: int
    tiles: list[int]
    blank_index: int

    # -- construction helpers -------------------------------------------------

    @classmethod
    def solved(cls, size: int) -> Board:
        """Return the goal-state board (all tiles in order, blank bottom-right)."""
        return cls(
            size=size,
            tiles=[*range(1, size * size), 0],
            blank_index=size * size - 1,
        )

    @classmethod
    def from_flat(cls, size: int, flat: list[int]) -> Board:
        """Create a board from a flat row-major tile list.

        Example::

            Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
        """
        if len(flat) != size * size:
            raise ValueError(
                f"Expected {size * size} tiles for a {size}×{size} board, "
                f"got {len(flat)}."
            )
        if sorted(flat) != list(range(size * size)):
            raise ValueError(
                f"Tiles must be a permutation of 0..{size * size - 1}, "
                f"got {flat}."
            )
        return cls(size=size, tiles=list(flat), blank_index=flat.index(0))

    # -- queries --------------------------------------------------------------

    def row_of(self, index: int) -> int:
        return index // self.size

    def col_of(self, index: int) -> int:
        return index % self.size

    @property
    def blank_row(self) -> int:
        return self.row_of(self.blank_index)

    @property
    def blank_col(self) -> int:
        return self.col_of(self.blank_index)

    def contains(self, index: int) -> bool:
        return 0 <= index < len(self.tiles)

    def rows(self) -> list[list[int]]:
        """Row-major 2D view, for rendering."""
        n = self.size
        return [self.tiles[r * n : (r + 1) * n] for r in range(n)]

    def is_tile_correct(self, index: int) -> bool:
        """Check if the tile at *index* is in its goal position."""
        val = self.tiles[index]
        if val == 0:
            return index == len(self.tiles) - 1
        return index == val - 1

    def copy(self) -> Board:
        return Board(
            size=self.size,
            tiles=self.tiles[:],
            blank_index=self.blank_index,
        )
