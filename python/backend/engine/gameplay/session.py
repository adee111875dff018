"""Core gameplay logic — processes commands and checks the win condition."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable

from backend.config import DEFAULT_SIZE, InvalidConfiguration, validate_size
from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.directions import DirectionMapper
from backend.engine.gameplay.moves import MoveEngine
from backend.engine.gamestate import GameClock, WinDetector
from backend.models.board import Board, Direction
from backend.models.outcome import (
    ConfigOutcome,
    MoveOutcome,
    SessionSnapshot,
    SessionStatus,
    WinEvent,
)

logger = logging.getLogger(__name__)

WinListener = Callable[[WinEvent], None]


class GameSession:
    """Orchestrates a single game session.

    The session is the only writer of its board, move counter and clock.
    Every command either applies fully or reports a no-op outcome; none
    of them raise.
    """

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng or random.Random()
        self._board: Board | None = None
        self._size: int | None = None
        self._status = SessionStatus.NOT_STARTED
        self._moves: int = 0
        self._clock = GameClock()
        self._listeners: list[WinListener] = []

    @classmethod
    def from_board(cls, board: Board, rng: random.Random | None = None) -> GameSession:
        """Start a game on an existing board instead of a fresh shuffle."""
        validate_size(board.size)
        obj = cls(rng)
        obj._start(board.copy())
        return obj

    # -- observations ---------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def size(self) -> int | None:
        return self._size

    @property
    def moves(self) -> int:
        return self._moves

    @property
    def elapsed_seconds(self) -> int:
        return self._clock.elapsed_seconds

    @property
    def board(self) -> Board | None:
        """A copy of the current board; mutating it does not affect the game."""
        return self._board.copy() if self._board is not None else None

    @property
    def is_won(self) -> bool:
        return self._status is SessionStatus.WON

    @property
    def size_selectable(self) -> bool:
        """Size changes are only accepted between games."""
        return self._status is not SessionStatus.PLAYING

    @property
    def restart_label(self) -> str:
        return "Restart" if self._status is SessionStatus.PLAYING else "New Game"

    def snapshot(self) -> SessionSnapshot | None:
        if self._board is None:
            return None
        return SessionSnapshot(
            size=self._board.size,
            tiles=tuple(self._board.tiles),
            blank_index=self._board.blank_index,
            status=self._status,
            moves=self._moves,
            elapsed_seconds=self._clock.elapsed_seconds,
        )

    def add_win_listener(self, listener: WinListener) -> None:
        self._listeners.append(listener)

    def remove_win_listener(self, listener: WinListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # -- lifecycle ------------------------------------------------------------

    def initialize(self, size: int) -> ConfigOutcome:
        """Discard the current game and start a freshly shuffled one."""
        try:
            size = validate_size(size)
        except InvalidConfiguration as exc:
            logger.warning("Rejected initialize: %s", exc)
            return ConfigOutcome.INVALID_SIZE

        self._start(GameGenerator.generate(size, self._rng))
        logger.info("Started %dx%d game", size, size)
        return ConfigOutcome.STARTED

    def restart(self) -> ConfigOutcome:
        """Re-initialize with the current size (or the default before any game)."""
        return self.initialize(self._size or DEFAULT_SIZE)

    def change_size(self, size: int) -> ConfigOutcome:
        """Switch board size; ignored while a game is in progress."""
        if self._status is SessionStatus.PLAYING:
            logger.debug("Ignored size change to %r during play", size)
            return ConfigOutcome.IGNORED_WHILE_PLAYING
        return self.initialize(size)

    # -- movement -------------------------------------------------------------

    def submit_move(self, target_index: int) -> MoveOutcome:
        """Slide the tile at *target_index* into the blank, if adjacent."""
        if self._status is not SessionStatus.PLAYING:
            return MoveOutcome.NOT_PLAYING

        board = self._board
        if (
            isinstance(target_index, bool)
            or not isinstance(target_index, int)
            or not board.contains(target_index)
        ):
            logger.debug("Rejected out-of-range move target %r", target_index)
            return MoveOutcome.OUT_OF_RANGE

        if not MoveEngine.try_move(board, target_index):
            return MoveOutcome.ILLEGAL

        self._moves += 1
        if WinDetector.is_solved(board):
            self._win()
        return MoveOutcome.MOVED

    def submit_direction(self, direction: Direction) -> MoveOutcome:
        """Move the tile that *direction* points at (see ``DirectionMapper``)."""
        if self._status is not SessionStatus.PLAYING:
            return MoveOutcome.NOT_PLAYING

        try:
            target = DirectionMapper.resolve(
                direction, self._board.blank_index, self._board.size
            )
        except ValueError:
            logger.debug("Rejected unknown direction %r", direction)
            return MoveOutcome.BLOCKED
        if target is None:
            return MoveOutcome.BLOCKED
        return self.submit_move(target)

    # -- time -----------------------------------------------------------------

    def tick(self) -> bool:
        """Advance the clock by one second.  Returns True if it counted."""
        if self._status is not SessionStatus.PLAYING:
            return False
        return self._clock.tick()

    # -- helpers --------------------------------------------------------------

    def _start(self, board: Board) -> None:
        self._board = board
        self._size = board.size
        self._moves = 0
        self._status = SessionStatus.PLAYING
        self._clock.start()

    def _win(self) -> None:
        self._status = SessionStatus.WON
        self._clock.stop()
        event = WinEvent(
            size=self._board.size,
            moves=self._moves,
            elapsed_seconds=self._clock.elapsed_seconds,
        )
        logger.info(
            "Solved %dx%d in %d moves, %ds",
            event.size, event.size, event.moves, event.elapsed_seconds,
        )
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception("Win listener %r failed", listener)
