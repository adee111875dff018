"""Rich terminal frontend — tables, colours, and panels.

Uses the ``rich`` library for styled output.  All game rules live in
``GameSession``; this module only turns keypresses into session commands
and draws what the session reports back.  It also acts as the
one-second timer that drives ``GameSession.tick()``.
"""

from __future__ import annotations

import random
import sys
import time

import rich.box
from rich.align import Align
from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from backend.config import ALLOWED_SIZES, DEFAULT_SIZE, TICK_SECONDS
from backend.engine.gameplay import GameSession
from backend.models.board import Board
from backend.models.outcome import MoveOutcome, WinEvent
from frontend.cli.input_handler import (
    feed_digit,
    get_key,
    get_key_timeout,
    to_direction,
)

console = Console()


# -- helpers ------------------------------------------------------------------


def format_time(seconds: int) -> str:
    """Format a duration as ``MM:SS``."""
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


# -- board rendering ----------------------------------------------------------


def _render_board(board: Board, won: bool = False) -> Table:
    """Return a Rich Table representing the puzzle grid."""
    width = len(str(board.size * board.size - 1))
    table = Table(
        show_header=False,
        show_edge=True,
        pad_edge=True,
        box=rich.box.HEAVY,
        border_style="bright_green" if won else "bright_blue",
        padding=(0, 1),
    )
    for _ in range(board.size):
        table.add_column(width=width + 1, justify="center")

    for r, row in enumerate(board.rows()):
        cells: list[str] = []
        for c, val in enumerate(row):
            index = r * board.size + c
            if val == 0:
                cells.append("[dim]·[/dim]")
            elif won or board.is_tile_correct(index):
                cells.append(f"[bold green]{val:>{width}}[/bold green]")
            else:
                cells.append(f"[bold white]{val:>{width}}[/bold white]")
        table.add_row(*cells)

    return table


def _stats(session: GameSession) -> Text:
    stats = Text()
    stats.append("  Moves: ", style="dim")
    stats.append(str(session.moves), style="bold yellow")
    stats.append("    Time: ", style="dim")
    stats.append(format_time(session.elapsed_seconds), style="bold yellow")
    return stats


# -- menu screen --------------------------------------------------------------


def _draw_menu(session: GameSession, sel_size: int) -> None:
    """Draw the main menu."""
    console.clear()

    locked = not session.size_selectable

    # Build size selector line
    sizes = Text()
    for i, s in enumerate(ALLOWED_SIZES):
        if i:
            sizes.append("  ")
        if s == sel_size:
            style = "bold yellow on #313244" if locked else "bold green on #313244"
            sizes.append(f" {s}×{s} ", style=style)
        else:
            sizes.append(f" {s}×{s} ", style="dim")

    if locked:
        nav = Text("  size locked — game in progress", style="dim yellow")
    else:
        nav = Text("  ← →  change size", style="dim")

    opts = Text()
    opts.append("  Enter", style="bold cyan")
    opts.append("  Resume    " if locked else "  Play    ")
    opts.append("Q", style="dim bold")
    opts.append("  Quit", style="dim")

    body = Group(
        Text(""),
        Align.center(sizes),
        Align.center(nav),
        Text(""),
        Align.center(opts),
        Text(""),
    )

    panel = Panel(
        body,
        title="[bold]S L I D I N G   P U Z Z L E[/bold]",
        border_style="bright_blue",
        padding=(1, 4),
    )

    console.print()
    console.print(Align.center(panel))


# -- game screens -------------------------------------------------------------


def _draw_game(session: GameSession, status: str = "", pending: str = "") -> None:
    """Draw the game screen."""
    console.clear()

    size = session.size
    board_table = _render_board(session.board)

    controls = Text()
    controls.append("  ↑↓←→", style="bold cyan")
    controls.append(" / ", style="dim")
    controls.append("WASD", style="bold cyan")
    controls.append("  move   ", style="dim")
    controls.append("0-9", style="bold cyan")
    controls.append("  tile   ", style="dim")
    controls.append("R", style="bold cyan")
    controls.append(f"  {session.restart_label.lower()}   ", style="dim")
    controls.append("Q", style="bold cyan")
    controls.append("  menu", style="dim")

    panel = Panel(
        Align.center(board_table),
        title=f"[bold cyan]Sliding Puzzle  {size}×{size}[/bold cyan]",
        border_style="bright_blue",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))
    # Save cursor position right before the stats line so _update_time()
    # can later restore to this exact spot and overwrite only this line.
    sys.stdout.write("\033[s")
    sys.stdout.flush()
    console.print(Align.center(_stats(session)))
    if pending:
        status = f"Tile: [bold]{pending}[/bold]_  (Enter to move)"
    if status:
        console.print(Align.center(Text.from_markup(f"  {status}")))
    console.print(Align.center(controls))


def _update_time(session: GameSession) -> None:
    """Overwrite just the stats line using the saved cursor position.

    Uses raw ANSI codes (bypassing Rich) so only the single stats
    line is repainted.
    """
    _DIM = "\033[2m"
    _YB = "\033[33;1m"
    _RS = "\033[0m"

    clock = format_time(session.elapsed_seconds)
    stats_raw = (
        f"{_DIM}Moves: {_RS}{_YB}{session.moves}{_RS}"
        f"    {_DIM}Time: {_RS}{_YB}{clock}{_RS}"
    )

    # Centre the visible text to match what Rich would produce.
    visible_len = len(f"Moves: {session.moves}    Time: {clock}")
    pad = max(0, (console.width - visible_len) // 2)

    sys.stdout.write(f"\033[u\033[K{' ' * pad}{stats_raw}")
    sys.stdout.flush()


def _draw_win(session: GameSession, event: WinEvent) -> None:
    console.clear()

    board_table = _render_board(session.board, won=True)

    congrats = Text()
    congrats.append("\n  ★ ", style="bold yellow")
    congrats.append("CONGRATULATIONS!", style="bold green")
    congrats.append("  ★\n", style="bold yellow")

    summary = Text(
        f"You solved the {event.size}x{event.size} puzzle in "
        f"{event.moves} moves and {format_time(event.elapsed_seconds)}",
        style="green",
    )

    group = Group(
        Align.center(board_table),
        Align.center(congrats),
        Align.center(summary),
    )

    panel = Panel(
        group,
        title=f"[bold green]Sliding Puzzle  {event.size}×{event.size}[/bold green]",
        border_style="bold green",
        padding=(1, 2),
    )

    console.print()
    console.print(Align.center(panel))


# -- game loop ----------------------------------------------------------------


_REJECTED = {
    MoveOutcome.ILLEGAL: "[yellow]That tile is not next to the gap.[/yellow]",
    MoveOutcome.BLOCKED: "[dim]Nothing to slide that way.[/dim]",
}


def _submit_tile(session: GameSession, tile: int) -> MoveOutcome:
    """Move the tile showing number *tile* (the terminal's 'click')."""
    return session.submit_move(session.snapshot().tiles.index(tile))


def _play(session: GameSession) -> None:
    """Play the session's current game until it is won or the user leaves."""
    wins: list[WinEvent] = []
    listener = wins.append
    session.add_win_listener(listener)
    try:
        _play_loop(session, wins)
    finally:
        session.remove_win_listener(listener)


def _play_loop(session: GameSession, wins: list[WinEvent]) -> None:
    while True:
        status = ""
        pending = ""
        next_tick = time.monotonic() + TICK_SECONDS

        while not wins:
            _draw_game(session, status, pending)
            status = ""

            # Wait for input with a short timeout so the clock keeps ticking.
            while True:
                key = get_key_timeout(0.25)
                now = time.monotonic()
                ticked = False
                while now >= next_tick:
                    ticked = session.tick() or ticked
                    next_tick += TICK_SECONDS
                if key is not None:
                    break
                if ticked:
                    _update_time(session)

            max_tile = session.size * session.size - 1
            direction = to_direction(key)
            outcome: MoveOutcome | None = None

            if direction is not None:
                pending = ""
                outcome = session.submit_direction(direction)
            elif key.isdecimal():
                pending, tile = feed_digit(pending, key, max_tile)
                if tile is not None:
                    outcome = _submit_tile(session, tile)
            elif key == "enter" and pending:
                outcome = _submit_tile(session, int(pending))
                pending = ""
            elif key == "backspace":
                pending = pending[:-1]
            elif key == "restart":
                session.restart()
                pending = ""
                next_tick = time.monotonic() + TICK_SECONDS
            elif key == "quit":
                return

            if outcome is not None:
                status = _REJECTED.get(outcome, "")

        # -- win ---------------------------------------------------------------
        _draw_win(session, wins.pop())
        console.print(
            Align.center(
                Text(
                    "\n  Press R for a new game, Q to go back.\n",
                    style="dim",
                )
            )
        )

        while True:
            key = get_key()
            if key == "restart":
                session.restart()
                break
            if key == "quit":
                return


# -- menu loop ----------------------------------------------------------------


def _menu_loop(session: GameSession, sel_size: int) -> None:
    while True:
        if not session.size_selectable:
            sel_size = session.size
        _draw_menu(session, sel_size)
        key = get_key()

        if key == "quit":
            console.clear()
            console.print(
                Align.center(Text("\nGoodbye!\n", style="bold cyan"))
            )
            return
        elif key == "left" and session.size_selectable:
            i = ALLOWED_SIZES.index(sel_size)
            sel_size = ALLOWED_SIZES[max(0, i - 1)]
        elif key == "right" and session.size_selectable:
            i = ALLOWED_SIZES.index(sel_size)
            sel_size = ALLOWED_SIZES[min(len(ALLOWED_SIZES) - 1, i + 1)]
        elif key in ("1", "enter"):
            session.change_size(sel_size)
            _play(session)


# -- public entry point -------------------------------------------------------


def run(size: int = DEFAULT_SIZE, seed: int | None = None) -> None:
    """Launch the Rich CLI with interactive menu."""
    session = GameSession(random.Random(seed))
    _menu_loop(session, size)
