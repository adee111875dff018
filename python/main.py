#!/usr/bin/env python3
"""Sliding Puzzle Game.

Usage::

    python main.py                  # menu, 4×4 preselected
    python main.py -s 3             # menu, 3×3 preselected
    python main.py --seed 7         # reproducible shuffles
    python main.py --log-level info # show session log lines
"""

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.config import ALLOWED_SIZES, DEFAULT_SIZE  # noqa: E402


class LogLevel(StrEnum):
    debug = "debug"
    info = "info"
    warning = "warning"
    error = "error"


# -- helpers ------------------------------------------------------------------


def _configure_logging(level: LogLevel) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    size: int = typer.Option(
        DEFAULT_SIZE, "-s", "--size",
        min=min(ALLOWED_SIZES), max=max(ALLOWED_SIZES),
        help="Grid size preselected in the menu (3-5).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        help="Seed the shuffle for a reproducible game.",
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.warning, "--log-level",
        help="Logging verbosity.",
    ),
) -> None:
    """Sliding Puzzle Game."""
    _configure_logging(log_level)

    from frontend.cli.rich.app import run

    run(size=size, seed=seed)


if __name__ == "__main__":
    app()
