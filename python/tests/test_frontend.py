"""Terminal frontend helpers and CLI option validation."""

from __future__ import annotations

import pytest
from rich.console import Console
from typer.testing import CliRunner

import main
from backend.models.board import Board
from frontend.cli.rich import app as rich_app


@pytest.mark.parametrize(
    ("seconds", "text"),
    [(0, "00:00"), (9, "00:09"), (61, "01:01"), (3599, "59:59"), (3600, "60:00")],
)
def test_format_time(seconds: int, text: str) -> None:
    assert rich_app.format_time(seconds) == text


def test_render_board_shows_every_tile() -> None:
    board = Board.from_flat(3, [1, 2, 3, 4, 5, 6, 7, 0, 8])
    table = rich_app._render_board(board)
    assert table.row_count == 3
    assert len(table.columns) == 3

    console = Console(width=40, record=True)
    console.print(table)
    out = console.export_text()
    for tile in range(1, 9):
        assert str(tile) in out


@pytest.mark.parametrize("size", ["2", "6"])
def test_cli_rejects_unsupported_size(size: str) -> None:
    result = CliRunner().invoke(main.app, ["--size", size])
    assert result.exit_code != 0


def test_cli_passes_options_to_frontend(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(rich_app, "run", lambda **kw: calls.append(kw))

    result = CliRunner().invoke(main.app, ["-s", "5", "--seed", "11"])
    assert result.exit_code == 0, result.output
    assert calls == [{"size": 5, "seed": 11}]
