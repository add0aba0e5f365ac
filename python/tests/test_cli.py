"""Command-line entry point tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

runner = CliRunner()


@pytest.mark.parametrize("frontend", ["vanilla", "rich"])
def test_solves_seeded_board(frontend: str) -> None:
    result = runner.invoke(app, ["-f", frontend, "-w", "3", "-h", "2", "--seed", "3"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_solves_default_board() -> None:
    result = runner.invoke(app, ["-f", "vanilla"])
    assert result.exit_code == 0, result.output
    assert "Solved in" in result.output


def test_solves_board_from_file(tmp_path: Path) -> None:
    board = tmp_path / "board.txt"
    board.write_text("0 1 2\n3 5 4\n")
    result = runner.invoke(app, ["-f", "vanilla", "--file", str(board)])
    assert result.exit_code == 0, result.output
    assert "click 4" in result.output
    assert "Solved in 1 moves!" in result.output


def test_check_reports_unsolvable(tmp_path: Path) -> None:
    board = tmp_path / "board.txt"
    board.write_text("1 0 2\n3 4 5\n")
    result = runner.invoke(app, ["-f", "vanilla", "--file", str(board), "--check"])
    assert result.exit_code == 0, result.output
    assert "Solvable: no" in result.output


def test_unsolvable_board_exits_with_error(tmp_path: Path) -> None:
    board = tmp_path / "board.txt"
    board.write_text("1 0 2\n3 4 5\n")
    result = runner.invoke(app, ["-f", "vanilla", "--file", str(board)])
    assert result.exit_code == 1


def test_malformed_board_exits_with_error(tmp_path: Path) -> None:
    board = tmp_path / "board.txt"
    board.write_text("0 1 2\n3 4\n")
    result = runner.invoke(app, ["--file", str(board), "--check"])
    assert result.exit_code == 1
