#!/usr/bin/env python3
"""Sliding Puzzle Solver.

Usage::

    python main.py                      # default 4×4 board, rich output
    python main.py -f vanilla -w 3 -h 2 --seed 7
    python main.py --file board.txt     # solve a board read from a file
    python main.py --file board.txt --check
"""

import importlib
import logging
import random
import sys
from enum import StrEnum
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler

ROOT = Path(__file__).resolve().parent  # python/

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from backend.engine.gamegenerator import GameGenerator  # noqa: E402
from backend.models.puzzle import Puzzle  # noqa: E402


# -- frontend registry -------------------------------------------------------


class Frontend(StrEnum):
    vanilla = "vanilla"
    rich = "rich"


_RUNNERS = {
    Frontend.vanilla: "frontend.cli.vanilla.app",
    Frontend.rich: "frontend.cli.rich.app",
}


# -- helpers ------------------------------------------------------------------


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def _load_puzzle(
    file: Optional[Path], width: int, height: int, seed: Optional[int]
) -> Puzzle:
    if file is not None:
        return Puzzle.parse(file.read_text())
    if seed is None:
        return Puzzle.create(width, height)
    return GameGenerator.generate(width, height, random.Random(seed))


# -- CLI entry point ----------------------------------------------------------

app = typer.Typer(add_completion=False)


@app.command()
def main(
    frontend: Frontend = typer.Option(
        Frontend.rich, "-f", "--frontend",
        help="Renderer for the board and the replayed solution.",
    ),
    width: int = typer.Option(
        4, "-w", "--width",
        min=3,
        help="Board width (at least 3).",
    ),
    height: int = typer.Option(
        4, "-h", "--height",
        min=2,
        help="Board height (at least 2).",
    ),
    seed: Optional[int] = typer.Option(
        None, "--seed",
        envvar="SLIDING_PUZZLE_SEED",
        help="Shuffle a random solvable board from this seed. "
             "Omit for the default lightly scrambled board.",
    ),
    file: Optional[Path] = typer.Option(
        None, "--file",
        exists=True, dir_okay=False, readable=True,
        help="Read the board from a file of whitespace-separated rows.",
    ),
    check: bool = typer.Option(
        False, "--check",
        help="Only report solvability and fitness; do not solve.",
    ),
    delay: float = typer.Option(
        0.0, "--delay",
        min=0.0,
        help="Seconds to pause between replayed moves.",
    ),
    verbose: bool = typer.Option(
        False, "-v", "--verbose",
        help="Log search progress.",
    ),
) -> None:
    """Sliding Puzzle Solver."""
    _configure_logging(verbose)
    mod = importlib.import_module(_RUNNERS[frontend])

    try:
        puzzle = _load_puzzle(file, width, height, seed)
        if check:
            mod.report(puzzle)
            return
        mod.run(puzzle, delay=delay)
    except ValueError as exc:
        typer.secho(f"  {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from None


if __name__ == "__main__":
    app()
