"""Vanilla terminal frontend: no third-party dependencies.

Prints the puzzle in its plain text form, solves it, and replays every move.
"""

from __future__ import annotations

import sys
import time
from typing import TextIO

from backend.engine.gameplay import GamePlay
from backend.engine.gamesolver import PuzzleSolver
from backend.models.puzzle import Puzzle


def _print_puzzle(puzzle: Puzzle, out: TextIO) -> None:
    for line in str(puzzle).splitlines():
        out.write(f"  {line}\n")
    out.write("\n")


def report(puzzle: Puzzle, out: TextIO | None = None) -> None:
    """Print the puzzle with its solvability and fitness."""
    out = out or sys.stdout
    _print_puzzle(puzzle, out)
    out.write(f"  Solvable: {'yes' if puzzle.solvable else 'no'}\n")
    out.write(f"  Fitness:  {puzzle.fitness}\n")
    out.write(f"  Misplaced tiles: {puzzle.incorrect_tiles}\n")


def run(puzzle: Puzzle, delay: float = 0.0, out: TextIO | None = None) -> int:
    """Solve *puzzle*, replay the moves, and return how many were made."""
    out = out or sys.stdout
    out.write(f"\n  {puzzle.width}x{puzzle.height} puzzle (fitness {puzzle.fitness})\n\n")
    _print_puzzle(puzzle, out)

    solution = PuzzleSolver().solve(puzzle)
    game = GamePlay.from_puzzle(puzzle)

    for i in range(len(solution)):
        value = solution.next_move_value()
        game.click(value)
        out.write(f"  Move {i + 1}/{len(solution)}: click {value}\n")
        _print_puzzle(game.puzzle, out)
        if delay:
            time.sleep(delay)

    out.write(f"  Solved in {game.state.moves} moves!\n")
    return game.state.moves
