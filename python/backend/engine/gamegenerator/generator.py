"""Generates solvable sliding puzzle boards."""

from __future__ import annotations

import random

from backend.models.puzzle import Puzzle


class GameGenerator:
    """Creates solvable puzzles, either shuffled outright or by random clicks."""

    @staticmethod
    def solved(width: int, height: int) -> Puzzle:
        """Return the goal-state puzzle (values in order, open cell last)."""
        return Puzzle.solved(width, height)

    @staticmethod
    def generate(width: int, height: int, rng: random.Random | None = None) -> Puzzle:
        """Return a random *solvable* puzzle in which every tile is misplaced."""
        return Puzzle.solved(width, height).reset(rng=rng or random.Random())

    @staticmethod
    def scramble(puzzle: Puzzle, clicks: int, rng: random.Random | None = None) -> Puzzle:
        """Apply *clicks* random legal clicks, never undoing the previous one.

        Handy for boards a known, small number of moves from *puzzle*.
        """
        rng = rng or random.Random()
        previous: Puzzle | None = None

        for _ in range(clicks):
            neighbours = [p for p in puzzle.all_movable(rng) if p != previous]
            previous, puzzle = puzzle, rng.choice(neighbours)
        return puzzle
