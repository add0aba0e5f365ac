"""Core gameplay logic: applies clicks and checks the win condition."""

from __future__ import annotations

import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import PuzzleSolver
from backend.engine.gamestate import GameState
from backend.models.puzzle import Puzzle


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, width: int, height: int, rng: random.Random | None = None) -> None:
        self.rng = rng or random.Random()
        self.state = GameState(GameGenerator.generate(width, height, self.rng))

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle, rng: random.Random | None = None) -> GamePlay:
        """Create a session from an existing puzzle (e.g. parsed from a file)."""
        obj = object.__new__(cls)
        obj.rng = rng or random.Random()
        obj.state = GameState(puzzle)
        return obj

    # -- movement -------------------------------------------------------------

    def click(self, value: int) -> bool:
        """Slide tile *value* toward the open cell.

        Returns True if the tile shared a row or column with the open cell
        and the click was applied.
        """
        clicked = self.state.puzzle.click_value(value)
        if clicked is None:
            return False
        self.state.push(clicked)
        return True

    def click_random(self, vertical: bool | None = None) -> bool:
        clicked = self.state.puzzle.click_random(vertical=vertical, rng=self.rng)
        if clicked is None:
            return False
        self.state.push(clicked)
        return True

    def undo(self) -> bool:
        return self.state.pop()

    # -- queries --------------------------------------------------------------

    def hint(self) -> int | None:
        """Return the value to click next, or ``None`` once solved."""
        return PuzzleSolver().hint(self.state.puzzle)

    @property
    def puzzle(self) -> Puzzle:
        return self.state.puzzle

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
