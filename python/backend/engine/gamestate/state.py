"""Tracks the state of a game in progress."""

from __future__ import annotations

import time

from backend.models.puzzle import Puzzle


class GameState:
    """Holds the current puzzle, the puzzles before it, and a move clock."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.history: list[Puzzle] = []
        self.moves: int = 0
        self._start_time: float = time.time()
        self._elapsed_banked: float = 0.0
        self._running: bool = True

    # -- time tracking --------------------------------------------------------

    @property
    def elapsed_time(self) -> float:
        if self._running:
            return self._elapsed_banked + (time.time() - self._start_time)
        return self._elapsed_banked

    def pause(self) -> None:
        if self._running:
            self._elapsed_banked += time.time() - self._start_time
            self._running = False

    def resume(self) -> None:
        if not self._running:
            self._start_time = time.time()
            self._running = True

    # -- history --------------------------------------------------------------

    def push(self, puzzle: Puzzle) -> None:
        """Make *puzzle* current and count the move."""
        self.history.append(self.puzzle)
        self.puzzle = puzzle
        self.moves += 1

    def pop(self) -> bool:
        """Return to the previous puzzle; False if there is none."""
        if not self.history:
            return False
        self.puzzle = self.history.pop()
        self.moves -= 1
        return True

    @property
    def is_solved(self) -> bool:
        return self.puzzle.fitness == 0
