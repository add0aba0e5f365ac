"""Sliding puzzle solver."""

from __future__ import annotations

import logging

from backend.engine.gamesolver.graph import PuzzleNode, PuzzleNodeNetwork
from backend.engine.search import AStar
from backend.models.puzzle import Puzzle

logger = logging.getLogger(__name__)


class PuzzleSolution:
    """The clicked tile value for each step, read through a forward cursor."""

    def __init__(self, moves: list[int]) -> None:
        self.moves: tuple[int, ...] = tuple(moves)
        self._index = 0

    def next_move_value(self) -> int:
        """Return the next tile to click and advance.

        Raises ``IndexError`` once every move has been read.
        """
        if self._index >= len(self.moves):
            raise IndexError(
                f"Solution has {len(self.moves)} moves; all have been read."
            )
        value = self.moves[self._index]
        self._index += 1
        return value

    @property
    def remaining(self) -> int:
        return len(self.moves) - self._index

    def __len__(self) -> int:
        return len(self.moves)

    def __repr__(self) -> str:
        return f"PuzzleSolution(moves={list(self.moves)}, index={self._index})"


class PuzzleSolver:
    """Runs A* from a puzzle to the solved board of the same size."""

    def solve(self, puzzle: Puzzle) -> PuzzleSolution:
        if not puzzle.solvable:
            raise ValueError(f"Cannot solve an unsolvable puzzle:\n{puzzle}")

        network = PuzzleNodeNetwork()
        astar = AStar(network)
        start = PuzzleNode(puzzle)
        goal = PuzzleNode(Puzzle.solved(puzzle.width, puzzle.height))
        nodes = astar.find_path(start, goal)

        # The clicked tile sits, before the click, where the open cell is after it.
        moves: list[int] = []
        for left, right in zip(nodes, nodes[1:]):
            moves.append(left.puzzle[right.puzzle.open_index()])

        logger.info(
            "Solved %dx%d puzzle in %d moves (%d states expanded, %d seen)",
            puzzle.width, puzzle.height, len(moves), astar.expanded, len(network.all_nodes),
        )
        return PuzzleSolution(moves)

    def hint(self, puzzle: Puzzle) -> int | None:
        """Return the first move of a fresh solve, or ``None`` if solved."""
        if puzzle.fitness == 0:
            return None
        solution = self.solve(puzzle)
        return solution.next_move_value()
