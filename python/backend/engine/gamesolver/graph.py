"""Puzzle states exposed as an A* graph."""

from __future__ import annotations

from backend.engine.search import Graph, Node
from backend.models.puzzle import Puzzle


class PuzzleNode(Node):
    """Wraps one puzzle state; equal puzzles make equal nodes."""

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleNode):
            return NotImplemented
        return self.puzzle == other.puzzle

    def __hash__(self) -> int:
        return hash(self.puzzle)

    def __repr__(self) -> str:
        return f"PuzzleNode({list(self.puzzle.values)})"


class PuzzleNodeNetwork(Graph[PuzzleNode]):
    """Every click is an edge of cost 1.

    The heuristic is the fitness difference between two states.  It is not
    admissible, so paths are short but not guaranteed minimal.
    """

    def __init__(self) -> None:
        self._known: set[PuzzleNode] = set()

    @property
    def all_nodes(self) -> set[PuzzleNode]:
        return self._known

    def get_distance(self, a: PuzzleNode, b: PuzzleNode) -> int:
        return 1

    def get_heuristic_distance(self, a: PuzzleNode, b: PuzzleNode) -> int:
        return a.puzzle.fitness - b.puzzle.fitness

    def get_neighbours_of(self, node: PuzzleNode) -> list[PuzzleNode]:
        self._known.add(node)
        neighbours: list[PuzzleNode] = []
        for value in node.puzzle.clickable_values():
            clicked = node.puzzle.click_value(value)
            assert clicked is not None
            neighbour = PuzzleNode(clicked)
            self._known.add(neighbour)
            neighbours.append(neighbour)
        return neighbours
