"""Generic A* over an implicitly defined graph.

Knows nothing about puzzles: a :class:`Graph` supplies edge costs, heuristic
estimates and neighbours, and nodes only need content-based equality and
hashing so revisited states are recognised.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)


class NoPathError(RuntimeError):
    """Raised when the open set runs dry before the goal is reached."""


class Node(ABC):
    """A graph vertex, compared and hashed by content."""

    @abstractmethod
    def __eq__(self, other: object) -> bool: ...

    @abstractmethod
    def __hash__(self) -> int: ...


N = TypeVar("N", bound=Node)


class Graph(ABC, Generic[N]):
    """Capability contract consumed by :class:`AStar`."""

    @property
    @abstractmethod
    def all_nodes(self) -> Iterable[N]:
        """Every node the graph currently knows about."""

    @abstractmethod
    def get_distance(self, a: N, b: N) -> float:
        """Cost of the edge between two adjacent nodes."""

    @abstractmethod
    def get_heuristic_distance(self, a: N, b: N) -> float:
        """Estimated cost from *a* to *b*."""

    @abstractmethod
    def get_neighbours_of(self, node: N) -> Iterable[N]: ...


class AStar(Generic[N]):
    """Best-first search ordered by ``cost so far + heuristic``.

    Ties on ``f`` go to the lower heuristic, then to insertion order.  A node
    reached again with a cheaper cost is reopened, so inconsistent heuristics
    still yield a valid path.
    """

    def __init__(self, graph: Graph[N]) -> None:
        self.graph = graph
        self.expanded = 0

    def find_path(self, start: N, goal: N) -> list[N]:
        """Return the nodes from *start* to *goal*, both included."""
        graph = self.graph
        counter = itertools.count()
        self.expanded = 0

        h0 = graph.get_heuristic_distance(start, goal)
        open_heap: list[tuple[float, float, int, N]] = [(h0, h0, next(counter), start)]
        best_g: dict[N, float] = {start: 0}
        came_from: dict[N, N] = {}
        closed: set[N] = set()

        while open_heap:
            _, _, _, node = heapq.heappop(open_heap)
            if node in closed:
                continue
            if node == goal:
                path = _reconstruct(came_from, node)
                logger.debug(
                    "A* reached goal: %d expanded, path of %d nodes",
                    self.expanded, len(path),
                )
                return path

            closed.add(node)
            self.expanded += 1
            g = best_g[node]

            for neighbour in graph.get_neighbours_of(node):
                tentative = g + graph.get_distance(node, neighbour)
                if tentative >= best_g.get(neighbour, float("inf")):
                    continue
                best_g[neighbour] = tentative
                came_from[neighbour] = node
                closed.discard(neighbour)
                h = graph.get_heuristic_distance(neighbour, goal)
                heapq.heappush(open_heap, (tentative + h, h, next(counter), neighbour))

        logger.debug("A* exhausted the open set after %d expansions", self.expanded)
        raise NoPathError(f"No path from {start!r} to {goal!r}.")


def _reconstruct(came_from: dict[N, N], node: N) -> list[N]:
    path = [node]
    while node in came_from:
        node = came_from[node]
        path.append(node)
    path.reverse()
    return path
