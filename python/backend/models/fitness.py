"""Distance-to-solved heuristic over a raw arrangement."""

from __future__ import annotations

from collections.abc import Sequence


def count_incorrect_tiles(values: Sequence[int]) -> int:
    """Count tiles (blank excluded) not sitting on their own index."""
    tile_count = len(values) - 1
    return sum(1 for i in range(tile_count) if values[i] != i)


def fitness_score(width: int, values: Sequence[int]) -> int:
    """A measure of how close the arrangement is to being solved.

    Sum of the squared Manhattan distances of every misplaced tile, times the
    number of misplaced tiles.  ``0`` means solved.
    """
    tile_count = len(values) - 1
    positions = [0] * len(values)
    for index, value in enumerate(values):
        positions[value] = index

    total = 0
    for i in range(tile_count):
        index = positions[i]
        if index == i:
            continue
        x, y = index % width, index // width
        delta = abs(i % width - x) + abs(i // width - y)
        total += delta * delta
    return total * count_incorrect_tiles(values)
