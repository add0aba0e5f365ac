"""Solvability and fitness rules checked against exhaustive search."""

from __future__ import annotations

import itertools
from collections import deque

import pytest

from backend.models import Puzzle
from backend.models.fitness import count_incorrect_tiles, fitness_score
from backend.models.solvability import count_inversions, is_solvable


# -- helpers ------------------------------------------------------------------


def _reachable(width: int, height: int) -> set[tuple[int, ...]]:
    """Breadth-first search over every arrangement reachable from solved."""
    start = Puzzle.solved(width, height)
    seen = {start}
    queue = deque([start])
    while queue:
        puzzle = queue.popleft()
        for value in puzzle.clickable_values():
            clicked = puzzle.click_value(value)
            assert clicked is not None
            if clicked not in seen:
                seen.add(clicked)
                queue.append(clicked)
    return {p.values for p in seen}


# -- inversions ---------------------------------------------------------------


def test_count_inversions_skips_blank() -> None:
    assert count_inversions([0, 1, 2, 3, 4, 5], blank=5) == 0
    assert count_inversions([1, 2, 0, 3, 4, 5], blank=5) == 2
    assert count_inversions([5, 4, 3, 2, 1, 0], blank=5) == 10


# -- parity rule --------------------------------------------------------------


@pytest.mark.parametrize("width, height", [(3, 2), (4, 2)], ids=["3x2", "4x2"])
def test_solvable_matches_brute_force(width: int, height: int) -> None:
    reachable = _reachable(width, height)
    length = width * height
    total = 0
    for perm in itertools.permutations(range(length)):
        assert is_solvable(width, perm) == (perm in reachable), perm
        total += 1
    # Exactly half of all arrangements can be reached.
    assert len(reachable) * 2 == total


def test_even_width_counts_blank_row() -> None:
    # Same tile order, blank one row up: flips the answer on a 4-wide board.
    solved = list(range(8))
    raised = [0, 1, 2, 7, 3, 4, 5, 6]
    assert is_solvable(4, solved)
    assert not is_solvable(4, raised)


def test_puzzle_solvable_property() -> None:
    assert Puzzle.raw(3, [1, 2, 0, 3, 4, 5]).solvable
    assert not Puzzle.raw(3, [1, 0, 2, 3, 4, 5]).solvable
    # The classic 15-puzzle with two tiles swapped.
    swapped = list(range(16))
    swapped[13], swapped[14] = swapped[14], swapped[13]
    assert not Puzzle.raw(4, swapped).solvable


# -- fitness ------------------------------------------------------------------


def test_fitness_zero_only_when_solved() -> None:
    for perm in itertools.permutations(range(6)):
        assert (fitness_score(3, perm) == 0) == (perm == tuple(range(6)))


def test_fitness_counts_squared_distance_times_misplaced() -> None:
    # Tiles 0 and 2 swapped on a 3-wide row: each two columns off.
    values = [2, 1, 0, 3, 4, 5]
    assert count_incorrect_tiles(values) == 2
    assert fitness_score(3, values) == (4 + 4) * 2


def test_fitness_ignores_blank_position() -> None:
    # Only the blank and tile 4 differ from solved; tile 4 is one cell off.
    values = [0, 1, 2, 3, 5, 4]
    assert count_incorrect_tiles(values) == 1
    assert fitness_score(3, values) == 1
