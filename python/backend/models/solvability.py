"""Permutation-parity solvability test, independent of storage."""

from __future__ import annotations

from collections.abc import Sequence


def count_inversions(values: Sequence[int], blank: int) -> int:
    """Number of pairs ``i < j`` with ``values[i] > values[j]``, blank excluded."""
    tiles = [v for v in values if v != blank]
    count = 0
    for i, a in enumerate(tiles):
        for b in tiles[i + 1:]:
            if a > b:
                count += 1
    return count


def is_solvable(width: int, values: Sequence[int]) -> bool:
    """Return True if *values* can reach the solved order by legal slides.

    The blank is the largest value and belongs in the last cell.  On an odd
    width a vertical move carries a tile past an even number of others, so the
    inversion parity never changes.  On an even width every vertical move flips
    it while moving the blank one row, so inversions plus the blank's row
    distance from the bottom row must stay even.
    """
    length = len(values)
    blank = length - 1
    height = length // width
    inversions = count_inversions(values, blank)

    if width % 2 == 1:
        return inversions % 2 == 0

    blank_row = list(values).index(blank) // width
    row_distance = (height - 1) - blank_row
    return (inversions + row_distance) % 2 == 0
