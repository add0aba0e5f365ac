"""Integer grid coordinate."""

from __future__ import annotations

from typing import NamedTuple


class Point(NamedTuple):
    """Column (``x``) and row (``y``) of a cell, both zero-based."""

    x: int
    y: int

    def manhattan(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)
