"""Plain per-cell puzzle storage for boards larger than 16 cells."""

from __future__ import annotations

from collections.abc import Sequence

from backend.models.puzzle import Puzzle, check_arrangement
from backend.models.validation import require_index


class ArrayPuzzle(Puzzle):
    """Stores one value per cell in a tuple."""

    __slots__ = ("_cells",)

    def __init__(self, width: int, source: Sequence[int]) -> None:
        check_arrangement(width, source)
        super().__init__(width)
        self._cells = tuple(source)

    @classmethod
    def _trusted(cls, width: int, values: Sequence[int]) -> ArrayPuzzle:
        obj = object.__new__(cls)
        obj._width = width
        obj._cells = tuple(values)
        return obj

    @property
    def length(self) -> int:
        return len(self._cells)

    def __getitem__(self, index: int) -> int:
        require_index(index, len(self._cells), "index")
        return self._cells[index]

    def index_of(self, value: int) -> int:
        require_index(value, len(self._cells), "value")
        return self._cells.index(value)

    @property
    def values(self) -> tuple[int, ...]:
        return self._cells

    def clone(self) -> ArrayPuzzle:
        return ArrayPuzzle._trusted(self._width, self._cells)

    def _new_with_values(self, values: Sequence[int]) -> ArrayPuzzle:
        return ArrayPuzzle._trusted(self._width, values)

    def _content_key(self) -> tuple[int, ...]:
        return self._cells
