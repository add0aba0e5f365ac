"""Bit-packed puzzle storage for boards of up to 16 cells."""

from __future__ import annotations

from collections.abc import Sequence

from backend.models.puzzle import COMPACT_MAX_LENGTH, Puzzle, check_arrangement
from backend.models.validation import require_argument, require_index

_BITS = 4
_MASK = (1 << _BITS) - 1


def _pack(values: Sequence[int]) -> int:
    data = 0
    for i, value in enumerate(values):
        data |= value << (i * _BITS)
    return data


class CompactPuzzle(Puzzle):
    """Stores every cell as a 4-bit field of a single int.

    Cell ``i`` lives in bits ``4*i .. 4*i + 3``.  Equality between two
    compact puzzles only touches that one int.
    """

    __slots__ = ("_length", "_data")

    def __init__(self, width: int, source: Sequence[int]) -> None:
        require_argument(
            len(source) <= COMPACT_MAX_LENGTH,
            "source",
            f"Compact storage holds at most {COMPACT_MAX_LENGTH} cells.",
        )
        check_arrangement(width, source)
        super().__init__(width)
        self._length = len(source)
        self._data = _pack(source)

    @classmethod
    def _from_packed(cls, width: int, length: int, data: int) -> CompactPuzzle:
        obj = object.__new__(cls)
        obj._width = width
        obj._length = length
        obj._data = data
        return obj

    @classmethod
    def _trusted(cls, width: int, values: Sequence[int]) -> CompactPuzzle:
        return cls._from_packed(width, len(values), _pack(values))

    @property
    def length(self) -> int:
        return self._length

    def __getitem__(self, index: int) -> int:
        require_index(index, self._length, "index")
        return (self._data >> (index * _BITS)) & _MASK

    def index_of(self, value: int) -> int:
        require_index(value, self._length, "value")
        data = self._data
        for index in range(self._length):
            if data & _MASK == value:
                return index
            data >>= _BITS
        raise AssertionError(f"{value} missing from a validated arrangement")

    @property
    def values(self) -> tuple[int, ...]:
        data = self._data
        return tuple((data >> (i * _BITS)) & _MASK for i in range(self._length))

    def clone(self) -> CompactPuzzle:
        return CompactPuzzle._from_packed(self._width, self._length, self._data)

    def _new_with_values(self, values: Sequence[int]) -> CompactPuzzle:
        return CompactPuzzle._trusted(self._width, values)

    def _content_key(self) -> int:
        return self._data
