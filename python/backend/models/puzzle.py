"""Puzzle model for the sliding puzzle.

A puzzle is an immutable permutation of ``0 .. length - 1`` laid out row-major
on a ``width``-wide grid.  The largest value (``tile_count``) marks the open
cell.  Every move returns a new puzzle, so instances can be used as dict keys
and set members.
"""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence

from backend.models.fitness import count_incorrect_tiles, fitness_score
from backend.models.point import Point
from backend.models.solvability import is_solvable
from backend.models.validation import require_argument, require_index

MIN_WIDTH = 3
MIN_LENGTH = 6
# Largest board whose values all fit in 4 bits.
COMPACT_MAX_LENGTH = 16


class Puzzle(ABC):
    """Storage-independent puzzle contract.

    Concrete strategies only provide indexed access, value lookup and
    construction of a sibling from new values; everything else is derived.
    Build instances through the factory class methods, which pick the
    strategy from the board size.
    """

    __slots__ = ("_width",)

    def __init__(self, width: int) -> None:
        self._width = width

    # -- storage contract -----------------------------------------------------

    @property
    @abstractmethod
    def length(self) -> int: ...

    @abstractmethod
    def __getitem__(self, index: int) -> int: ...

    @abstractmethod
    def index_of(self, value: int) -> int: ...

    @property
    @abstractmethod
    def values(self) -> tuple[int, ...]:
        """The arrangement, row-major."""

    @abstractmethod
    def clone(self) -> Puzzle: ...

    @abstractmethod
    def _new_with_values(self, values: Sequence[int]) -> Puzzle: ...

    @abstractmethod
    def _content_key(self) -> object: ...

    # -- construction helpers -------------------------------------------------

    @staticmethod
    def _from_values(width: int, values: Sequence[int]) -> Puzzle:
        from backend.models.puzzle_array import ArrayPuzzle
        from backend.models.puzzle_compact import CompactPuzzle

        if len(values) <= COMPACT_MAX_LENGTH:
            return CompactPuzzle._trusted(width, values)
        return ArrayPuzzle._trusted(width, values)

    @classmethod
    def raw(cls, width: int, source: Sequence[int]) -> Puzzle:
        """Create a puzzle from a row-major arrangement.

        Example::

            Puzzle.raw(3, [1, 2, 0, 3, 4, 5])
        """
        check_arrangement(width, source)
        return Puzzle._from_values(width, source)

    @classmethod
    def solved(cls, width: int, height: int) -> Puzzle:
        """Return the goal arrangement (values in order, open cell last)."""
        return cls.raw(width, list(range(width * height)))

    @classmethod
    def create(cls, width: int, height: int) -> Puzzle:
        """Return a lightly scrambled default board.

        Slides the first tile of the bottom row across, then tile ``0`` down.
        """
        puzzle = cls.solved(width, height)
        return puzzle._click_value((height - 1) * width)._click_value(0)

    @classmethod
    def parse(cls, text: str) -> Puzzle:
        """Parse whitespace-separated integers, one row per line.

        Example::

            Puzzle.parse("0 1 2\\n3 4 5")
        """
        rows: list[list[int]] = []
        for line in text.splitlines():
            if not line.strip():
                continue
            try:
                rows.append([int(token) for token in line.split()])
            except ValueError:
                raise ValueError(f"Cannot parse puzzle row {line.strip()!r}.") from None

        require_argument(bool(rows), "text", "Contains no rows.")
        width = len(rows[0])
        for row in rows:
            require_argument(
                len(row) == width, "text", f"Every row must have {width} values.", row
            )
        return cls.raw(width, [v for row in rows for v in row])

    # -- queries --------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self.length // self._width

    @property
    def tile_count(self) -> int:
        """Number of real tiles; also the value of the open cell."""
        return self.length - 1

    def value_at(self, x: int, y: int) -> int:
        return self[self._get_index(x, y)]

    def coordinates_of(self, value: int) -> Point:
        index = self.index_of(value)
        return Point(index % self._width, index // self._width)

    def open_position(self) -> Point:
        return self.coordinates_of(self.tile_count)

    def open_index(self) -> int:
        return self.index_of(self.tile_count)

    def is_correct_position(self, value: int) -> bool:
        return self[value] == value

    @property
    def incorrect_tiles(self) -> int:
        return count_incorrect_tiles(self.values)

    @property
    def fitness(self) -> int:
        """Distance-to-solved score; ``0`` means solved."""
        return fitness_score(self._width, self.values)

    @property
    def solvable(self) -> bool:
        return is_solvable(self._width, self.values)

    def clickable_values(self, vertical: bool | None = None) -> list[int]:
        """Values sharing a row (``vertical=False``), a column (``True``)
        or either (``None``) with the open cell."""
        open_x, open_y = self.open_position()
        values: list[int] = []

        if vertical is None or not vertical:
            values.extend(self.value_at(x, open_y) for x in range(self._width) if x != open_x)
        if vertical is None or vertical:
            values.extend(self.value_at(open_x, y) for y in range(self.height) if y != open_y)
        return values

    # -- moves ----------------------------------------------------------------

    def click_value(self, tile_value: int) -> Puzzle | None:
        """Slide *tile_value* toward the open cell.

        Returns the resulting puzzle, or ``None`` if the tile is not in the
        open cell's row or column.
        """
        if not self._movable(tile_value):
            return None
        return self._click_value(tile_value)

    def click_random(
        self, vertical: bool | None = None, rng: random.Random | None = None
    ) -> Puzzle | None:
        rng = rng or random.Random()
        return self.click_value(rng.choice(self.clickable_values(vertical)))

    def all_movable(self, rng: random.Random | None = None) -> Iterator[Puzzle]:
        """Yield every puzzle one click away, in random order."""
        clickable = self.clickable_values()
        (rng or random.Random()).shuffle(clickable)
        return (self._click_value(value) for value in clickable)

    def reset(
        self, source: Sequence[int] | None = None, rng: random.Random | None = None
    ) -> Puzzle:
        """Return a puzzle of the same size with a new arrangement.

        With no *source* the arrangement is random, solvable, and moves every
        tile away from both its solved cell and its current cell.
        """
        if source is None:
            data = _randomize_values(self._width, self.values, rng or random.Random())
        else:
            data = list(source)

        require_argument(len(data) == self.length, "source", "Cannot change the size!")
        _validate(data)
        require_argument(is_solvable(self._width, data), "source", "Not a solvable puzzle.", data)
        return self._new_with_values(data)

    # -- helpers --------------------------------------------------------------

    def _get_index(self, x: int, y: int) -> int:
        require_index(x, self._width, "x")
        require_index(y, self.height, "y")
        return x + y * self._width

    def _movable(self, tile_value: int) -> bool:
        if tile_value == self.tile_count:
            return False
        target = self.coordinates_of(tile_value)
        open_ = self.open_position()
        return open_.x == target.x or open_.y == target.y

    def _click_value(self, tile_value: int) -> Puzzle:
        assert self._movable(tile_value)
        target = self.coordinates_of(tile_value)
        x, y = self.open_position()
        step_x = (target.x > x) - (target.x < x)
        step_y = (target.y > y) - (target.y < y)

        # Walk the open cell to the target; each tile passed shifts one step back.
        data = list(self.values)
        while (x, y) != target:
            nx, ny = x + step_x, y + step_y
            a, b = x + y * self._width, nx + ny * self._width
            data[a], data[b] = data[b], data[a]
            x, y = nx, ny
        return self._new_with_values(data)

    # -- dunder ---------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Puzzle):
            return NotImplemented
        if self._width != other._width:
            return False
        if type(other) is type(self):
            return self._content_key() == other._content_key()
        return self.values == other.values

    def __hash__(self) -> int:
        return hash((self._width, self.values))

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        return f"{type(self).__name__}(width={self._width}, values={list(self.values)})"

    def __str__(self) -> str:
        grid = [
            [str(self.value_at(x, y)) for x in range(self._width)]
            for y in range(self.height)
        ]
        longest = max(len(cell) for row in grid for cell in row)
        return "\n".join(" ".join(cell.rjust(longest) for cell in row) for row in grid)


def check_arrangement(width: int, source: Sequence[int]) -> None:
    """Reject a width or arrangement no storage strategy may hold."""
    require_argument(width >= MIN_WIDTH, "width", f"Must be at least {MIN_WIDTH}.", width)
    require_argument(
        len(source) >= MIN_LENGTH, "source", f"Must be at least {MIN_LENGTH} items."
    )
    require_argument(
        len(source) % width == 0,
        "source",
        f"Length {len(source)} is not a multiple of width {width}.",
    )
    _validate(source)


def _validate(source: Sequence[int]) -> None:
    require_argument(
        sorted(source) == list(range(len(source))),
        "source",
        "Must contain each number from 0 to `length - 1` once and only once.",
        list(source),
    )


def _randomize_values(width: int, existing: Sequence[int], rng: random.Random) -> list[int]:
    copy = list(existing)
    while True:
        rng.shuffle(copy)
        if not is_solvable(width, copy):
            continue
        if all(v != i and v != existing[i] for i, v in enumerate(copy)):
            return copy
