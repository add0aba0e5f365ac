"""Fail-fast argument and index checks."""

from __future__ import annotations

from typing import Any


def require_argument(condition: bool, name: str, message: str, value: Any = None) -> None:
    """Raise ``ValueError`` for a bad caller-supplied argument.

    Example::

        require_argument(width >= 3, "width", "Must be at least 3.", width)
    """
    if not condition:
        suffix = f" Got {value!r}." if value is not None else ""
        raise ValueError(f"Invalid argument ({name}): {message}{suffix}")


def require_index(index: int, limit: int, name: str) -> int:
    """Return *index* if it lies in ``[0, limit)``, else raise ``IndexError``."""
    if not 0 <= index < limit:
        raise IndexError(f"{name} {index} out of range [0, {limit}).")
    return index
