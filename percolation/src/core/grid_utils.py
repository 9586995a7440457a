from __future__ import annotations

"""Coordinate helpers for 1-indexed ``n``-by-``n`` site grids."""

from numbers import Integral
from typing import Any, List, Tuple

from .errors import InvalidArgumentError

# up, down, left, right
_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def is_integer(value: Any) -> bool:
    """Return ``True`` for Python and numpy integers, excluding booleans."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_size(n: int) -> None:
    """Raise :class:`InvalidArgumentError` unless ``n`` is an integer >= 1."""
    if not is_integer(n):
        raise InvalidArgumentError(f"grid size must be an integer, got {n!r}")
    if n < 1:
        raise InvalidArgumentError(f"the grid must be at least 1x1, got n={n}")


def is_out_of_bounds(row: int, col: int, n: int) -> bool:
    """Return ``True`` if ``(row, col)`` lies outside ``[1, n] x [1, n]``."""
    return row < 1 or col < 1 or row > n or col > n


def validate_coordinates(row: int, col: int, n: int) -> None:
    """Raise :class:`InvalidArgumentError` if ``(row, col)`` is off the grid."""
    if not is_integer(row) or not is_integer(col):
        raise InvalidArgumentError(f"site coordinates must be integers, got ({row!r}, {col!r})")
    if is_out_of_bounds(row, col, n):
        raise InvalidArgumentError(
            f"site ({row}, {col}) is outside the {n}x{n} grid"
        )


def to_index(row: int, col: int, n: int) -> int:
    """Return the row-major flat index of 1-indexed site ``(row, col)``.

    ``(1, 1)`` maps to ``0`` and ``(n, n)`` maps to ``n * n - 1``.
    """
    return (row - 1) * n + (col - 1)


def neighbors(row: int, col: int, n: int) -> List[Tuple[int, int]]:
    """Return the in-bounds sites sharing an edge with ``(row, col)``."""
    result: List[Tuple[int, int]] = []
    for dr, dc in _OFFSETS:
        r, c = row + dr, col + dc
        if not is_out_of_bounds(r, c, n):
            result.append((r, c))
    return result


__all__ = [
    "is_integer",
    "validate_size",
    "is_out_of_bounds",
    "validate_coordinates",
    "to_index",
    "neighbors",
]
