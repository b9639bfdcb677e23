"""Point type alias and coordinate helpers.

Coordinates are ``(row, col)`` pairs, 0-based, with ``(0, 0)`` in the
top-left corner. Users type 1-based coordinates; :func:`from_user`
translates them.
"""

from __future__ import annotations

from typing import TypeAlias

Point: TypeAlias = tuple[int, int]

MIN_SIZE = 8
MAX_SIZE = 19

# up, down, left, right
ORTHOGONAL: tuple[Point, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))

# Forward-only line directions: horizontal, vertical, main diagonal, anti-diagonal.
LINE_DIRECTIONS: tuple[Point, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


def is_valid_size(size: int) -> bool:
    """Whether *size* is an allowed board dimension."""
    return MIN_SIZE <= size <= MAX_SIZE


def in_bounds(row: int, col: int, size: int) -> bool:
    return 0 <= row < size and 0 <= col < size


def neighbours(point: Point, size: int) -> list[Point]:
    """Orthogonal neighbours of *point* that lie on a ``size`` board."""
    row, col = point
    return [
        (row + dr, col + dc)
        for dr, dc in ORTHOGONAL
        if in_bounds(row + dr, col + dc, size)
    ]


def from_user(row_text: str, col_text: str) -> Point:
    """Parse 1-based user input, e.g. ``("3", "4")`` -> ``(2, 3)``."""
    try:
        row, col = int(row_text), int(col_text)
    except ValueError:
        raise ValueError(
            f"Invalid coordinates: {row_text!r} {col_text!r}"
        ) from None
    return row - 1, col - 1
