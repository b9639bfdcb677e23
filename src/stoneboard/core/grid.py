"""Grid - square matrix of cell occupancy."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from stoneboard.core.enums import Side
from stoneboard.core.errors import OutOfRange
from stoneboard.core.piece import glyph
from stoneboard.core.types import Point, in_bounds


class Grid:
    """Mutable N x N board. Dimensions are fixed at construction."""

    __slots__ = ("_size", "_cells")

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise OutOfRange(f"Grid size must be positive, got {size}")
        self._size = size
        self._cells: list[list[Side]] = [[Side.NONE] * size for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    # -- Element access -----------------------------------------------------

    def in_bounds(self, row: int, col: int) -> bool:
        return in_bounds(row, col, self._size)

    def get(self, row: int, col: int) -> Side:
        self._check(row, col)
        return self._cells[row][col]

    def set(self, row: int, col: int, side: Side) -> None:
        self._check(row, col)
        self._cells[row][col] = Side(side)

    def __getitem__(self, point: Point) -> Side:
        return self.get(*point)

    def __setitem__(self, point: Point, side: Side) -> None:
        self.set(point[0], point[1], side)

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) == Side.NONE

    def _check(self, row: int, col: int) -> None:
        if not in_bounds(row, col, self._size):
            raise OutOfRange(
                f"({row}, {col}) is outside a {self._size}x{self._size} grid"
            )

    # -- Query helpers ------------------------------------------------------

    def points(self) -> Iterator[Point]:
        """All coordinates in row-major order."""
        for row in range(self._size):
            for col in range(self._size):
                yield row, col

    def count(self, side: Side) -> int:
        return sum(row.count(side) for row in self._cells)

    def rows(self) -> tuple[tuple[int, ...], ...]:
        """Immutable integer view (0 empty, 1 black, 2 white)."""
        return tuple(tuple(int(cell) for cell in row) for row in self._cells)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Grid:
        g = Grid.__new__(Grid)
        g._size = self._size
        g._cells = [row.copy() for row in self._cells]
        return g

    # -- Factory ------------------------------------------------------------

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[int]]) -> Grid:
        """Build a grid from integer rows; raises ``ValueError`` on bad shape."""
        data = [[Side(int(cell)) for cell in row] for row in rows]
        size = len(data)
        if size == 0 or any(len(row) != size for row in data):
            raise ValueError("Grid rows must form a non-empty square")
        g = cls(size)
        g._cells = data
        return g

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and self._cells == other._cells

    def __repr__(self) -> str:
        return "\n".join(
            " ".join(glyph(cell, ascii_only=True) for cell in row)
            for row in self._cells
        )
