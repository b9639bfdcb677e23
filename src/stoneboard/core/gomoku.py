"""Five-in-a-row detection."""

from __future__ import annotations

from stoneboard.core.enums import Side
from stoneboard.core.grid import Grid
from stoneboard.core.types import LINE_DIRECTIONS, Point

WIN_LENGTH = 5


def is_legal(row: int, col: int, grid: Grid) -> bool:
    """A Gomoku stone may go on any empty cell."""
    return grid.is_empty(row, col)


def find_five(grid: Grid) -> tuple[Side, list[Point]]:
    """Scan the whole grid for five same-side stones in a line.

    Row-major over every occupied cell, probing the four directions forward
    only, so each line is seen from its first stone. Returns the first line
    found as ``(side, points)``, or ``(Side.NONE, [])``.
    """
    size = grid.size
    for row, col in grid.points():
        side = grid.get(row, col)
        if side == Side.NONE:
            continue
        for dr, dc in LINE_DIRECTIONS:
            end_row = row + dr * (WIN_LENGTH - 1)
            end_col = col + dc * (WIN_LENGTH - 1)
            if not (0 <= end_row < size and 0 <= end_col < size):
                continue
            line = [(row + dr * k, col + dc * k) for k in range(WIN_LENGTH)]
            if all(grid[p] == side for p in line[1:]):
                return side, line
    return Side.NONE, []


def winner(grid: Grid) -> Side:
    return find_five(grid)[0]
