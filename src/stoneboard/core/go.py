"""Go algorithms: groups, liberties, capture and area scoring.

All traversals use an explicit worklist so board size never runs into the
recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass

from stoneboard.core.enums import Side
from stoneboard.core.grid import Grid
from stoneboard.core.types import Point, neighbours
from stoneboard.i18n import t

KOMI = 3.75  # compensation added to White at settlement


def is_legal(row: int, col: int, grid: Grid) -> bool:
    """Simplified Go legality: the point must be empty (no ko, no suicide)."""
    return grid.is_empty(row, col)


def group_at(grid: Grid, point: Point) -> tuple[set[Point], set[Point]]:
    """Return the group containing *point* and its liberties.

    A liberty is counted once even when several stones touch it. An empty
    *point* yields two empty sets.
    """
    side = grid[point]
    if side == Side.NONE:
        return set(), set()

    stones: set[Point] = {point}
    liberties: set[Point] = set()
    stack = [point]
    while stack:
        current = stack.pop()
        for nb in neighbours(current, grid.size):
            occupant = grid[nb]
            if occupant == Side.NONE:
                liberties.add(nb)
            elif occupant == side and nb not in stones:
                stones.add(nb)
                stack.append(nb)
    return stones, liberties


def capture_around(grid: Grid, point: Point) -> list[list[Point]]:
    """Remove opposing groups left without liberties by the stone at *point*.

    Each adjacent opposing group is evaluated independently; a group already
    cleared by an earlier neighbour is simply found empty. Returns one sorted
    point list per removed group, in removal order. The placed stone's own
    group is never checked (no suicide rule).
    """
    mover = grid[point]
    opponent = mover.opposite
    captured: list[list[Point]] = []
    if opponent == Side.NONE:
        return captured

    for nb in neighbours(point, grid.size):
        if grid[nb] != opponent:
            continue
        stones, liberties = group_at(grid, nb)
        if liberties:
            continue
        group = sorted(stones)
        for stone in group:
            grid[stone] = Side.NONE
        captured.append(group)
    return captured


@dataclass(frozen=True, slots=True)
class Score:
    """Area-scoring breakdown for both sides."""

    black_stones: int
    white_stones: int
    black_territory: int
    white_territory: int
    komi: float = KOMI

    @property
    def black_total(self) -> float:
        return float(self.black_stones + self.black_territory)

    @property
    def white_total(self) -> float:
        return self.white_stones + self.white_territory + self.komi

    @property
    def winner(self) -> Side:
        # Ties go to White; there is no draw result.
        if self.black_total > self.white_total:
            return Side.BLACK
        return Side.WHITE

    def describe(self) -> str:
        """Two-line breakdown, e.g. ``Black: 12 (stones 7 + territory 5)``."""
        strings = t()
        black = strings.score_black.format(
            total=_fmt(self.black_total),
            stones=self.black_stones,
            territory=self.black_territory,
        )
        white = strings.score_white.format(
            total=_fmt(self.white_total),
            stones=self.white_stones,
            territory=self.white_territory,
            komi=_fmt(self.komi),
        )
        return f"{black}\n{white}"


def _fmt(value: float) -> str:
    return f"{value:g}"


def territory(grid: Grid) -> tuple[int, int]:
    """Flood-fill every empty region once; return ``(black, white)`` area.

    A region counts for a side only when it borders that side's stones and
    never the other's.
    """
    visited: set[Point] = set()
    black = white = 0
    for start in grid.points():
        if grid[start] != Side.NONE or start in visited:
            continue
        visited.add(start)
        region = 0
        touches_black = touches_white = False
        queue = [start]
        head = 0
        while head < len(queue):
            current = queue[head]
            head += 1
            region += 1
            for nb in neighbours(current, grid.size):
                occupant = grid[nb]
                if occupant == Side.BLACK:
                    touches_black = True
                elif occupant == Side.WHITE:
                    touches_white = True
                elif nb not in visited:
                    visited.add(nb)
                    queue.append(nb)
        if touches_black and not touches_white:
            black += region
        elif touches_white and not touches_black:
            white += region
    return black, white


def score(grid: Grid, komi: float = KOMI) -> Score:
    """Stones plus surrounded territory, komi to White."""
    black_area, white_area = territory(grid)
    return Score(
        black_stones=grid.count(Side.BLACK),
        white_stones=grid.count(Side.WHITE),
        black_territory=black_area,
        white_territory=white_area,
        komi=komi,
    )
