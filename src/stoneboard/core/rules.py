"""Variant rule dispatch: move legality, post-move effects, outcome."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from stoneboard.core import go, gomoku
from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import InvalidOperation
from stoneboard.core.grid import Grid
from stoneboard.core.types import Point

LegalityCheck = Callable[[int, int, Grid], bool]
OutcomeCheck = Callable[[Grid, bool], "Outcome"]
PostMoveEffect = Callable[[Grid, Point], list[list[Point]]]


@dataclass(frozen=True, slots=True)
class Outcome:
    """Result of evaluating a grid: the winner (or ``Side.NONE``) and detail."""

    winner: Side = Side.NONE
    detail: str = ""

    @property
    def is_decided(self) -> bool:
        return self.winner != Side.NONE


NO_OUTCOME = Outcome()


def _gomoku_outcome(grid: Grid, force_settlement: bool) -> Outcome:
    del force_settlement  # every move is checked, settlement means nothing here
    return Outcome(gomoku.winner(grid))


def _go_outcome(grid: Grid, force_settlement: bool) -> Outcome:
    if not force_settlement:
        return NO_OUTCOME
    result = go.score(grid)
    return Outcome(result.winner, result.describe())


def _no_effect(grid: Grid, point: Point) -> list[list[Point]]:
    del grid, point
    return []


# Two independent legality functions so each variant's rules can evolve
# separately (ko / suicide for Go would only touch go.is_legal).
_LEGALITY: dict[GameVariant, LegalityCheck] = {
    GameVariant.GOMOKU: gomoku.is_legal,
    GameVariant.GO: go.is_legal,
}

_OUTCOME: dict[GameVariant, OutcomeCheck] = {
    GameVariant.GOMOKU: _gomoku_outcome,
    GameVariant.GO: _go_outcome,
}

_POST_MOVE: dict[GameVariant, PostMoveEffect] = {
    GameVariant.GOMOKU: _no_effect,
    GameVariant.GO: go.capture_around,
}


def _lookup(table: dict[GameVariant, Callable], variant: GameVariant) -> Callable:
    try:
        return table[variant]
    except KeyError:
        raise InvalidOperation(f"Unsupported game variant: {variant!r}") from None


class Rules:
    """Static rule-checker over the closed set of game variants."""

    @staticmethod
    def is_legal(variant: GameVariant, row: int, col: int, grid: Grid) -> bool:
        """Whether the side to move may place a stone at ``(row, col)``.

        Bounds are the caller's concern; this only applies the variant rule.
        """
        return _lookup(_LEGALITY, variant)(row, col, grid)

    @staticmethod
    def post_move(
        variant: GameVariant, grid: Grid, point: Point
    ) -> list[list[Point]]:
        """Apply variant side effects of the stone just placed at *point*.

        Returns the cleared points, one list per captured Go group.
        """
        return _lookup(_POST_MOVE, variant)(grid, point)

    @staticmethod
    def evaluate(
        variant: GameVariant, grid: Grid, force_settlement: bool = False
    ) -> Outcome:
        """Decide whether the game is over.

        Gomoku ignores *force_settlement* and looks for five in a row.
        Go never decides mid-game; with *force_settlement* it scores the
        board and reports the breakdown in ``Outcome.detail``.
        """
        return _lookup(_OUTCOME, variant)(grid, force_settlement)
