"""MatchState - the mutable aggregate owned by one engine."""

from __future__ import annotations

from dataclasses import dataclass

from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import MalformedSave
from stoneboard.core.grid import Grid
from stoneboard.core.snapshot import Snapshot


@dataclass
class MatchState:
    """Grid, side to move and consecutive-pass counter for one match.

    The variant is fixed for the match's lifetime.
    """

    variant: GameVariant
    grid: Grid
    side_to_move: Side = Side.BLACK
    pass_count: int = 0

    @classmethod
    def fresh(cls, variant: GameVariant, size: int) -> MatchState:
        """Empty board, Black to move, no passes."""
        return cls(variant, Grid(size))

    @property
    def size(self) -> int:
        return self.grid.size

    def switch_side(self) -> None:
        self.side_to_move = self.side_to_move.opposite

    def snapshot(self) -> Snapshot:
        return Snapshot.capture(
            self.variant, self.grid, self.side_to_move, self.pass_count
        )

    def restore(self, snapshot: Snapshot) -> None:
        """Overwrite every field by value from *snapshot*.

        The snapshot is validated first, so a rejected one leaves the state
        untouched.
        """
        snapshot.validate()
        if snapshot.variant != self.variant:
            raise MalformedSave(
                f"Cannot restore a {snapshot.variant.token} snapshot "
                f"into a {self.variant.token} match"
            )
        self.grid = snapshot.to_grid()
        self.side_to_move = snapshot.side_to_move
        self.pass_count = snapshot.pass_count
