"""Snapshot - immutable value copy of a match state."""

from __future__ import annotations

from dataclasses import dataclass

from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import MalformedSave
from stoneboard.core.grid import Grid


@dataclass(frozen=True, slots=True)
class Snapshot:
    """Everything needed to put a match back exactly as it was.

    ``rows`` is a tuple of integer tuples, so a snapshot shares no mutable
    state with the grid it was taken from.
    """

    variant: GameVariant
    size: int
    side_to_move: Side
    pass_count: int
    rows: tuple[tuple[int, ...], ...]

    @classmethod
    def capture(
        cls,
        variant: GameVariant,
        grid: Grid,
        side_to_move: Side,
        pass_count: int,
    ) -> Snapshot:
        return cls(variant, grid.size, side_to_move, pass_count, grid.rows())

    def validate(self) -> None:
        """Raise :class:`MalformedSave` if the snapshot is inconsistent."""
        if len(self.rows) != self.size:
            raise MalformedSave(
                f"Snapshot has {len(self.rows)} rows, expected {self.size}"
            )
        for index, row in enumerate(self.rows):
            if len(row) != self.size:
                raise MalformedSave(
                    f"Snapshot row {index} has {len(row)} cells, expected {self.size}"
                )
            for cell in row:
                if cell not in (0, 1, 2):
                    raise MalformedSave(f"Invalid cell value {cell!r} in row {index}")
        if self.side_to_move == Side.NONE:
            raise MalformedSave("Snapshot has no side to move")
        if not 0 <= self.pass_count < 2:
            raise MalformedSave(f"Invalid pass count: {self.pass_count}")

    def to_grid(self) -> Grid:
        """A fresh, independent :class:`Grid` holding the snapshot's cells."""
        return Grid.from_rows(self.rows)
