"""Core enumerations for the board domain."""

from __future__ import annotations

from enum import IntEnum


class Side(IntEnum):
    """Cell occupant / player side.

    The integer values double as the cell codes of the save format.
    ``NONE`` marks an empty cell or "no winner"; it is never a player.
    """

    NONE = 0
    BLACK = 1
    WHITE = 2

    @property
    def opposite(self) -> Side:
        if self == Side.NONE:
            return Side.NONE
        return Side.WHITE if self == Side.BLACK else Side.BLACK

    @property
    def token(self) -> str:
        return self.name

    @classmethod
    def from_token(cls, token: str) -> Side:
        try:
            return cls[token]
        except KeyError:
            raise ValueError(f"Invalid side token: {token!r}") from None

    def __str__(self) -> str:
        return self.name


class GameVariant(IntEnum):
    """The two supported rule-sets."""

    GOMOKU = 0  # five in a row
    GO = 1  # territory / capture

    @property
    def token(self) -> str:
        return self.name

    @property
    def allows_pass(self) -> bool:
        return self == GameVariant.GO

    @classmethod
    def from_token(cls, token: str) -> GameVariant:
        try:
            return cls[token.upper()]
        except KeyError:
            raise ValueError(f"Invalid variant token: {token!r}") from None
