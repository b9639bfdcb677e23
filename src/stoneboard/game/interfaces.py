"""Abstract interfaces for the game layer.

The engine depends on these ABCs, not on any concrete console or Qt view.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from stoneboard.core.enums import Side

BoardRows = tuple[tuple[int, ...], ...]


class IGameSink(ABC):
    """Receives engine notifications. Calls are synchronous."""

    @abstractmethod
    def on_board_update(self, rows: BoardRows, size: int) -> None:
        """The grid changed; *rows* is an immutable copy."""

    @abstractmethod
    def on_message(self, text: str) -> None:
        """Informational text for the player."""

    @abstractmethod
    def on_game_over(self, winner: Side) -> None:
        """The match has been decided in favour of *winner*."""


class IGameEngine(ABC):
    """Interface for the match orchestrator."""

    @abstractmethod
    def make_move(self, row: int, col: int) -> None:
        """Place the side-to-move's stone at 0-based ``(row, col)``."""

    @abstractmethod
    def pass_turn(self) -> None:
        """Pass (Go only)."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the last move or pass."""

    @abstractmethod
    def resign(self) -> None:
        """The side to move resigns."""
