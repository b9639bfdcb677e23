"""Typed failures raised by the rule engine.

Every operation validates before it mutates, so a raised error always
leaves the match exactly as it was.
"""

from __future__ import annotations


class GameError(Exception):
    """Base class for all engine errors."""


class OutOfRange(GameError, IndexError):
    """Coordinate (or board size) outside the permitted range."""


class IllegalMove(GameError):
    """Target cell is occupied or the variant's rule forbids the move."""


class InvalidOperation(GameError):
    """Operation not supported in the current context (e.g. pass in Gomoku)."""


class EmptyHistory(GameError):
    """Undo requested with nothing to undo."""


class MalformedSave(GameError, ValueError):
    """Persisted snapshot text, or a restored snapshot, is inconsistent."""
