"""Core domain layer - pure board rules with zero external dependencies.

Quick start::

    from stoneboard.core import GameVariant, Grid, Rules, Side

    grid = Grid(15)
    grid[(7, 7)] = Side.BLACK
    outcome = Rules.evaluate(GameVariant.GOMOKU, grid)
"""

from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import (
    EmptyHistory,
    GameError,
    IllegalMove,
    InvalidOperation,
    MalformedSave,
    OutOfRange,
)
from stoneboard.core.go import KOMI, Score
from stoneboard.core.grid import Grid
from stoneboard.core.notation import snapshot_from_text, snapshot_to_text
from stoneboard.core.piece import glyph
from stoneboard.core.rules import Outcome, Rules
from stoneboard.core.snapshot import Snapshot
from stoneboard.core.types import (
    MAX_SIZE,
    MIN_SIZE,
    Point,
    from_user,
    is_valid_size,
)

__all__ = [
    # Enums
    "GameVariant",
    "Side",
    # Errors
    "EmptyHistory",
    "GameError",
    "IllegalMove",
    "InvalidOperation",
    "MalformedSave",
    "OutOfRange",
    # Types / helpers
    "MAX_SIZE",
    "MIN_SIZE",
    "Point",
    "from_user",
    "glyph",
    "is_valid_size",
    # Domain objects
    "Grid",
    "KOMI",
    "Outcome",
    "Rules",
    "Score",
    "Snapshot",
    # Save format
    "snapshot_from_text",
    "snapshot_to_text",
]
