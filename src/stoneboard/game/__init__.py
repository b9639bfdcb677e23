"""Game management layer - engine, match state, undo history, sinks.

Quick start::

    from stoneboard.core import GameVariant
    from stoneboard.game import GameEngine

    engine = GameEngine(GameVariant.GO, 9)
    engine.events.on_message.append(print)
    engine.make_move(4, 4)
"""

from stoneboard.game.engine import GameEngine, GameEvents
from stoneboard.game.history import History
from stoneboard.game.interfaces import BoardRows, IGameEngine, IGameSink
from stoneboard.game.state import MatchState

__all__ = [
    # Interfaces
    "BoardRows",
    "IGameEngine",
    "IGameSink",
    # Concrete
    "GameEngine",
    "GameEvents",
    "History",
    "MatchState",
]
