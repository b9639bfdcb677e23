"""Qt bridge exposing engine notifications as signals."""

from __future__ import annotations

from PyQt6.QtCore import QObject, pyqtSignal

from stoneboard.core.enums import Side
from stoneboard.game.engine import GameEngine
from stoneboard.game.interfaces import BoardRows


class GameSignals(QObject):
    """Engine sink that re-emits every notification as a Qt signal.

    Widgets connect to the signals instead of registering callbacks, so a
    GUI can observe an engine without the engine knowing about Qt.
    """

    board_changed = pyqtSignal(object, int)  # rows, size
    message = pyqtSignal(str)
    game_over = pyqtSignal(int)  # Side value

    def attach(self, engine: GameEngine) -> None:
        """Subscribe to *engine*'s events."""
        engine.events.on_board_changed.append(self.on_board_update)
        engine.events.on_message.append(self.on_message)
        engine.events.on_game_over.append(self.on_game_over)

    def detach(self, engine: GameEngine) -> None:
        """Remove every subscription made by :meth:`attach`."""
        _discard(engine.events.on_board_changed, self.on_board_update)
        _discard(engine.events.on_message, self.on_message)
        _discard(engine.events.on_game_over, self.on_game_over)

    # Same method names as IGameSink so the bridge fits anywhere a sink does.

    def on_board_update(self, rows: BoardRows, size: int) -> None:
        self.board_changed.emit(rows, size)

    def on_message(self, text: str) -> None:
        self.message.emit(text)

    def on_game_over(self, winner: Side) -> None:
        self.game_over.emit(int(winner))


def _discard(callbacks: list, callback: object) -> None:
    while callback in callbacks:
        callbacks.remove(callback)
