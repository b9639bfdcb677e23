"""Qt integration for GUI front ends.

Quick start::

    from stoneboard.game import GameEngine
    from stoneboard.ui import GameSignals

    signals = GameSignals()
    signals.attach(engine)
    signals.board_changed.connect(board_widget.set_rows)
"""

from stoneboard.ui.qt_bridge import GameSignals

__all__ = ["GameSignals"]
