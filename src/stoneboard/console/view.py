"""ConsoleView - text rendering of the board, status and message lines."""

from __future__ import annotations

from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.gomoku import find_five
from stoneboard.core.grid import Grid
from stoneboard.core.piece import glyph
from stoneboard.core.types import Point
from stoneboard.game.interfaces import BoardRows, IGameSink
from stoneboard.i18n import t

_TITLE = "=== Stoneboard ==="
_WIN_MARK = "*"


class ConsoleView(IGameSink):
    """Keeps the latest notifications and composes them into a screen."""

    def __init__(self, *, show_hints: bool = True, ascii_only: bool = False) -> None:
        self._rows: BoardRows = ()
        self._size = 0
        self._variant: GameVariant | None = None
        self._winning_line: frozenset[Point] = frozenset()
        self._message = ""
        self._status = t().status_no_game
        self._show_hints = show_hints
        self._ascii_only = ascii_only

    # ── IGameSink impl ───────────────────────────────────────────────────

    def on_board_update(self, rows: BoardRows, size: int) -> None:
        self._rows = rows
        self._size = size
        self._winning_line = frozenset()

    def on_message(self, text: str) -> None:
        self._message = text

    def on_game_over(self, winner: Side) -> None:
        self._status = t().status_game_over.format(side=t().side_name(winner))
        if self._variant == GameVariant.GOMOKU and self._size:
            side, line = find_five(Grid.from_rows(self._rows))
            if side == winner:
                self._winning_line = frozenset(line)

    # ── Controls ─────────────────────────────────────────────────────────

    @property
    def show_hints(self) -> bool:
        return self._show_hints

    @property
    def message(self) -> str:
        return self._message

    @property
    def status(self) -> str:
        return self._status

    def set_game(self, variant: GameVariant) -> None:
        self._variant = variant
        self._winning_line = frozenset()
        self._status = t().status_game.format(name=t().game_name(variant))

    def toggle_hints(self) -> bool:
        self._show_hints = not self._show_hints
        return self._show_hints

    # ── Rendering ────────────────────────────────────────────────────────

    def render_board(self) -> list[str]:
        """Board lines; a finished five-in-a-row is marked with ``*``."""
        if not self._size:
            return []
        lines = ["   " + "".join(f"{col + 1:>2}" for col in range(self._size))]
        for index, row in enumerate(self._rows):
            cells = "".join(
                self._cell(index, col, cell) for col, cell in enumerate(row)
            )
            lines.append(f"{index + 1:>2} {cells}")
        return lines

    def _cell(self, row: int, col: int, cell: int) -> str:
        mark = glyph(Side(cell), ascii_only=self._ascii_only)
        if (row, col) in self._winning_line:
            return _WIN_MARK + mark
        return f"{mark:>2}"

    def render(self) -> str:
        lines = [_TITLE, self._status]
        lines.extend(self.render_board())
        if self._show_hints and self._message:
            lines.append(t().message_prefix.format(msg=self._message))
        return "\n".join(lines)
