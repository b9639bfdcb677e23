"""Console command dispatcher.

``AppState`` is the one application-state value: it owns the optional
engine and the view, and turns text commands into engine calls.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from stoneboard.console.view import ConsoleView
from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import (
    GameError,
    InvalidOperation,
    MalformedSave,
    OutOfRange,
)
from stoneboard.core.notation import snapshot_from_text, snapshot_to_text
from stoneboard.core.types import MAX_SIZE, MIN_SIZE, from_user, is_valid_size
from stoneboard.game.engine import GameEngine
from stoneboard.i18n import t
from stoneboard.settings import AppSettings

_LOGGER = logging.getLogger(__name__)
_CLEAR_SCREEN = "\033[2J\033[H"

Handler = Callable[[list[str]], None]


class AppState:
    """Holds the running match (if any) and dispatches console commands."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        view: ConsoleView | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.view = view or ConsoleView(
            show_hints=self.settings.show_hints,
            ascii_only=self.settings.ascii_board,
        )
        self.engine: GameEngine | None = None
        self.running = True
        self._finished = False
        self._handlers: dict[str, Handler] = {
            "start": self._cmd_start,
            "move": self._cmd_move,
            "pass": self._cmd_pass,
            "undo": self._cmd_undo,
            "resign": self._cmd_resign,
            "save": self._cmd_save,
            "load": self._cmd_load,
            "hint": self._cmd_hint,
            "help": self._cmd_help,
            "exit": self._cmd_exit,
            "quit": self._cmd_exit,
        }

    # ── Dispatch ─────────────────────────────────────────────────────────

    def handle(self, line: str) -> None:
        """Execute one command line; failures become view messages."""
        parts = line.split()
        if not parts:
            return
        cmd, args = parts[0].lower(), parts[1:]
        _LOGGER.debug("Command %r args=%r", cmd, args)

        try:
            handler = self._handlers.get(cmd)
            if handler is None:
                raise InvalidOperation(t().err_unknown_command.format(cmd=cmd))
            handler(args)
        except GameError as exc:
            _LOGGER.debug("Command %r rejected: %s", cmd, exc)
            self.view.on_message(t().error_prefix.format(msg=exc))

        if self._finished:
            self._end_game()

    def run(self, stdin: TextIO, stdout: TextIO) -> int:
        """Read-dispatch-render loop until ``exit`` or end of input."""
        self._render(stdout)
        for line in stdin:
            if not line.strip():
                continue
            self.handle(line)
            if not self.running:
                break
            self._render(stdout)
        return 0

    # ── Commands ─────────────────────────────────────────────────────────

    def _cmd_start(self, args: list[str]) -> None:
        if not args or len(args) > 2:
            raise InvalidOperation(
                t().err_usage.format(usage="start gomoku|go [8-19]")
            )
        try:
            variant = GameVariant.from_token(args[0])
        except ValueError:
            raise InvalidOperation(t().err_unknown_variant) from None
        size = self.settings.default_size
        if len(args) == 2:
            try:
                size = int(args[1])
            except ValueError:
                raise InvalidOperation(
                    t().err_usage.format(usage="start gomoku|go [8-19]")
                ) from None
        if not is_valid_size(size):
            raise OutOfRange(t().err_size_range.format(low=MIN_SIZE, high=MAX_SIZE))

        self._attach(GameEngine(variant, size))
        _LOGGER.info("Started %s on %dx%d", variant.token, size, size)

    def _cmd_move(self, args: list[str]) -> None:
        engine = self._require_engine()
        if len(args) != 2:
            raise InvalidOperation(t().err_usage.format(usage="move ROW COL"))
        try:
            row, col = from_user(args[0], args[1])
        except ValueError:
            raise InvalidOperation(t().err_usage.format(usage="move ROW COL")) from None
        engine.make_move(row, col)

    def _cmd_pass(self, args: list[str]) -> None:
        del args
        self._require_engine().pass_turn()

    def _cmd_undo(self, args: list[str]) -> None:
        del args
        self._require_engine().undo()

    def _cmd_resign(self, args: list[str]) -> None:
        del args
        self._require_engine().resign()

    def _cmd_save(self, args: list[str]) -> None:
        engine = self._require_engine()
        path = self._path_arg(args, "save FILE")
        try:
            path.write_text(snapshot_to_text(engine.snapshot()), encoding="utf-8")
        except OSError as exc:
            _LOGGER.warning("Saving to %s failed: %s", path, exc)
            raise InvalidOperation(
                t().err_write_failed.format(path=path, reason=exc.strerror or exc)
            ) from exc
        _LOGGER.info("Saved game to %s", path)
        self.view.on_message(t().saved.format(path=path))

    def _cmd_load(self, args: list[str]) -> None:
        path = self._path_arg(args, "load FILE")
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            _LOGGER.warning("Loading %s failed: %s", path, exc)
            raise InvalidOperation(
                t().err_read_failed.format(path=path, reason=exc.strerror or exc)
            ) from exc
        except UnicodeDecodeError as exc:
            _LOGGER.warning("Loading %s failed: %s", path, exc)
            raise MalformedSave(
                t().err_read_failed.format(path=path, reason=exc.reason)
            ) from exc

        engine = GameEngine.from_snapshot(snapshot_from_text(text))
        self._attach(engine)
        _LOGGER.info("Loaded %s game from %s", engine.variant.token, path)
        self.view.on_message(t().loaded.format(path=path))

    def _cmd_hint(self, args: list[str]) -> None:
        del args
        shown = self.view.toggle_hints()
        self.view.on_message(t().hints_on if shown else t().hints_off)

    def _cmd_help(self, args: list[str]) -> None:
        del args
        self.view.on_message(t().help_text)

    def _cmd_exit(self, args: list[str]) -> None:
        del args
        self.running = False

    # ── Internal helpers ─────────────────────────────────────────────────

    def _attach(self, engine: GameEngine) -> None:
        """Replace the current match with *engine* and announce it."""
        self.engine = engine
        self._finished = False
        engine.add_sink(self.view)
        engine.events.on_game_over.append(self._on_game_over)
        self.view.set_game(engine.variant)
        engine.refresh()

    def _on_game_over(self, winner: Side) -> None:
        _LOGGER.info("Game over, winner %s", winner.token)
        self._finished = True

    def _end_game(self) -> None:
        self.engine = None
        self._finished = False

    def _require_engine(self) -> GameEngine:
        if self.engine is None:
            raise InvalidOperation(t().err_no_game)
        return self.engine

    @staticmethod
    def _path_arg(args: list[str], usage: str) -> Path:
        if len(args) != 1:
            raise InvalidOperation(t().err_usage.format(usage=usage))
        return Path(args[0])

    def _render(self, stdout: TextIO) -> None:
        if self.settings.clear_screen:
            stdout.write(_CLEAR_SCREEN)
        stdout.write(self.view.render() + "\n")
        stdout.write(t().prompt)
        stdout.flush()
