"""Tests for the console command dispatcher."""

import io
from pathlib import Path

from stoneboard.console.controller import AppState
from stoneboard.core.enums import GameVariant, Side
from stoneboard.settings import AppSettings


def _app(**overrides: object) -> AppState:
    settings = AppSettings(clear_screen=False, **overrides)  # type: ignore[arg-type]
    return AppState(settings)


class TestStart:
    def test_start_go(self) -> None:
        app = _app()
        app.handle("start go 9")
        assert app.engine is not None
        assert app.engine.variant == GameVariant.GO
        assert app.engine.size == 9
        assert app.view.status == "Current game: <Go>"
        assert app.view.message == "Current turn: BLACK"

    def test_default_size(self) -> None:
        app = _app(default_size=13)
        app.handle("start gomoku")
        assert app.engine is not None
        assert app.engine.size == 13

    def test_size_out_of_range(self) -> None:
        app = _app()
        app.handle("start go 7")
        assert app.engine is None
        assert app.view.message == "Error: Board size must be between 8 and 19"

    def test_unknown_variant(self) -> None:
        app = _app()
        app.handle("start chess 8")
        assert app.engine is None
        assert app.view.message.startswith("Error: Unknown game type")

    def test_missing_arguments(self) -> None:
        app = _app()
        app.handle("start")
        assert app.view.message.startswith("Error: Usage:")


class TestPlay:
    def test_move_uses_one_based_coordinates(self) -> None:
        app = _app()
        app.handle("start go 9")
        app.handle("move 1 1")
        assert app.engine is not None
        assert app.engine.grid[(0, 0)] == Side.BLACK

    def test_move_off_board(self) -> None:
        app = _app()
        app.handle("start go 9")
        app.handle("move 0 5")
        assert app.view.message.startswith("Error:")
        assert app.engine is not None
        assert not app.engine.can_undo

    def test_move_bad_numbers(self) -> None:
        app = _app()
        app.handle("start go 9")
        app.handle("move a b")
        assert app.view.message == "Error: Usage: move ROW COL"

    def test_commands_without_game(self) -> None:
        app = _app()
        for cmd in ("move 1 1", "pass", "undo", "resign", "save x.txt"):
            app.handle(cmd)
            assert app.view.message == "Error: No game in progress"

    def test_pass_in_gomoku(self) -> None:
        app = _app()
        app.handle("start gomoku 8")
        app.handle("pass")
        assert app.view.message == "Error: Passing is not allowed in Gomoku"
        assert app.engine is not None

    def test_undo_with_empty_history(self) -> None:
        app = _app()
        app.handle("start go 8")
        app.handle("undo")
        assert app.view.message == "Error: Nothing to undo"

    def test_unknown_command(self) -> None:
        app = _app()
        app.handle("dance")
        assert app.view.message == "Error: Unknown command: dance"

    def test_blank_line_ignored(self) -> None:
        app = _app()
        app.handle("   ")
        assert app.view.message == ""


class TestGameOver:
    def test_resign_drops_engine(self) -> None:
        app = _app()
        app.handle("start go 9")
        app.handle("resign")
        assert app.engine is None
        assert app.view.status == "Game over (winner: WHITE)"

    def test_gomoku_win_drops_engine(self) -> None:
        app = _app()
        app.handle("start gomoku 8")
        for col in range(4):
            app.handle(f"move 1 {col + 1}")
            app.handle(f"move 8 {col + 1}")
        app.handle("move 1 5")
        assert app.engine is None
        assert app.view.status == "Game over (winner: BLACK)"
        assert app.view.render_board()[1].startswith(" 1 *●*●*●*●*●")
        app.handle("move 2 2")
        assert app.view.message == "Error: No game in progress"

    def test_settlement_drops_engine(self) -> None:
        app = _app()
        app.handle("start go 8")
        app.handle("pass")
        app.handle("pass")
        assert app.engine is None
        assert "Final result: WHITE wins" in app.view.message


class TestSaveLoad:
    def test_save_writes_format(self, tmp_path: Path) -> None:
        path = tmp_path / "game.txt"
        app = _app()
        app.handle("start go 9")
        app.handle("move 1 1")
        app.handle(f"save {path}")
        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "GO 9 0 WHITE"
        assert lines[1].split()[0] == "1"
        assert len(lines) == 10
        assert app.view.message == f"Game saved to {path}"

    def test_load_restores_without_history(self, tmp_path: Path) -> None:
        path = tmp_path / "game.txt"
        app = _app()
        app.handle("start go 9")
        app.handle("move 3 4")
        app.handle("pass")
        app.handle(f"save {path}")

        other = _app()
        other.handle(f"load {path}")
        assert other.engine is not None
        assert other.engine.variant == GameVariant.GO
        assert other.engine.grid[(2, 3)] == Side.BLACK
        assert other.engine.side_to_move == Side.BLACK
        assert other.engine.pass_count == 1
        assert not other.engine.can_undo
        assert other.view.message == f"Game loaded: {path}"

    def test_load_missing_file(self, tmp_path: Path) -> None:
        app = _app()
        app.handle(f"load {tmp_path / 'missing.txt'}")
        assert app.engine is None
        assert app.view.message.startswith("Error: Could not read")

    def test_load_malformed_keeps_current_game(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("GO 9 0 BLACK\n0 0 0\n", encoding="utf-8")
        app = _app()
        app.handle("start gomoku 8")
        engine = app.engine
        app.handle(f"load {path}")
        assert app.engine is engine
        assert app.view.message.startswith("Error:")

    def test_load_undecodable_file_reports_error(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.txt"
        path.write_bytes(b"GO 8 0 BLACK\n\xff\xfe\n")
        app = _app()
        app.handle(f"load {path}")
        assert app.engine is None
        assert app.view.message.startswith(f"Error: Could not read {path}")


class TestMisc:
    def test_help(self) -> None:
        app = _app()
        app.handle("help")
        assert "start gomoku|go" in app.view.message

    def test_hint_toggles(self) -> None:
        app = _app()
        assert app.view.show_hints
        app.handle("hint")
        assert not app.view.show_hints
        app.handle("hint")
        assert app.view.show_hints

    def test_exit(self) -> None:
        app = _app()
        app.handle("exit")
        assert not app.running

    def test_run_loop(self) -> None:
        app = _app()
        stdin = io.StringIO("start gomoku 8\n\nmove 1 1\nexit\nmove 2 2\n")
        stdout = io.StringIO()
        assert app.run(stdin, stdout) == 0
        out = stdout.getvalue()
        assert "Enter a command (help for help): " in out
        assert "Current game: <Gomoku>" in out
        assert app.engine is not None
        assert app.engine.grid[(1, 1)] == Side.NONE
        assert app.engine.grid[(0, 0)] == Side.BLACK
