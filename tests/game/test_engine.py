"""Tests for GameEngine - the match orchestrator."""

import pytest

from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import (
    EmptyHistory,
    GameError,
    IllegalMove,
    InvalidOperation,
    OutOfRange,
)
from stoneboard.core.grid import Grid
from stoneboard.core.snapshot import Snapshot
from stoneboard.game.engine import GameEngine
from stoneboard.game.interfaces import BoardRows, IGameSink
from stoneboard.i18n import set_language


class _RecordingSink(IGameSink):
    def __init__(self) -> None:
        self.boards: list[tuple[BoardRows, int]] = []
        self.messages: list[str] = []
        self.winners: list[Side] = []

    def on_board_update(self, rows: BoardRows, size: int) -> None:
        self.boards.append((rows, size))

    def on_message(self, text: str) -> None:
        self.messages.append(text)

    def on_game_over(self, winner: Side) -> None:
        self.winners.append(winner)


def _engine(
    variant: GameVariant = GameVariant.GO, size: int = 8
) -> tuple[GameEngine, _RecordingSink]:
    engine = GameEngine(variant, size)
    sink = _RecordingSink()
    engine.add_sink(sink)
    return engine, sink


def _seeded(
    variant: GameVariant, stones: dict[tuple[int, int], Side], to_move: Side
) -> GameEngine:
    grid = Grid(8)
    for p, side in stones.items():
        grid[p] = side
    return GameEngine.from_snapshot(Snapshot.capture(variant, grid, to_move, 0))


class TestNewEngine:
    def test_initial_state(self) -> None:
        engine, _ = _engine()
        assert engine.side_to_move == Side.BLACK
        assert engine.pass_count == 0
        assert engine.grid == Grid(8)
        assert not engine.can_undo
        assert engine.settlement_detail == ""

    @pytest.mark.parametrize("size", [7, 20])
    def test_size_outside_range(self, size: int) -> None:
        with pytest.raises(OutOfRange):
            GameEngine(GameVariant.GOMOKU, size)

    def test_refresh_announces_turn(self) -> None:
        engine, sink = _engine()
        engine.refresh()
        assert len(sink.boards) == 1
        assert sink.messages == ["Current turn: BLACK"]

    def test_grid_property_is_a_copy(self) -> None:
        engine, _ = _engine()
        grid = engine.grid
        grid[(0, 0)] = Side.WHITE
        assert engine.grid[(0, 0)] == Side.NONE


class TestMakeMove:
    def test_places_and_switches(self) -> None:
        engine, sink = _engine()
        engine.make_move(2, 3)
        assert engine.grid[(2, 3)] == Side.BLACK
        assert engine.side_to_move == Side.WHITE
        assert engine.history_size == 1
        assert sink.messages == ["WHITE to move"]
        rows, size = sink.boards[-1]
        assert size == 8
        assert rows[2][3] == 1

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, 8), (8, 8)])
    def test_out_of_range(self, row: int, col: int) -> None:
        engine, sink = _engine()
        with pytest.raises(OutOfRange):
            engine.make_move(row, col)
        assert not engine.can_undo
        assert sink.boards == []

    def test_occupied_cell(self) -> None:
        engine, _ = _engine(GameVariant.GOMOKU)
        engine.make_move(0, 0)
        with pytest.raises(IllegalMove):
            engine.make_move(0, 0)
        assert engine.side_to_move == Side.WHITE
        assert engine.history_size == 1

    def test_errors_share_a_base(self) -> None:
        engine, _ = _engine()
        with pytest.raises(GameError):
            engine.make_move(99, 99)

    def test_move_resets_pass_counter(self) -> None:
        engine, _ = _engine()
        engine.pass_turn()
        assert engine.pass_count == 1
        engine.make_move(4, 4)
        assert engine.pass_count == 0

    def test_sinks_called_in_registration_order(self) -> None:
        engine = GameEngine(GameVariant.GO, 8)
        order: list[str] = []
        engine.events.on_message.append(lambda _m: order.append("first"))
        engine.events.on_message.append(lambda _m: order.append("second"))
        engine.make_move(0, 0)
        assert order == ["first", "second"]


class TestGomokuWin:
    def test_five_in_a_row_played_out(self) -> None:
        engine, sink = _engine(GameVariant.GOMOKU)
        for col in range(4):
            engine.make_move(0, col)  # black
            engine.make_move(7, col)  # white
            assert sink.winners == []
        engine.make_move(0, 4)
        assert sink.winners == [Side.BLACK]
        assert ">>> Game decided! Winner: BLACK <<<" in sink.messages

    def test_seeded_line_completed(self) -> None:
        engine = _seeded(
            GameVariant.GOMOKU,
            {(0, c): Side.BLACK for c in range(4)},
            Side.BLACK,
        )
        sink = _RecordingSink()
        engine.add_sink(sink)
        engine.make_move(0, 4)
        assert sink.winners == [Side.BLACK]
        # The winner keeps the move; no turn switch after a decided game.
        assert engine.side_to_move == Side.BLACK

    def test_white_can_win(self) -> None:
        engine = _seeded(
            GameVariant.GOMOKU,
            {(r, r): Side.WHITE for r in range(1, 5)},
            Side.WHITE,
        )
        sink = _RecordingSink()
        engine.add_sink(sink)
        engine.make_move(5, 5)
        assert sink.winners == [Side.WHITE]


class TestGoCapture:
    def test_capture_during_play(self) -> None:
        engine, sink = _engine(GameVariant.GO)
        engine.make_move(0, 1)  # black
        engine.make_move(0, 0)  # white, into the corner
        engine.make_move(1, 0)  # black captures
        assert engine.grid[(0, 0)] == Side.NONE
        assert "Captured 1 stone(s)" in sink.messages
        assert sink.winners == []

    def test_one_message_per_captured_group(self) -> None:
        engine = _seeded(
            GameVariant.GO,
            {
                (0, 1): Side.WHITE,
                (1, 0): Side.WHITE,
                (2, 1): Side.WHITE,
                (1, 2): Side.WHITE,
                (0, 0): Side.BLACK,
                (0, 2): Side.BLACK,
                (2, 0): Side.BLACK,
                (1, 3): Side.BLACK,
                (2, 2): Side.BLACK,
                (3, 1): Side.BLACK,
            },
            Side.BLACK,
        )
        sink = _RecordingSink()
        engine.add_sink(sink)
        engine.make_move(1, 1)
        assert sink.messages.count("Captured 1 stone(s)") == 4
        assert engine.grid.count(Side.WHITE) == 0

    def test_undo_restores_captured_stone(self) -> None:
        engine, _ = _engine(GameVariant.GO)
        engine.make_move(0, 1)
        engine.make_move(0, 0)
        engine.make_move(1, 0)
        engine.undo()
        assert engine.grid[(0, 0)] == Side.WHITE
        assert engine.grid[(1, 0)] == Side.NONE
        assert engine.side_to_move == Side.BLACK


class TestPassTurn:
    def test_gomoku_cannot_pass(self) -> None:
        engine, _ = _engine(GameVariant.GOMOKU)
        with pytest.raises(InvalidOperation):
            engine.pass_turn()
        assert not engine.can_undo
        assert engine.pass_count == 0

    def test_single_pass(self) -> None:
        engine, sink = _engine()
        engine.pass_turn()
        assert engine.pass_count == 1
        assert engine.side_to_move == Side.WHITE
        assert sink.messages == ["BLACK passes", "WHITE to move"]
        assert sink.winners == []

    def test_two_passes_settle(self) -> None:
        engine, sink = _engine()
        engine.make_move(0, 0)  # black
        engine.pass_turn()  # white
        engine.pass_turn()  # black
        assert sink.winners == [Side.BLACK]
        final = sink.messages[-1]
        lines = final.splitlines()
        assert lines[0] == ">>> Both sides passed, counting the board <<<"
        assert lines[1] == "Black: 64 (stones 1 + territory 63)"
        assert lines[2] == "White: 3.75 (stones 0 + territory 0 + komi 3.75)"
        assert lines[3] == ">>> Final result: BLACK wins <<<"
        assert engine.pass_count == 0
        assert engine.settlement_detail == "\n".join(lines[1:3])

    def test_empty_board_settlement_goes_to_white(self) -> None:
        engine, sink = _engine()
        engine.pass_turn()
        engine.pass_turn()
        assert sink.winners == [Side.WHITE]

    def test_intervening_move_prevents_settlement(self) -> None:
        engine, sink = _engine()
        engine.pass_turn()
        engine.make_move(3, 3)
        engine.pass_turn()
        assert engine.pass_count == 1
        assert sink.winners == []


class TestUndo:
    def test_fresh_engine_has_nothing_to_undo(self) -> None:
        engine, sink = _engine()
        with pytest.raises(EmptyHistory):
            engine.undo()
        assert engine.grid == Grid(8)
        assert sink.messages == []

    def test_round_trip_after_moves(self) -> None:
        engine, _ = _engine()
        engine.make_move(1, 1)
        engine.pass_turn()
        before = (engine.grid, engine.side_to_move, engine.pass_count)
        engine.make_move(2, 2)
        engine.undo()
        assert (engine.grid, engine.side_to_move, engine.pass_count) == before

    def test_undo_move_after_pass_restores_counter(self) -> None:
        engine, _ = _engine()
        engine.pass_turn()
        engine.make_move(3, 3)
        assert engine.pass_count == 0
        engine.undo()
        assert engine.pass_count == 1
        assert engine.side_to_move == Side.WHITE
        assert engine.grid[(3, 3)] == Side.NONE

    def test_undo_pass_restores_counter(self) -> None:
        engine, _ = _engine()
        engine.pass_turn()
        engine.undo()
        assert engine.pass_count == 0
        assert engine.side_to_move == Side.BLACK

    def test_undo_notifies_without_game_over(self) -> None:
        engine, sink = _engine()
        engine.make_move(0, 0)
        sink.messages.clear()
        sink.boards.clear()
        engine.undo()
        assert sink.messages == ["Move undone, BLACK to move"]
        assert len(sink.boards) == 1
        assert sink.winners == []

    def test_unwind_everything(self) -> None:
        engine, _ = _engine()
        for p in [(0, 0), (1, 1), (2, 2)]:
            engine.make_move(*p)
        for _ in range(3):
            engine.undo()
        assert engine.grid == Grid(8)
        with pytest.raises(EmptyHistory):
            engine.undo()


class TestResign:
    def test_other_side_wins(self) -> None:
        engine, sink = _engine()
        engine.make_move(0, 0)  # now white to move
        engine.resign()
        assert sink.winners == [Side.BLACK]
        assert sink.messages[-1] == ">>> Opponent resigned, winner: BLACK <<<"

    def test_does_not_touch_history_or_grid(self) -> None:
        engine, _ = _engine(GameVariant.GOMOKU)
        engine.make_move(3, 3)
        grid = engine.grid
        engine.resign()
        assert engine.history_size == 1
        assert engine.grid == grid


class TestSnapshotRestore:
    def test_from_snapshot_has_empty_history(self) -> None:
        engine, _ = _engine()
        engine.make_move(4, 4)
        engine.pass_turn()
        restored = GameEngine.from_snapshot(engine.snapshot())
        assert restored.grid == engine.grid
        assert restored.side_to_move == Side.BLACK
        assert restored.pass_count == 1
        assert restored.variant == GameVariant.GO
        assert not restored.can_undo


class TestLocalisedMessages:
    def test_chinese_turn_message(self) -> None:
        set_language("Chinese")
        engine, sink = _engine()
        engine.make_move(0, 0)
        assert sink.messages == ["轮到 白方 落子"]
