"""GameEngine - the orchestrator of a single match.

Coordinates: MatchState, History, Rules.
Emits events via simple callbacks so views / tests can subscribe.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import (
    EmptyHistory,
    IllegalMove,
    InvalidOperation,
    OutOfRange,
)
from stoneboard.core.grid import Grid
from stoneboard.core.rules import Outcome, Rules
from stoneboard.core.snapshot import Snapshot
from stoneboard.core.types import MAX_SIZE, MIN_SIZE, is_valid_size
from stoneboard.game.history import History
from stoneboard.game.interfaces import BoardRows, IGameEngine, IGameSink
from stoneboard.game.state import MatchState
from stoneboard.i18n import t

# ── Event definitions ────────────────────────────────────────────────────────

BoardCallback = Callable[[BoardRows, int], None]  # rows, size
MessageCallback = Callable[[str], None]
GameOverCallback = Callable[[Side], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event, called in order."""

    on_board_changed: list[BoardCallback] = field(default_factory=list)
    on_message: list[MessageCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


# ── Engine ───────────────────────────────────────────────────────────────────


class GameEngine(IGameEngine):
    """Runs the move / pass / undo / resign lifecycle of one match.

    Validation always happens before mutation, and the undo snapshot is
    pushed only once nothing else can fail. The engine does not lock after
    game over; the owner is expected to stop issuing commands.
    """

    __slots__ = ("_state", "_history", "_settlement_detail", "events")

    def __init__(self, variant: GameVariant, size: int) -> None:
        if not is_valid_size(size):
            raise OutOfRange(
                t().err_size_range.format(low=MIN_SIZE, high=MAX_SIZE)
            )
        self._state = MatchState.fresh(GameVariant(variant), size)
        self._history = History()
        self._settlement_detail = ""
        self.events = GameEvents()

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> GameEngine:
        """Fresh engine of the recorded variant and size, state overwritten.

        History starts empty.
        """
        snapshot.validate()
        engine = cls(snapshot.variant, snapshot.size)
        engine._state.restore(snapshot)
        return engine

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def variant(self) -> GameVariant:
        return self._state.variant

    @property
    def size(self) -> int:
        return self._state.size

    @property
    def grid(self) -> Grid:
        """A copy of the current grid."""
        return self._state.grid.copy()

    @property
    def side_to_move(self) -> Side:
        return self._state.side_to_move

    @property
    def pass_count(self) -> int:
        return self._state.pass_count

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def history_size(self) -> int:
        return len(self._history)

    @property
    def settlement_detail(self) -> str:
        """Score breakdown of the last settlement, empty if none happened."""
        return self._settlement_detail

    def snapshot(self) -> Snapshot:
        """Current state as an immutable snapshot (used for saving)."""
        return self._state.snapshot()

    # ── Sinks ────────────────────────────────────────────────────────────

    def add_sink(self, sink: IGameSink) -> None:
        self.events.on_board_changed.append(sink.on_board_update)
        self.events.on_message.append(sink.on_message)
        self.events.on_game_over.append(sink.on_game_over)

    def refresh(self) -> None:
        """Re-announce the board and whose turn it is."""
        self._emit_board()
        self._emit_message(
            t().current_turn.format(side=_name(self.side_to_move))
        )

    # ── IGameEngine impl ─────────────────────────────────────────────────

    def make_move(self, row: int, col: int) -> None:
        state = self._state
        if not state.grid.in_bounds(row, col):
            raise OutOfRange(t().err_out_of_range.format(row=row + 1, col=col + 1))
        if not Rules.is_legal(state.variant, row, col, state.grid):
            raise IllegalMove(t().err_occupied.format(row=row + 1, col=col + 1))

        self._history.push(state.snapshot())
        state.pass_count = 0
        state.grid.set(row, col, state.side_to_move)

        for group in Rules.post_move(state.variant, state.grid, (row, col)):
            self._emit_message(t().captured.format(count=len(group)))

        outcome = Rules.evaluate(state.variant, state.grid, False)
        self._emit_board()

        if outcome.is_decided:
            self._emit_message(
                t().winner_found.format(side=_name(outcome.winner))
            )
            self._emit_game_over(outcome.winner)
            return

        state.switch_side()
        self._emit_message(t().next_turn.format(side=_name(state.side_to_move)))

    def pass_turn(self) -> None:
        state = self._state
        if not state.variant.allows_pass:
            raise InvalidOperation(t().err_pass_gomoku)

        self._history.push(state.snapshot())
        state.pass_count += 1

        if state.pass_count >= 2:
            outcome = Rules.evaluate(state.variant, state.grid, True)
            self._settlement_detail = outcome.detail
            self._emit_message(self._settlement_message(outcome))
            self._emit_game_over(outcome.winner)
            state.pass_count = 0
            return

        passer = state.side_to_move
        state.switch_side()
        self._emit_message(t().passed.format(side=_name(passer)))
        self._emit_message(t().next_turn.format(side=_name(state.side_to_move)))

    def undo(self) -> None:
        if not self._history:
            raise EmptyHistory(t().err_nothing_to_undo)
        self._state.restore(self._history.pop())
        self._emit_message(t().undone.format(side=_name(self.side_to_move)))
        self._emit_board()

    def resign(self) -> None:
        winner = self._state.side_to_move.opposite
        self._emit_message(t().resigned.format(side=_name(winner)))
        self._emit_game_over(winner)

    # ── Internal helpers ─────────────────────────────────────────────────

    @staticmethod
    def _settlement_message(outcome: Outcome) -> str:
        strings = t()
        lines = [strings.settlement_banner]
        if outcome.detail:
            lines.append(outcome.detail)
        lines.append(strings.final_result.format(side=_name(outcome.winner)))
        return "\n".join(lines)

    def _emit_board(self) -> None:
        rows = self._state.grid.rows()
        size = self._state.size
        for cb in self.events.on_board_changed:
            cb(rows, size)

    def _emit_message(self, text: str) -> None:
        for cb in self.events.on_message:
            cb(text)

    def _emit_game_over(self, winner: Side) -> None:
        for cb in self.events.on_game_over:
            cb(winner)


def _name(side: Side) -> str:
    return t().side_name(side)
