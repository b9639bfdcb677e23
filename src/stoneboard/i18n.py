"""Internationalisation strings for Stoneboard.

Usage::

    from stoneboard.i18n import t, set_language

    set_language("Chinese")
    print(t().side_name(Side.BLACK))   # "黑方"
    print(t().next_turn.format(side="..."))
"""

from __future__ import annotations

from dataclasses import dataclass

from stoneboard.core.enums import GameVariant, Side


@dataclass(frozen=True)
class Strings:
    # ── Sides / variants ─────────────────────────────────────────────────
    side_black: str
    side_white: str
    side_none: str
    game_gomoku: str
    game_go: str

    # ── Engine notifications ─────────────────────────────────────────────
    current_turn: str  # "Current turn: {side}"
    next_turn: str  # "{side} to move"
    winner_found: str  # ">>> Winner: {side} <<<"
    passed: str  # "{side} passes"
    settlement_banner: str
    final_result: str  # ">>> Final result: {side} wins <<<"
    undone: str  # "Move undone, {side} to move"
    resigned: str  # ">>> Opponent resigned, winner: {side} <<<"
    captured: str  # "Captured {count} stone(s)"

    # Settlement breakdown
    score_black: str  # "{total} (stones {stones} + territory {territory})"
    score_white: str  # "... + komi {komi})"

    # ── Console ──────────────────────────────────────────────────────────
    help_text: str
    prompt: str
    status_no_game: str
    status_game: str  # "Current game: <{name}>"
    status_game_over: str  # "Game over (winner: {side})"
    message_prefix: str  # "[Message] {msg}"
    error_prefix: str  # "Error: {msg}"
    saved: str  # "Game saved to {path}"
    loaded: str  # "Game loaded: {path}"
    hints_on: str
    hints_off: str

    # Console errors
    err_no_game: str
    err_size_range: str  # "Board size must be between {low} and {high}"
    err_unknown_variant: str
    err_unknown_command: str  # "Unknown command: {cmd}"
    err_usage: str  # "Usage: {usage}"
    err_write_failed: str  # "Could not write {path}: {reason}"
    err_read_failed: str  # "Could not read {path}: {reason}"

    # Engine errors
    err_out_of_range: str  # "({row}, {col}) is off the board"
    err_occupied: str  # "Cannot place a stone at ({row}, {col})"
    err_pass_gomoku: str
    err_nothing_to_undo: str

    def side_name(self, side: Side) -> str:
        if side == Side.BLACK:
            return self.side_black
        if side == Side.WHITE:
            return self.side_white
        return self.side_none

    def game_name(self, variant: GameVariant) -> str:
        return self.game_gomoku if variant == GameVariant.GOMOKU else self.game_go


# ── Built-in locales ─────────────────────────────────────────────────────────

_EN = Strings(
    side_black="BLACK",
    side_white="WHITE",
    side_none="NONE",
    game_gomoku="Gomoku",
    game_go="Go",
    current_turn="Current turn: {side}",
    next_turn="{side} to move",
    winner_found=">>> Game decided! Winner: {side} <<<",
    passed="{side} passes",
    settlement_banner=">>> Both sides passed, counting the board <<<",
    final_result=">>> Final result: {side} wins <<<",
    undone="Move undone, {side} to move",
    resigned=">>> Opponent resigned, winner: {side} <<<",
    captured="Captured {count} stone(s)",
    score_black="Black: {total} (stones {stones} + territory {territory})",
    score_white=(
        "White: {total} (stones {stones} + territory {territory} + komi {komi})"
    ),
    help_text=(
        "Commands:\n"
        "  start gomoku|go [8-19] : start a new game\n"
        "  move ROW COL           : place a stone (1-based)\n"
        "  pass                   : pass (Go only)\n"
        "  undo                   : take back the last action\n"
        "  resign                 : resign the game\n"
        "  save FILE              : save the game\n"
        "  load FILE              : load a saved game\n"
        "  hint                   : toggle the message line\n"
        "  help                   : show this help\n"
        "  exit                   : quit"
    ),
    prompt="Enter a command (help for help): ",
    status_no_game="No game in progress",
    status_game="Current game: <{name}>",
    status_game_over="Game over (winner: {side})",
    message_prefix="[Message] {msg}",
    error_prefix="Error: {msg}",
    saved="Game saved to {path}",
    loaded="Game loaded: {path}",
    hints_on="Messages shown",
    hints_off="Messages hidden",
    err_no_game="No game in progress",
    err_size_range="Board size must be between {low} and {high}",
    err_unknown_variant="Unknown game type, use go or gomoku",
    err_unknown_command="Unknown command: {cmd}",
    err_usage="Usage: {usage}",
    err_write_failed="Could not write {path}: {reason}",
    err_read_failed="Could not read {path}: {reason}",
    err_out_of_range="({row}, {col}) is off the board",
    err_occupied="Cannot place a stone at ({row}, {col})",
    err_pass_gomoku="Passing is not allowed in Gomoku",
    err_nothing_to_undo="Nothing to undo",
)

_ZH = Strings(
    side_black="黑方",
    side_white="白方",
    side_none="无",
    game_gomoku="五子棋",
    game_go="围棋",
    current_turn="当前轮到: {side}",
    next_turn="轮到 {side} 落子",
    winner_found=">>> 决出胜负！获胜者: {side} <<<",
    passed="{side} 停一手",
    settlement_banner=">>> 双方停手，开始结算 <<<",
    final_result=">>> 最终结果: {side} 胜 <<<",
    undone="已悔棋，轮到 {side}",
    resigned=">>> 对方认输，获胜者: {side} <<<",
    captured="提吃 {count} 子",
    score_black="黑方: {total} (子{stones}+地{territory})",
    score_white="白方: {total} (子{stones}+地{territory}+贴{komi})",
    help_text=(
        "指令列表:\n"
        "  start gomoku|go [8-19] : 开始新游戏\n"
        "  move x y : 落子 (行 列，从1开始)\n"
        "  pass : 停一手 (仅围棋)\n"
        "  undo : 悔棋\n"
        "  resign : 认输\n"
        "  save filename : 保存\n"
        "  load filename : 读取\n"
        "  hint : 开关提示\n"
        "  help : 帮助\n"
        "  exit : 退出"
    ),
    prompt="请输入指令 (help 查看帮助): ",
    status_no_game="游戏未开始",
    status_game="当前游戏: <{name}>",
    status_game_over="游戏结束 (胜者: {side})",
    message_prefix="[系统消息] {msg}",
    error_prefix="错误: {msg}",
    saved="游戏已保存至 {path}",
    loaded="游戏已读取: {path}",
    hints_on="提示已开启",
    hints_off="提示已关闭",
    err_no_game="游戏未开始",
    err_size_range="尺寸必须在 {low} 到 {high} 之间",
    err_unknown_variant="未知的游戏类型，请输入 go 或 gomoku",
    err_unknown_command="未知指令: {cmd}",
    err_usage="用法: {usage}",
    err_write_failed="文件创建失败 {path}: {reason}",
    err_read_failed="文件读取失败 {path}: {reason}",
    err_out_of_range="坐标超出范围 ({row}, {col})",
    err_occupied="此处不可落子 ({row}, {col})",
    err_pass_gomoku="五子棋不能停一手",
    err_nothing_to_undo="没有可以悔棋的记录",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Chinese": _ZH,
}

LANGUAGES: tuple[str, ...] = tuple(_LOCALES)

_current: Strings = _EN


def set_language(name: str) -> None:
    """Switch the active locale; unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(name, _EN)


def t() -> Strings:
    """Return the active string catalogue."""
    return _current
