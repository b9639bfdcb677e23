"""Display glyphs for cell states."""

from __future__ import annotations

from stoneboard.core.enums import Side

_GLYPHS: dict[Side, str] = {
    Side.NONE: "+",
    Side.BLACK: "●",
    Side.WHITE: "○",
}

_ASCII: dict[Side, str] = {
    Side.NONE: ".",
    Side.BLACK: "X",
    Side.WHITE: "O",
}


def glyph(side: Side, *, ascii_only: bool = False) -> str:
    """Single-character symbol for *side*, e.g. ``●`` for black."""
    table = _ASCII if ascii_only else _GLYPHS
    return table[Side(side)]
