"""Save-file text format.

Layout::

    GO 9 0 BLACK
    0 0 0 0 0 0 0 0 0
    ...                      (size rows of size integers)

Cells are 0 (empty), 1 (black) or 2 (white). History is never stored.
"""

from __future__ import annotations

from stoneboard.core.enums import GameVariant, Side
from stoneboard.core.errors import MalformedSave
from stoneboard.core.snapshot import Snapshot
from stoneboard.core.types import MAX_SIZE, MIN_SIZE, is_valid_size


def snapshot_to_text(snapshot: Snapshot) -> str:
    """Serialise a :class:`Snapshot` to the save format."""
    lines = [
        f"{snapshot.variant.token} {snapshot.size} "
        f"{snapshot.pass_count} {snapshot.side_to_move.token}"
    ]
    for row in snapshot.rows:
        lines.append(" ".join(str(cell) for cell in row))
    return "\n".join(lines) + "\n"


def snapshot_from_text(text: str) -> Snapshot:
    """Parse save-format text into a validated :class:`Snapshot`."""
    lines = [line for line in text.splitlines() if line.strip()]
    if not lines:
        raise MalformedSave("Save data is empty")

    # 1. Header
    header = lines[0].split()
    if len(header) != 4:
        raise MalformedSave(f"Invalid header (need 4 fields): {lines[0]!r}")
    variant_part, size_part, pass_part, side_part = header

    try:
        variant = GameVariant.from_token(variant_part)
        side = Side.from_token(side_part)
    except ValueError as exc:
        raise MalformedSave(str(exc)) from None

    try:
        size = int(size_part)
        pass_count = int(pass_part)
    except ValueError:
        raise MalformedSave(f"Invalid header numbers: {lines[0]!r}") from None

    if not is_valid_size(size):
        raise MalformedSave(
            f"Board size {size} outside {MIN_SIZE}-{MAX_SIZE}"
        )

    # 2. Board rows
    body = lines[1:]
    if len(body) != size:
        raise MalformedSave(f"Expected {size} board rows, found {len(body)}")
    rows: list[tuple[int, ...]] = []
    for index, line in enumerate(body):
        try:
            row = tuple(int(token) for token in line.split())
        except ValueError:
            raise MalformedSave(f"Non-integer cell in row {index}: {line!r}") from None
        rows.append(row)

    snapshot = Snapshot(variant, size, side, pass_count, tuple(rows))
    snapshot.validate()
    return snapshot
