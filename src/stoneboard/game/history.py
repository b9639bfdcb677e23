"""History - LIFO stack of snapshots for undo."""

from __future__ import annotations

from stoneboard.core.errors import EmptyHistory
from stoneboard.core.snapshot import Snapshot


class History:
    """Snapshots pushed before every state-changing action."""

    __slots__ = ("_stack",)

    def __init__(self) -> None:
        self._stack: list[Snapshot] = []

    def push(self, snapshot: Snapshot) -> None:
        self._stack.append(snapshot)

    def pop(self) -> Snapshot:
        if not self._stack:
            raise EmptyHistory("Nothing to undo")
        return self._stack.pop()

    def __len__(self) -> int:
        return len(self._stack)

    def __bool__(self) -> bool:
        return bool(self._stack)
