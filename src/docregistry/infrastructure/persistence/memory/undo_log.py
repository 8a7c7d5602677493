"""Undo log for in-memory units of work."""

from collections.abc import Callable


class UndoLog:
    """Inverse operations recorded by repositories, replayed newest first on rollback."""

    def __init__(self) -> None:
        self._entries: list[Callable[[], None]] = []

    def record(self, undo: Callable[[], None]) -> None:
        self._entries.append(undo)

    def replay(self) -> None:
        while self._entries:
            self._entries.pop()()

    def clear(self) -> None:
        self._entries.clear()
