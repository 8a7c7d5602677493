"""In-memory registry state repository."""

from docregistry.infrastructure.persistence.memory.store import InMemoryStore
from docregistry.infrastructure.persistence.memory.undo_log import UndoLog


class InMemoryRegistryStateRepository:
    """Administrator and sequence counter held in an InMemoryStore."""

    def __init__(self, store: InMemoryStore, undo_log: UndoLog) -> None:
        self._store = store
        self._undo_log = undo_log

    async def initialize(self, administrator: str) -> str:
        if self._store.administrator is None:
            await self.set_administrator(administrator)
        return self._store.administrator

    async def get_administrator(self, *, for_update: bool = False) -> str | None:
        # for_update is a no-op: the unit of work already holds the store lock
        return self._store.administrator

    async def set_administrator(self, identity: str) -> None:
        store = self._store
        previous = store.administrator
        self._undo_log.record(lambda: setattr(store, "administrator", previous))
        store.administrator = identity

    async def get_sequence(self) -> int:
        return self._store.sequence

    async def increment_sequence(self) -> int:
        store = self._store
        previous = store.sequence
        self._undo_log.record(lambda: setattr(store, "sequence", previous))
        store.sequence += 1
        return store.sequence
