"""In-memory Unit of Work implementation."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from docregistry.infrastructure.persistence.memory.document_record_repository import (
    InMemoryDocumentRecordRepository,
)
from docregistry.infrastructure.persistence.memory.registry_state_repository import (
    InMemoryRegistryStateRepository,
)
from docregistry.infrastructure.persistence.memory.store import InMemoryStore
from docregistry.infrastructure.persistence.memory.undo_log import UndoLog


class InMemoryUnitOfWork:
    """In-memory Unit of Work - writes are journaled and undone on rollback."""

    def __init__(self, store: InMemoryStore) -> None:
        self._undo_log = UndoLog()
        self._records = InMemoryDocumentRecordRepository(store, self._undo_log)
        self._state = InMemoryRegistryStateRepository(store, self._undo_log)

    @property
    def records(self) -> InMemoryDocumentRecordRepository:
        return self._records

    @property
    def state(self) -> InMemoryRegistryStateRepository:
        return self._state

    async def commit(self) -> None:
        self._undo_log.clear()

    async def rollback(self) -> None:
        self._undo_log.replay()


def create_uow_factory(store: InMemoryStore) -> object:
    """Create UnitOfWork factory (async context manager).

    A single lock serializes units of work, so each operation observes and
    produces whole states only. Units of work must not be nested.
    """
    lock = asyncio.Lock()

    @asynccontextmanager
    async def factory() -> AsyncIterator[InMemoryUnitOfWork]:
        async with lock:
            uow = InMemoryUnitOfWork(store)
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
