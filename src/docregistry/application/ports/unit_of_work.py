"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from docregistry.application.ports.repositories.document_record_repository import (
    DocumentRecordRepository,
)
from docregistry.application.ports.repositories.registry_state_repository import (
    RegistryStateRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - one atomic, serialized registry operation."""

    @property
    def records(self) -> DocumentRecordRepository: ...

    @property
    def state(self) -> RegistryStateRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
