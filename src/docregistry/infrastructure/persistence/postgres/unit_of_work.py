"""PostgreSQL Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from psycopg import AsyncConnection
from psycopg_pool import AsyncConnectionPool

from docregistry.infrastructure.persistence.postgres.document_record_repository import (
    PostgresDocumentRecordRepository,
)
from docregistry.infrastructure.persistence.postgres.registry_state_repository import (
    PostgresRegistryStateRepository,
)


class PostgresUnitOfWork:
    """One pooled connection, one transaction."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn
        self._records = PostgresDocumentRecordRepository(conn)
        self._state = PostgresRegistryStateRepository(conn)

    @property
    def records(self) -> PostgresDocumentRecordRepository:
        return self._records

    @property
    def state(self) -> PostgresRegistryStateRepository:
        return self._state

    async def commit(self) -> None:
        await self._conn.commit()

    async def rollback(self) -> None:
        await self._conn.rollback()


def create_pool(conninfo: str, min_size: int = 1, max_size: int = 5) -> AsyncConnectionPool:
    """Create a closed async connection pool; LifespanMiddleware opens it on startup."""
    return AsyncConnectionPool(conninfo=conninfo, min_size=min_size, max_size=max_size, open=False)


def create_uow_factory(pool: AsyncConnectionPool) -> object:
    """Create UnitOfWork factory (async context manager).

    The connection goes back to the pool only after commit or rollback, so a
    row locked with FOR UPDATE stays locked for the whole unit of work.
    """

    @asynccontextmanager
    async def factory() -> AsyncIterator[PostgresUnitOfWork]:
        async with pool.connection() as conn:
            uow = PostgresUnitOfWork(conn)
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
