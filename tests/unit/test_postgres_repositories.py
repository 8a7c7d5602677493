"""Unit tests for PostgreSQL repositories against a mocked connection."""

from contextlib import asynccontextmanager
from datetime import UTC, datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from psycopg.errors import UniqueViolation

from docregistry.domain.entities import DocumentRecord
from docregistry.domain.exceptions import DuplicateLocator, DuplicateTitle
from docregistry.infrastructure.persistence.postgres.document_record_repository import (
    PostgresDocumentRecordRepository,
)
from docregistry.infrastructure.persistence.postgres.registry_state_repository import (
    PostgresRegistryStateRepository,
)
from docregistry.infrastructure.persistence.postgres.unit_of_work import create_uow_factory

CREATED = datetime(2024, 1, 1, tzinfo=UTC)


def _conn(row=None) -> AsyncMock:
    cursor = AsyncMock()
    cursor.fetchone.return_value = row
    conn = AsyncMock()
    conn.execute.return_value = cursor
    return conn


def _unique_violation(constraint: str) -> UniqueViolation:
    class _Violation(UniqueViolation):
        diag = SimpleNamespace(constraint_name=constraint)

    return _Violation(f'duplicate key value violates unique constraint "{constraint}"')


def _record() -> DocumentRecord:
    return DocumentRecord(
        locator="ipfs://a",
        title="a",
        created_at=CREATED,
        author="admin",
        content_hash=b"\x01" * 32,
        id=1,
    )


class TestPostgresDocumentRecordRepository:
    """Tests for PostgresDocumentRecordRepository."""

    @pytest.mark.asyncio
    async def test_get_by_id_maps_row(self) -> None:
        conn = _conn((7, "ipfs://a", "a", memoryview(b"\x01" * 32), "admin", CREATED))
        repo = PostgresDocumentRecordRepository(conn)

        record = await repo.get_by_id(7)

        assert record is not None
        assert record.id == 7
        assert record.content_hash == b"\x01" * 32
        assert isinstance(record.content_hash, bytes)
        assert record.created_at == CREATED

    @pytest.mark.asyncio
    async def test_miss_returns_none(self) -> None:
        repo = PostgresDocumentRecordRepository(_conn(None))
        assert await repo.get_by_locator("ipfs://missing") is None

    @pytest.mark.asyncio
    async def test_get_by_hash_picks_latest(self) -> None:
        conn = _conn(None)
        repo = PostgresDocumentRecordRepository(conn)

        await repo.get_by_hash(b"\x02" * 32)

        query, params = conn.execute.call_args.args
        assert "ORDER BY id DESC LIMIT 1" in query
        assert params == (b"\x02" * 32,)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("constraint", "error"),
        [
            ("uq_document_record_title", DuplicateTitle),
            ("uq_document_record_locator", DuplicateLocator),
        ],
    )
    async def test_create_maps_unique_violation(self, constraint, error) -> None:
        conn = _conn()
        conn.execute.side_effect = _unique_violation(constraint)
        repo = PostgresDocumentRecordRepository(conn)

        with pytest.raises(error) as exc_info:
            await repo.create(_record())

        assert isinstance(exc_info.value.__cause__, UniqueViolation)


class TestPostgresRegistryStateRepository:
    """Tests for PostgresRegistryStateRepository."""

    @pytest.mark.asyncio
    async def test_get_administrator_for_update_locks_row(self) -> None:
        conn = _conn(("admin",))
        repo = PostgresRegistryStateRepository(conn)

        assert await repo.get_administrator(for_update=True) == "admin"
        assert conn.execute.call_args.args[0].endswith("FOR UPDATE")

    @pytest.mark.asyncio
    async def test_initialize_does_not_overwrite(self) -> None:
        conn = _conn(("existing",))
        repo = PostgresRegistryStateRepository(conn)

        assert await repo.initialize("new") == "existing"
        assert "ON CONFLICT (id) DO NOTHING" in conn.execute.call_args_list[0].args[0]

    @pytest.mark.asyncio
    async def test_increment_sequence_returns_new_value(self) -> None:
        conn = _conn((3,))
        repo = PostgresRegistryStateRepository(conn)

        assert await repo.increment_sequence() == 3
        assert "sequence = sequence + 1" in conn.execute.call_args.args[0]


def _pool(conn: AsyncMock) -> MagicMock:
    @asynccontextmanager
    async def connection():
        yield conn

    pool = MagicMock()
    pool.connection = connection
    return pool


class TestPostgresUnitOfWork:
    """Tests for the pooled PostgreSQL unit of work."""

    @pytest.mark.asyncio
    async def test_commits_on_success(self) -> None:
        conn = _conn(("admin",))
        factory = create_uow_factory(_pool(conn))

        async with factory() as uow:
            assert await uow.state.get_administrator(for_update=True) == "admin"

        conn.commit.assert_awaited_once()
        conn.rollback.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rolls_back_on_error(self) -> None:
        conn = _conn()
        factory = create_uow_factory(_pool(conn))

        with pytest.raises(DuplicateTitle):
            async with factory() as uow:
                raise DuplicateTitle("Title already registered: a")

        conn.rollback.assert_awaited_once()
        conn.commit.assert_not_awaited()
