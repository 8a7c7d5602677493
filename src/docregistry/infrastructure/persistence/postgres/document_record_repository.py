"""PostgreSQL document record repository implementation."""

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from docregistry.domain.entities import DocumentRecord
from docregistry.domain.exceptions import DuplicateLocator, DuplicateTitle

_COLUMNS = "id, locator, title, content_hash, author, created_at"


def _row_to_record(r: tuple) -> DocumentRecord:
    return DocumentRecord(
        id=r[0],
        locator=r[1],
        title=r[2],
        content_hash=bytes(r[3]),
        author=r[4],
        created_at=r[5],
    )


class PostgresDocumentRecordRepository:
    """Document record repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, record_id: int) -> DocumentRecord | None:
        """Get record by id."""
        return await self._fetch_one(
            f"SELECT {_COLUMNS} FROM document_record WHERE id = %s", (record_id,)
        )

    async def get_by_locator(self, locator: str) -> DocumentRecord | None:
        """Get record by locator."""
        return await self._fetch_one(
            f"SELECT {_COLUMNS} FROM document_record WHERE locator = %s", (locator,)
        )

    async def get_by_title(self, title: str) -> DocumentRecord | None:
        """Get record by title."""
        return await self._fetch_one(
            f"SELECT {_COLUMNS} FROM document_record WHERE title = %s", (title,)
        )

    async def get_by_hash(self, content_hash: bytes) -> DocumentRecord | None:
        """Get the most recent record with this content hash."""
        return await self._fetch_one(
            f"SELECT {_COLUMNS} FROM document_record WHERE content_hash = %s "
            "ORDER BY id DESC LIMIT 1",
            (content_hash,),
        )

    async def create(self, record: DocumentRecord) -> DocumentRecord:
        """Create record."""
        try:
            await self._conn.execute(
                "INSERT INTO document_record (id, locator, title, content_hash, author, created_at) "
                "VALUES (%s, %s, %s, %s, %s, %s)",
                (
                    record.id,
                    record.locator,
                    record.title,
                    record.content_hash,
                    record.author,
                    record.created_at,
                ),
            )
        except UniqueViolation as e:
            if e.diag.constraint_name == "uq_document_record_title":
                raise DuplicateTitle(f"Title already registered: {record.title}") from e
            raise DuplicateLocator(f"Locator already registered: {record.locator}") from e
        return record

    async def _fetch_one(self, query: str, params: tuple) -> DocumentRecord | None:
        cur = await self._conn.execute(query, params)
        r = await cur.fetchone()
        if not r:
            return None
        return _row_to_record(r)
