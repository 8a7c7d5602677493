"""In-memory document record repository."""

from docregistry.domain.entities import DocumentRecord
from docregistry.infrastructure.persistence.memory.store import InMemoryStore
from docregistry.infrastructure.persistence.memory.undo_log import UndoLog


class InMemoryDocumentRecordRepository:
    """Document record repository over an InMemoryStore."""

    def __init__(self, store: InMemoryStore, undo_log: UndoLog) -> None:
        self._store = store
        self._undo_log = undo_log

    async def get_by_id(self, record_id: int) -> DocumentRecord | None:
        return self._store.records.get(record_id)

    async def get_by_locator(self, locator: str) -> DocumentRecord | None:
        return self._lookup(self._store.by_locator.get(locator))

    async def get_by_title(self, title: str) -> DocumentRecord | None:
        return self._lookup(self._store.by_title.get(title))

    async def get_by_hash(self, content_hash: bytes) -> DocumentRecord | None:
        return self._lookup(self._store.by_hash.get(content_hash))

    async def create(self, record: DocumentRecord) -> DocumentRecord:
        """Insert record into the table and all three key indexes."""
        store = self._store
        previous_hash_owner = store.by_hash.get(record.content_hash)

        def undo() -> None:
            store.records.pop(record.id, None)
            store.by_locator.pop(record.locator, None)
            store.by_title.pop(record.title, None)
            if previous_hash_owner is None:
                store.by_hash.pop(record.content_hash, None)
            else:
                store.by_hash[record.content_hash] = previous_hash_owner

        store.records[record.id] = record
        store.by_locator[record.locator] = record.id
        store.by_title[record.title] = record.id
        # last write wins, content hashes are not unique
        store.by_hash[record.content_hash] = record.id
        self._undo_log.record(undo)
        return record

    def _lookup(self, record_id: int | None) -> DocumentRecord | None:
        if record_id is None:
            return None
        return self._store.records.get(record_id)
