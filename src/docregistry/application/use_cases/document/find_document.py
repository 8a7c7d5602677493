"""Find document use case - public lookups by any of the four keys."""

from docregistry.domain.entities import DocumentRecord


class FindDocumentUseCase:
    """Public lookups. No authorization, no side effects.

    The find_by_* methods return DocumentRecord.empty() on a miss; callers tell
    "not found" apart by checking record.is_empty. The get_by_* methods are the
    option-typed variants and return None instead.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def get_by_locator(self, locator: str) -> DocumentRecord | None:
        async with self._uow_factory() as uow:
            return await uow.records.get_by_locator(locator)

    async def get_by_title(self, title: str) -> DocumentRecord | None:
        async with self._uow_factory() as uow:
            return await uow.records.get_by_title(title)

    async def get_by_id(self, record_id: int) -> DocumentRecord | None:
        if record_id <= 0:
            return None
        async with self._uow_factory() as uow:
            return await uow.records.get_by_id(record_id)

    async def get_by_hash(self, content_hash: bytes) -> DocumentRecord | None:
        async with self._uow_factory() as uow:
            return await uow.records.get_by_hash(content_hash)

    async def find_by_locator(self, locator: str) -> DocumentRecord:
        return await self.get_by_locator(locator) or DocumentRecord.empty()

    async def find_by_title(self, title: str) -> DocumentRecord:
        return await self.get_by_title(title) or DocumentRecord.empty()

    async def find_by_id(self, record_id: int) -> DocumentRecord:
        return await self.get_by_id(record_id) or DocumentRecord.empty()

    async def find_by_hash(self, content_hash: bytes) -> DocumentRecord:
        return await self.get_by_hash(content_hash) or DocumentRecord.empty()

    async def count(self) -> int:
        """Number of registered documents (current sequence value)."""
        async with self._uow_factory() as uow:
            return await uow.state.get_sequence()
