"""Document record repository port."""

from typing import Protocol

from docregistry.domain.entities import DocumentRecord


class DocumentRecordRepository(Protocol):
    """Port for record storage: records keyed by id plus three key -> id indexes."""

    async def get_by_id(self, record_id: int) -> DocumentRecord | None: ...

    async def get_by_locator(self, locator: str) -> DocumentRecord | None: ...

    async def get_by_title(self, title: str) -> DocumentRecord | None: ...

    async def get_by_hash(self, content_hash: bytes) -> DocumentRecord | None: ...

    async def create(self, record: DocumentRecord) -> DocumentRecord: ...
