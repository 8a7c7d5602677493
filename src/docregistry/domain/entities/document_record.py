"""Document record entity."""

from dataclasses import dataclass
from datetime import UTC, datetime

from docregistry.domain.value_objects import CONTENT_HASH_SIZE

EPOCH = datetime.fromtimestamp(0, UTC)
ZERO_IDENTITY = ""


@dataclass(frozen=True)
class DocumentRecord:
    """Immutable registry entry. The zero value (id 0) stands for "not registered"."""

    locator: str
    title: str
    created_at: datetime
    author: str
    content_hash: bytes
    id: int

    @classmethod
    def empty(cls) -> "DocumentRecord":
        """Zero-value record returned by lookups on a miss."""
        return cls(
            locator="",
            title="",
            created_at=EPOCH,
            author=ZERO_IDENTITY,
            content_hash=bytes(CONTENT_HASH_SIZE),
            id=0,
        )

    @property
    def is_empty(self) -> bool:
        return self.id == 0
