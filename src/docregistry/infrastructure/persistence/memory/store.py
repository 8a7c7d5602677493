"""In-memory registry store."""

from dataclasses import dataclass, field

from docregistry.domain.entities import DocumentRecord


@dataclass
class InMemoryStore:
    """Records stored once by id; locator, title and hash map to ids."""

    administrator: str | None = None
    sequence: int = 0
    records: dict[int, DocumentRecord] = field(default_factory=dict)
    by_locator: dict[str, int] = field(default_factory=dict)
    by_title: dict[str, int] = field(default_factory=dict)
    by_hash: dict[bytes, int] = field(default_factory=dict)
