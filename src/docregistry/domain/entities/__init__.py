"""Domain entities."""

from docregistry.domain.entities.document_record import DocumentRecord

__all__ = [
    "DocumentRecord",
]
