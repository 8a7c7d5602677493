"""Repository ports."""

from docregistry.application.ports.repositories.document_record_repository import (
    DocumentRecordRepository,
)
from docregistry.application.ports.repositories.registry_state_repository import (
    RegistryStateRepository,
)

__all__ = [
    "DocumentRecordRepository",
    "RegistryStateRepository",
]
