"""Pytest fixtures for docregistry tests."""

from __future__ import annotations

import hashlib
from datetime import UTC, datetime, timedelta

import pytest

from docregistry.application.use_cases.document.find_document import FindDocumentUseCase
from docregistry.application.use_cases.document.register_document import (
    RegisterDocumentUseCase,
)
from docregistry.infrastructure.access.access_control import RegistryAccessControl
from docregistry.infrastructure.persistence.memory.store import InMemoryStore
from docregistry.infrastructure.persistence.memory.unit_of_work import create_uow_factory

ADMIN = "admin"
OUTSIDER = "mallory"
SYSTEM_IDENTITY = "docregistry"


def digest(data: str) -> bytes:
    """32-byte content hash for test documents."""
    return hashlib.sha256(data.encode()).digest()


# --- Fake clock ---


class FakeClock:
    """Deterministic clock - each call advances by one second."""

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2024, 1, 1, tzinfo=UTC)

    def now(self) -> datetime:
        current = self._now
        self._now = current + timedelta(seconds=1)
        return current


# --- Fixtures ---


@pytest.fixture
def store() -> InMemoryStore:
    """In-memory store with the administrator already initialized."""
    return InMemoryStore(administrator=ADMIN)


@pytest.fixture
def uow_factory(store: InMemoryStore):
    """Unit of work factory over the in-memory store."""
    return create_uow_factory(store)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def access_control(uow_factory) -> RegistryAccessControl:
    return RegistryAccessControl(
        unit_of_work_factory=uow_factory,
        system_identity=SYSTEM_IDENTITY,
    )


@pytest.fixture
def register_document(uow_factory, access_control, clock) -> RegisterDocumentUseCase:
    return RegisterDocumentUseCase(
        unit_of_work_factory=uow_factory,
        access_control=access_control,
        clock=clock,
    )


@pytest.fixture
def find_document(uow_factory) -> FindDocumentUseCase:
    return FindDocumentUseCase(unit_of_work_factory=uow_factory)
