"""Unit tests for RegistryAccessControl."""

import pytest

from docregistry.domain.exceptions import Unauthorized, ValidationError
from docregistry.infrastructure.access.access_control import RegistryAccessControl
from docregistry.infrastructure.persistence.memory.store import InMemoryStore
from docregistry.infrastructure.persistence.memory.unit_of_work import create_uow_factory

from tests.conftest import ADMIN, OUTSIDER, SYSTEM_IDENTITY


@pytest.mark.asyncio
async def test_initialize_sets_administrator() -> None:
    access_control = RegistryAccessControl(
        create_uow_factory(InMemoryStore()), system_identity=SYSTEM_IDENTITY
    )

    assert await access_control.initialize("alice") == "alice"
    assert await access_control.is_administrator("alice")
    assert not await access_control.is_administrator("bob")


@pytest.mark.asyncio
async def test_initialize_keeps_stored_administrator(access_control) -> None:
    """A restart against existing state does not reset ownership."""
    assert await access_control.initialize("someone-else") == ADMIN
    assert await access_control.get_administrator() == ADMIN


@pytest.mark.asyncio
async def test_transfer_administration_by_admin(access_control) -> None:
    outcome = await access_control.transfer_administration(ADMIN, "bob")

    assert outcome.applied
    assert outcome.requested == "bob"
    assert await access_control.is_administrator("bob")
    assert not await access_control.is_administrator(ADMIN)


@pytest.mark.asyncio
async def test_transfer_administration_non_admin_unauthorized(access_control) -> None:
    with pytest.raises(Unauthorized):
        await access_control.transfer_administration(OUTSIDER, OUTSIDER)

    assert await access_control.is_administrator(ADMIN)
    assert not await access_control.is_administrator(OUTSIDER)


@pytest.mark.asyncio
async def test_transfer_to_system_identity_is_silent_noop(access_control) -> None:
    outcome = await access_control.transfer_administration(ADMIN, SYSTEM_IDENTITY)

    assert not outcome.applied
    assert await access_control.is_administrator(ADMIN)
    assert not await access_control.is_administrator(SYSTEM_IDENTITY)


@pytest.mark.asyncio
async def test_transfer_to_empty_identity_rejected(access_control) -> None:
    with pytest.raises(ValidationError):
        await access_control.transfer_administration(ADMIN, "")
    assert await access_control.is_administrator(ADMIN)


@pytest.mark.asyncio
async def test_former_admin_cannot_register_after_transfer(
    access_control, register_document
) -> None:
    from docregistry.application.dto.document_dto import DocumentRegisterInput

    await access_control.transfer_administration(ADMIN, "bob")
    payload = DocumentRegisterInput(locator="ipfs://x", title="x", content_hash=b"\x02" * 32)

    with pytest.raises(Unauthorized):
        await register_document.execute(ADMIN, payload)
    assert await register_document.execute("bob", payload) == 1


@pytest.mark.asyncio
async def test_authorize_without_administrator_rejects_everyone() -> None:
    uow_factory = create_uow_factory(InMemoryStore())
    access_control = RegistryAccessControl(uow_factory, system_identity=SYSTEM_IDENTITY)

    async with uow_factory() as uow:
        with pytest.raises(Unauthorized):
            await access_control.authorize("", uow)
