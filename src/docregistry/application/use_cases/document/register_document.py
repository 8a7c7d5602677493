"""Register document use case."""

import logging

from docregistry.application.dto.document_dto import DocumentRegisterInput
from docregistry.application.ports import AccessControl, Clock
from docregistry.domain.entities import DocumentRecord
from docregistry.domain.exceptions import (
    DuplicateLocator,
    DuplicateTitle,
    Unauthorized,
    ValidationError,
)
from docregistry.domain.value_objects import ContentHash, Title

logger = logging.getLogger(__name__)


class RegisterDocumentUseCase:
    """Register a new immutable document record. Administrator only."""

    def __init__(
        self,
        unit_of_work_factory: type,
        access_control: AccessControl,
        clock: Clock,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._access_control = access_control
        self._clock = clock

    async def execute(self, caller_identity: str, input_data: DocumentRegisterInput) -> int:
        """Register document and return its id.

        Authorization, input validation and both uniqueness checks run before
        any mutation. The unit of work rolls back on any exception, so a failed call
        leaves the counter and all indexes untouched.
        """
        async with self._uow_factory() as uow:
            try:
                await self._access_control.authorize(caller_identity, uow)
            except Unauthorized:
                logger.warning("Rejected registration by non-administrator %r", caller_identity)
                raise

            if not input_data.locator:
                raise ValidationError("Locator must not be empty")
            try:
                title = Title(input_data.title)
                content_hash = ContentHash(input_data.content_hash)
            except ValueError as e:
                logger.warning("Rejected registration, invalid input: %s", e)
                raise ValidationError(str(e)) from e

            if await uow.records.get_by_locator(input_data.locator):
                logger.warning("Rejected registration, duplicate locator %r", input_data.locator)
                raise DuplicateLocator(f"Locator already registered: {input_data.locator}")
            if await uow.records.get_by_title(title.value):
                logger.warning("Rejected registration, duplicate title %r", title.value)
                raise DuplicateTitle(f"Title already registered: {title.value}")

            record_id = await uow.state.increment_sequence()
            record = DocumentRecord(
                locator=input_data.locator,
                title=title.value,
                created_at=self._clock.now(),
                author=caller_identity,
                content_hash=content_hash.value,
                id=record_id,
            )
            await uow.records.create(record)

        logger.info(
            "Registered document id=%d title=%r hash=%s",
            record.id,
            record.title,
            content_hash.hex(),
        )
        return record.id
