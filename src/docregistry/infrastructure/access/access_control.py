"""Access control implementation - checks against the stored administrator."""

import logging

from docregistry.application.ports import TransferOutcome, UnitOfWork
from docregistry.domain.exceptions import Unauthorized, ValidationError

logger = logging.getLogger(__name__)


class RegistryAccessControl:
    """Single-administrator access control backed by registry state."""

    def __init__(self, unit_of_work_factory: type, system_identity: str) -> None:
        self._uow_factory = unit_of_work_factory
        self._system_identity = system_identity

    async def initialize(self, identity: str) -> str:
        """Set the administrator at bootstrap. A stored administrator is kept."""
        async with self._uow_factory() as uow:
            administrator = await uow.state.initialize(identity)
        if administrator != identity:
            logger.info("Administrator already initialized, keeping %r", administrator)
        else:
            logger.info("Administrator initialized to %r", administrator)
        return administrator

    async def get_administrator(self) -> str | None:
        async with self._uow_factory() as uow:
            return await uow.state.get_administrator()

    async def is_administrator(self, identity: str) -> bool:
        """Check if identity is the current administrator."""
        async with self._uow_factory() as uow:
            return await uow.state.get_administrator() == identity

    async def authorize(self, identity: str, uow: UnitOfWork) -> None:
        """Raise Unauthorized unless identity is the administrator.

        Locks the state row for the rest of the unit of work so that the
        administrator cannot change under a guarded write.
        """
        administrator = await uow.state.get_administrator(for_update=True)
        if administrator is None or administrator != identity:
            raise Unauthorized("Caller is not the administrator")

    async def transfer_administration(
        self, caller_identity: str, new_identity: str
    ) -> TransferOutcome:
        """Transfer administration. Administrator only.

        Transfer to the registry's own system identity is silently ignored;
        callers should verify the result with is_administrator.
        """
        async with self._uow_factory() as uow:
            await self.authorize(caller_identity, uow)
            if not new_identity:
                raise ValidationError("New administrator identity must not be empty")
            if new_identity == self._system_identity:
                logger.warning(
                    "Ignored administration transfer to system identity %r", new_identity
                )
                return TransferOutcome(requested=new_identity, applied=False)
            await uow.state.set_administrator(new_identity)

        logger.info("Administration transferred from %r to %r", caller_identity, new_identity)
        return TransferOutcome(requested=new_identity, applied=True)
