"""Access control port - single-administrator authorization."""

from dataclasses import dataclass
from typing import Protocol

from docregistry.application.ports.unit_of_work import UnitOfWork


@dataclass(frozen=True)
class TransferOutcome:
    """Result of a transfer request. applied is False for the silent self-reference no-op."""

    requested: str
    applied: bool


class AccessControl(Protocol):
    """Port for the administrator identity and authorization checks."""

    async def initialize(self, identity: str) -> str: ...

    async def get_administrator(self) -> str | None: ...

    async def is_administrator(self, identity: str) -> bool: ...

    async def authorize(self, identity: str, uow: UnitOfWork) -> None: ...

    async def transfer_administration(
        self, caller_identity: str, new_identity: str
    ) -> TransferOutcome: ...
