"""Registry state repository port - administrator and sequence counter."""

from typing import Protocol


class RegistryStateRepository(Protocol):
    """Port for the single-row registry state."""

    async def initialize(self, administrator: str) -> str: ...

    async def get_administrator(self, *, for_update: bool = False) -> str | None: ...

    async def set_administrator(self, identity: str) -> None: ...

    async def get_sequence(self) -> int: ...

    async def increment_sequence(self) -> int: ...
