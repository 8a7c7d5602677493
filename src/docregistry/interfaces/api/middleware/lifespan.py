"""Lifespan middleware - storage startup and administrator bootstrap."""

import logging
from typing import Any

from psycopg_pool import AsyncConnectionPool

from docregistry.application.ports import AccessControl

logger = logging.getLogger(__name__)


class LifespanMiddleware:
    """Opens the connection pool (if any), then initializes the administrator.

    The pool is closed on shutdown. Initialization runs after the pool is open
    so that a durable backend can keep an already stored administrator.
    """

    def __init__(
        self,
        access_control: AccessControl,
        administrator: str,
        pool: AsyncConnectionPool | None = None,
    ) -> None:
        self._access_control = access_control
        self._administrator = administrator
        self._pool = pool

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Open pool and bootstrap the administrator when the ASGI server starts."""
        if self._pool is not None:
            await self._pool.open(wait=True)
        await self._access_control.initialize(self._administrator)

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        """Close pool when ASGI server shuts down."""
        if self._pool is not None:
            await self._pool.close()
            logger.info("Connection pool closed")
