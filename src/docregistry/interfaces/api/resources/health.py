"""Health check endpoints."""

import falcon.asgi

from docregistry.application.ports import AccessControl


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, access_control: AccessControl | None = None) -> None:
        self._access_control = access_control

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (storage reachable, administrator set)."""
        if self._access_control and not await self._access_control.get_administrator():
            resp.media = {"status": "initializing"}
            resp.status = falcon.HTTP_503
            return
        resp.media = {"status": "ready"}
        resp.status = falcon.HTTP_200
