"""Administrator API resources."""

import falcon.asgi

from docregistry.application.ports import AccessControl
from docregistry.domain.exceptions import Unauthorized, ValidationError


class AdministratorResource:
    """GET/PUT /v1/administrator, GET /v1/administrator/{identity}."""

    def __init__(self, access_control: AccessControl) -> None:
        self._access_control = access_control

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Current administrator identity."""
        resp.media = {"administrator": await self._access_control.get_administrator()}
        resp.status = falcon.HTTP_200

    async def on_get_check(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, identity: str
    ) -> None:
        """Whether identity is the administrator."""
        resp.media = {
            "identity": identity,
            "is_administrator": await self._access_control.is_administrator(identity),
        }
        resp.status = falcon.HTTP_200

    async def on_put(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Request administration transfer to JSON {identity}.

        Always 202: a transfer to the system identity is silently ignored, so
        callers must verify via GET /v1/administrator/{identity}.
        """
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return

        if not await self._access_control.is_administrator(user.user_id):
            _forbid(resp)
            return

        try:
            body = await req.get_media()
            new_identity = body["identity"]
            if not isinstance(new_identity, str):
                raise ValueError("identity must be a string")
        except (KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            await self._access_control.transfer_administration(user.user_id, new_identity)
        except Unauthorized:
            _forbid(resp)
            return
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        resp.status = falcon.HTTP_202
        resp.media = {
            "status": "transfer requested; verify via is_administrator",
            "identity": new_identity,
        }


def _forbid(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Caller is not the administrator"}
