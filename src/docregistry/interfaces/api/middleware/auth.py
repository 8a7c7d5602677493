"""Auth middleware - resolves the caller identity for each request."""

from dataclasses import dataclass

import falcon.asgi

ANONYMOUS = "anonymous"


@dataclass
class RequestUser:
    """Caller from request context."""

    user_id: str
    username: str | None = None


class AuthMiddleware:
    """Middleware that sets req.context.user.

    With Keycloak configured only bearer tokens establish an identity: an
    invalid token leaves req.context.user as None and a missing one is
    anonymous. Without Keycloak the trusted identity header is used instead.
    """

    def __init__(self, keycloak_provider=None, identity_header: str = "X-Caller-Identity") -> None:
        self._keycloak = keycloak_provider
        self._identity_header = identity_header

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Extract caller from Authorization or identity header."""
        if self._keycloak is None:
            identity = (req.get_header(self._identity_header) or "").strip()
            req.context.user = RequestUser(user_id=identity or ANONYMOUS)
            return

        auth = req.get_header("Authorization")
        if auth and auth.startswith("Bearer "):
            user = self._keycloak.decode_token(auth[7:])
            if user:
                req.context.user = RequestUser(user_id=user.user_id, username=user.username)
            else:
                req.context.user = None
        else:
            req.context.user = RequestUser(user_id=ANONYMOUS)
