"""CORS middleware for browser clients of the registry API."""

import falcon.asgi

# lookups are GET, registration is POST, administrator transfer is PUT
_ALLOWED_METHODS = "GET, POST, PUT"


class CORSMiddleware:
    """Echo allowed origins and answer OPTIONS preflight requests."""

    def __init__(self, origins: list[str], identity_header: str = "X-Caller-Identity") -> None:
        self._origins = frozenset(origins)
        self._headers = {
            "Access-Control-Allow-Methods": _ALLOWED_METHODS,
            "Access-Control-Allow-Headers": f"Authorization, Content-Type, {identity_header}",
            "Vary": "Origin",
        }

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        if req.method == "OPTIONS":
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        origin = req.get_header("Origin")
        if origin not in self._origins:
            return
        resp.set_header("Access-Control-Allow-Origin", origin)
        resp.set_headers(self._headers)
