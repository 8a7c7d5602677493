"""Document API resources."""

import falcon.asgi

from docregistry.application.dto.document_dto import DocumentRegisterInput
from docregistry.application.ports import AccessControl
from docregistry.application.use_cases.document.find_document import FindDocumentUseCase
from docregistry.application.use_cases.document.register_document import (
    RegisterDocumentUseCase,
)
from docregistry.domain.entities import DocumentRecord
from docregistry.domain.exceptions import (
    DuplicateDocument,
    NotFound,
    Unauthorized,
    ValidationError,
)
from docregistry.domain.value_objects import ContentHash


class DocumentsResource:
    """POST /v1/documents - register document (administrator only)."""

    def __init__(
        self, register_document: RegisterDocumentUseCase, access_control: AccessControl
    ) -> None:
        self._register_document = register_document
        self._access_control = access_control

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Register document from JSON {locator, title, content_hash (hex)}."""
        user = getattr(req.context, "user", None)
        if not user:
            resp.status = falcon.HTTP_401
            resp.media = {"error": "Unauthorized"}
            return
        # non-administrators are refused before the body is looked at;
        # the use case re-checks inside its unit of work
        if not await self._access_control.is_administrator(user.user_id):
            _forbid(resp)
            return

        try:
            body = await req.get_media()
            locator = body["locator"]
            title = body["title"]
            content_hash = ContentHash.from_hex(body["content_hash"])
            if not isinstance(locator, str) or not isinstance(title, str):
                raise ValueError("locator and title must be strings")
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return

        try:
            record_id = await self._register_document.execute(
                user.user_id,
                DocumentRegisterInput(
                    locator=locator,
                    title=title,
                    content_hash=content_hash.value,
                ),
            )
            resp.media = {"id": record_id}
            resp.status = falcon.HTTP_201
        except Unauthorized:
            _forbid(resp)
        except DuplicateDocument as e:
            resp.status = falcon.HTTP_409
            resp.media = {"error": str(e), "kind": type(e).__name__}
        except ValidationError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}


class DocumentResource:
    """GET /v1/documents/{document_id} - lookup by id."""

    def __init__(self, find_document: FindDocumentUseCase) -> None:
        self._find_document = find_document

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: int,
    ) -> None:
        """Get document by id. Zero-value record on miss unless strict=true."""
        record = await self._find_document.get_by_id(document_id)
        _respond_with_record(req, resp, record)


class DocumentLookupResource:
    """GET /v1/documents/by-{locator,title,hash} - public lookups by key."""

    def __init__(self, find_document: FindDocumentUseCase) -> None:
        self._find_document = find_document

    async def on_get_locator(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/documents/by-locator?locator=..."""
        locator = req.get_param("locator", required=True)
        record = await self._find_document.get_by_locator(locator)
        _respond_with_record(req, resp, record)

    async def on_get_title(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/documents/by-title?title=..."""
        title = req.get_param("title", required=True)
        record = await self._find_document.get_by_title(title)
        _respond_with_record(req, resp, record)

    async def on_get_hash(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        content_hash: str,
    ) -> None:
        """GET /v1/documents/by-hash/{content_hash} (hex digest)."""
        try:
            digest = ContentHash.from_hex(content_hash)
        except ValueError as e:
            resp.status = falcon.HTTP_400
            resp.media = {"error": str(e)}
            return
        record = await self._find_document.get_by_hash(digest.value)
        _respond_with_record(req, resp, record)


def _forbid(resp: falcon.asgi.Response) -> None:
    resp.status = falcon.HTTP_403
    resp.media = {"error": "Caller is not the administrator"}


def _respond_with_record(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, record: DocumentRecord | None
) -> None:
    """Zero-value record on a miss; strict=true raises NotFound instead."""
    if record is None:
        if req.get_param_as_bool("strict", default=False):
            raise NotFound("Document not found")
        record = DocumentRecord.empty()
    resp.media = _record_to_dict(record)
    resp.status = falcon.HTTP_200


def _record_to_dict(r: DocumentRecord) -> dict:
    return {
        "id": r.id,
        "locator": r.locator,
        "title": r.title,
        "content_hash": r.content_hash.hex(),
        "author": r.author,
        "created_at": r.created_at.isoformat(),
    }
