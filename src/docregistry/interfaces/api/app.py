"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App

from docregistry.domain.exceptions import NotFound
from docregistry.interfaces.api.resources.administrator import AdministratorResource
from docregistry.interfaces.api.resources.documents import (
    DocumentLookupResource,
    DocumentResource,
    DocumentsResource,
)
from docregistry.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


async def _log_exception(req, resp, ex, params):
    logger.error(
        "Unhandled error on %s %s", req.method, req.path, exc_info=(type(ex), ex, ex.__traceback__)
    )
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}


async def _not_found(req, resp, ex, params):
    resp.status = falcon.HTTP_404
    resp.media = {"error": str(ex)}


def create_app(
    documents_resource: DocumentsResource,
    document_resource: DocumentResource,
    lookup_resource: DocumentLookupResource,
    administrator_resource: AdministratorResource,
    health_resource: HealthResource,
    middleware: list | None = None,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App(middleware=middleware or [])
    app.add_error_handler(Exception, _log_exception)
    app.add_error_handler(NotFound, _not_found)
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/documents", documents_resource)
    app.add_route("/v1/documents/{document_id:int}", document_resource)
    app.add_route("/v1/documents/by-locator", lookup_resource, suffix="locator")
    app.add_route("/v1/documents/by-title", lookup_resource, suffix="title")
    app.add_route("/v1/documents/by-hash/{content_hash}", lookup_resource, suffix="hash")
    app.add_route("/v1/administrator", administrator_resource)
    app.add_route("/v1/administrator/{identity}", administrator_resource, suffix="check")
    return app
