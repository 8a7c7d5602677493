"""Application entry point and composition root."""

import logging

from falcon.asgi import App

from docregistry import __version__
from docregistry.application.use_cases.document.find_document import FindDocumentUseCase
from docregistry.application.use_cases.document.register_document import (
    RegisterDocumentUseCase,
)
from docregistry.config import Settings, get_settings
from docregistry.infrastructure.access.access_control import RegistryAccessControl
from docregistry.infrastructure.auth.keycloak_provider import KeycloakProvider
from docregistry.infrastructure.clock.system_clock import SystemClock
from docregistry.infrastructure.persistence.memory.store import InMemoryStore
from docregistry.infrastructure.persistence.memory.unit_of_work import (
    create_uow_factory as create_memory_uow_factory,
)
from docregistry.infrastructure.persistence.postgres.unit_of_work import (
    create_pool,
    create_uow_factory as create_postgres_uow_factory,
)
from docregistry.interfaces.api.app import create_app
from docregistry.interfaces.api.middleware.auth import AuthMiddleware
from docregistry.interfaces.api.middleware.cors import CORSMiddleware
from docregistry.interfaces.api.middleware.lifespan import LifespanMiddleware
from docregistry.interfaces.api.resources.administrator import AdministratorResource
from docregistry.interfaces.api.resources.documents import (
    DocumentLookupResource,
    DocumentResource,
    DocumentsResource,
)
from docregistry.interfaces.api.resources.health import HealthResource
from docregistry.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def create_docregistry_app(settings: Settings | None = None) -> App:
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()

    pool = None
    if settings.storage_backend == "postgres":
        pool = create_pool(settings.database_url)
        uow_factory = create_postgres_uow_factory(pool)
    else:
        uow_factory = create_memory_uow_factory(InMemoryStore())
    logger.info("Using %s storage backend", settings.storage_backend)

    keycloak = (
        KeycloakProvider(
            server_url=settings.keycloak_url,
            realm=settings.keycloak_realm,
            client_id=settings.keycloak_client_id,
            client_secret=settings.keycloak_client_secret,
        )
        if settings.keycloak_client_secret
        else None
    )

    access_control = RegistryAccessControl(
        unit_of_work_factory=uow_factory,
        system_identity=settings.system_identity,
    )
    register_document = RegisterDocumentUseCase(
        unit_of_work_factory=uow_factory,
        access_control=access_control,
        clock=SystemClock(),
    )
    find_document = FindDocumentUseCase(unit_of_work_factory=uow_factory)

    cors_origins = [o.strip() for o in settings.cors_origins.split(",") if o.strip()]
    middleware = [
        CORSMiddleware(cors_origins, identity_header=settings.identity_header),
        LifespanMiddleware(access_control, settings.administrator, pool=pool),
        AuthMiddleware(keycloak, identity_header=settings.identity_header),
    ]

    return create_app(
        documents_resource=DocumentsResource(register_document, access_control),
        document_resource=DocumentResource(find_document),
        lookup_resource=DocumentLookupResource(find_document),
        administrator_resource=AdministratorResource(access_control),
        health_resource=HealthResource(access_control),
        middleware=middleware,
    )


def main() -> None:
    """CLI entry point - run uvicorn server."""
    import uvicorn

    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("docregistry v%s (%s)", __version__, settings.environment)
    app = create_docregistry_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
