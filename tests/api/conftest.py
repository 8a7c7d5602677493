"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from docregistry.infrastructure.auth.keycloak_provider import OIDCUser
from docregistry.interfaces.api.app import create_app
from docregistry.interfaces.api.middleware.auth import AuthMiddleware
from docregistry.interfaces.api.resources.administrator import AdministratorResource
from docregistry.interfaces.api.resources.documents import (
    DocumentLookupResource,
    DocumentResource,
    DocumentsResource,
)
from docregistry.interfaces.api.resources.health import HealthResource

from tests.conftest import ADMIN, OUTSIDER

ADMIN_TOKEN = "admin-token"


class _FakeKeycloakProvider:
    """Keycloak stand-in that accepts only known tokens."""

    def __init__(self, tokens: dict[str, str]) -> None:
        self._tokens = tokens

    def decode_token(self, token: str) -> OIDCUser | None:
        user_id = self._tokens.get(token)
        if user_id is None:
            return None
        return OIDCUser(user_id=user_id, username=user_id)


def _create_app(register_document, find_document, access_control, auth: AuthMiddleware):
    return create_app(
        documents_resource=DocumentsResource(register_document, access_control),
        document_resource=DocumentResource(find_document),
        lookup_resource=DocumentLookupResource(find_document),
        administrator_resource=AdministratorResource(access_control),
        health_resource=HealthResource(access_control),
        middleware=[auth],
    )


@pytest.fixture
def app(register_document, find_document, access_control):
    """Falcon ASGI app over the in-memory registry, identities from the header."""
    return _create_app(register_document, find_document, access_control, AuthMiddleware())


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def keycloak_client(register_document, find_document, access_control) -> TestClient:
    """Test client for an app with Keycloak token validation enabled."""
    provider = _FakeKeycloakProvider({ADMIN_TOKEN: ADMIN})
    return TestClient(
        _create_app(register_document, find_document, access_control, AuthMiddleware(provider))
    )


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"X-Caller-Identity": ADMIN}


@pytest.fixture
def outsider_headers() -> dict[str, str]:
    return {"X-Caller-Identity": OUTSIDER}
