"""Shared fixtures for web API tests."""

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from cli.config_models import FlowdeskConfig
from enrichment import EnrichmentService
from web.app import app
from web.deps import get_config, get_document_store, get_enrichment

TEST_SECRET = "test-secret-key"


def _encode(claims: dict, secret: str = TEST_SECRET) -> str:
    return jwt.encode(claims, secret, algorithm="HS256")


@pytest.fixture
def make_token():
    """Signed token for an arbitrary claim set."""
    return _encode


@pytest.fixture(autouse=True)
def _jwt_secret(monkeypatch):
    monkeypatch.setenv("FLOWDESK_JWT_SECRET", TEST_SECRET)


@pytest.fixture
def enrichment():
    return EnrichmentService()


@pytest.fixture
def config():
    return FlowdeskConfig()


@pytest.fixture
def client(documents, enrichment, config):
    app.dependency_overrides[get_document_store] = lambda: documents
    app.dependency_overrides[get_enrichment] = lambda: enrichment
    app.dependency_overrides[get_config] = lambda: config
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(user_id):
    token = _encode({"sub": user_id, "email": "a@example.com"})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def other_headers():
    token = _encode({"sub": "user-456"})
    return {"Authorization": f"Bearer {token}"}
