import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from vibecart.config import database
from vibecart.main import app


@pytest.fixture
def client(monkeypatch):
    """App client backed by a fresh in-memory MongoDB for every test."""
    monkeypatch.setattr(database, "create_client", lambda: AsyncMongoMockClient())
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def session_headers():
    return {"session-id": "session-a"}


@pytest.fixture
def products(client):
    """Seeded products keyed by name"""
    response = client.get("/api/products")
    assert response.status_code == 200
    return {product["name"]: product for product in response.json()}


@pytest.fixture
def lenient_client(monkeypatch):
    """Like `client`, but unhandled errors come back as responses instead of being raised."""
    monkeypatch.setattr(database, "create_client", lambda: AsyncMongoMockClient())
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
