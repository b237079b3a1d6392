"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from mesto import database
from mesto.main import app

TEST_PASSWORD = "secret1"  # noqa: S105


class AuthUser(dict):
    """Dict subclass holding the signed-up user plus its credentials."""

    def __init__(self, *args, email: str, password: str, **kwargs):
        super().__init__(*args, **kwargs)
        self.email = email
        self.password = password

    @property
    def id(self) -> str:
        return self["_id"]


@pytest.fixture(scope="function")
def client(monkeypatch):
    """Create a test client backed by an in-memory MongoDB."""
    monkeypatch.setattr(database, "AsyncIOMotorClient", AsyncMongoMockClient)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Return a function that signs up a user through the API."""

    def _register(email: str, password: str = TEST_PASSWORD, **fields) -> AuthUser:
        response = client.post("/signup", json={"email": email, "password": password, **fields})
        assert response.status_code == 201, response.text
        return AuthUser(response.json()["data"], email=email, password=password)

    return _register


@pytest.fixture
def login(client):
    """Return a function that logs the client in; the client keeps the jwt cookie."""

    def _login(user: AuthUser) -> None:
        response = client.post("/signin", json={"email": user.email, "password": user.password})
        assert response.status_code == 200, response.text

    return _login


@pytest.fixture
def user(register, login):
    """Create a user and log the client in as that user."""
    created = register("test@example.com", name="Test User")
    login(created)
    return created


@pytest.fixture
def other_user(register):
    """Create a second user without logging in as them."""
    return register("other@example.com")


@pytest.fixture
def card(client, user):
    """Create a card owned by ``user``."""
    response = client.post(
        "/cards",
        json={"name": "Baikal", "link": "https://example.com/images/baikal.jpg"},
    )
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def mongo_db():
    """Bare in-memory database for service-level tests."""
    return AsyncMongoMockClient()["mesto_test"]
