"""
Task API - Test Configuration

Each test gets a fresh SQLite file under pytest's tmp_path.
"""

from typing import Optional

import pytest
from fastapi.testclient import TestClient

from taskapi.main import app
from taskapi.config import settings
from taskapi.database import database
from taskapi.auth.models import User
from taskapi.auth.repository import UserRepository


@pytest.fixture
def client(tmp_path, monkeypatch):
    """Create a test client backed by a throwaway database."""
    monkeypatch.setattr(settings, "DATABASE_PATH", str(tmp_path / "tasks.db"))
    # Minimum bcrypt cost keeps the suite fast
    monkeypatch.setattr(settings, "BCRYPT_ROUNDS", 4)
    with TestClient(app) as test_client:
        yield test_client


def fetch_user(client: TestClient, email: str) -> Optional[User]:
    """Read a user row straight from the store, on the app's event loop."""

    async def _get() -> Optional[User]:
        async with database.session() as session:
            return await UserRepository(session).get_by_email(email)

    return client.portal.call(_get)


@pytest.fixture
def registered_user(client):
    """Register a test user and return credentials."""
    credentials = {"name": "Test User", "email": "test@example.com", "password": "testpassword123"}
    client.post("/api/register", json=credentials)
    return credentials


@pytest.fixture
def auth_token(client, registered_user):
    """Get an auth token for the registered user."""
    response = client.post(
        "/api/login",
        json={"email": registered_user["email"], "password": registered_user["password"]},
    )
    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token):
    """Create Authorization headers for authenticated requests."""
    return {"Authorization": f"Bearer {auth_token}"}


@pytest.fixture
def second_user_credentials():
    """Credentials for a second test user."""
    return {"name": "Second User", "email": "second@example.com", "password": "secondpassword123"}


@pytest.fixture
def second_user_token(client, second_user_credentials):
    """Register a second user and get their auth token."""
    client.post("/api/register", json=second_user_credentials)
    response = client.post(
        "/api/login",
        json={
            "email": second_user_credentials["email"],
            "password": second_user_credentials["password"],
        },
    )
    return response.json()["token"]


@pytest.fixture
def second_auth_headers(second_user_token):
    """Authorization headers for the second user."""
    return {"Authorization": f"Bearer {second_user_token}"}
