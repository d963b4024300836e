"""
Task API - Error Mapping Tests

Domain errors and unexpected exceptions become JSON bodies with the right
status code.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from taskapi.config import settings
from taskapi.errors import (
    ConflictError,
    ExpiredTokenError,
    InternalError,
    NotFoundError,
    TaskApiError,
    ValidationError,
)
from taskapi.main import handle_task_api_error, handle_unexpected_error


@pytest.fixture
def probe_client():
    """A bare app wired with the production error handlers."""
    probe = FastAPI()
    probe.add_exception_handler(TaskApiError, handle_task_api_error)
    probe.add_exception_handler(Exception, handle_unexpected_error)

    errors = {
        "validation": ValidationError("Title is required"),
        "conflict": ConflictError("User with this email already exists"),
        "expired": ExpiredTokenError(),
        "missing": NotFoundError("Task not found"),
        "internal": InternalError("Failed to fetch tasks"),
    }

    @probe.get("/raise/{name}")
    async def raise_error(name: str):
        raise errors[name]

    @probe.get("/crash")
    async def crash():
        raise RuntimeError("disk on fire")

    return TestClient(probe, raise_server_exceptions=False)


@pytest.mark.parametrize(
    "name, status_code, message",
    [
        ("validation", 400, "Title is required"),
        ("conflict", 400, "User with this email already exists"),
        ("expired", 401, "Token expired. Please log in again."),
        ("missing", 404, "Task not found"),
        ("internal", 500, "Failed to fetch tasks"),
    ],
)
def test_domain_errors(probe_client, name, status_code, message):
    response = probe_client.get(f"/raise/{name}")
    assert response.status_code == status_code
    assert response.json() == {"error": message}


def test_auth_errors_carry_challenge_header(probe_client):
    response = probe_client.get("/raise/expired")
    assert response.headers["WWW-Authenticate"] == "Bearer"


def test_unexpected_error_shows_detail_in_development(probe_client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "development")
    response = probe_client.get("/crash")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "message": "disk on fire"}


def test_unexpected_error_hides_detail_in_production(probe_client, monkeypatch):
    monkeypatch.setattr(settings, "ENVIRONMENT", "production")
    response = probe_client.get("/crash")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error", "message": "Something went wrong"}
