"""API tests for password reset endpoints.

Tests the HTTP request/response cycle for:
- POST /api/v1/password-reset-tokens (request reset, always 202)
- POST /api/v1/password-resets (confirm reset)
"""

import pytest
from fastapi.testclient import TestClient

from warden.core.container import (
    get_confirm_password_reset_handler,
    get_request_password_reset_handler,
)
from warden.core.result import Failure, Success
from warden.domain.errors import AuthenticationError
from warden.main import app

VALID_TOKEN = "a" * 64
USED_TOKEN = "b" * 64


class StubRequestPasswordResetHandler:
    """Always succeeds, like the real handler."""

    def __init__(self):
        self.emails = []

    async def handle(self, cmd, request=None):
        self.emails.append(cmd.email)
        return Success(value=None)


class StubConfirmPasswordResetHandler:
    """Only VALID_TOKEN succeeds."""

    async def handle(self, cmd, request=None):
        if cmd.token != VALID_TOKEN:
            return Failure(error=AuthenticationError.INVALID_OR_EXPIRED_TOKEN)
        return Success(value=None)


@pytest.fixture
def request_handler():
    return StubRequestPasswordResetHandler()


@pytest.fixture(autouse=True)
def override_dependencies(request_handler):
    """Override app dependencies with test doubles."""
    app.dependency_overrides[get_request_password_reset_handler] = (
        lambda: request_handler
    )
    app.dependency_overrides[get_confirm_password_reset_handler] = (
        lambda: StubConfirmPasswordResetHandler()
    )
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestCreatePasswordResetToken:
    """Tests for POST /api/v1/password-reset-tokens."""

    def test_known_and_unknown_email_look_the_same(self, client, request_handler):
        known = client.post(
            "/api/v1/password-reset-tokens", json={"email": "user@example.com"}
        )
        unknown = client.post(
            "/api/v1/password-reset-tokens", json={"email": "nobody@example.com"}
        )

        assert known.status_code == unknown.status_code == 202
        assert known.json() == unknown.json()
        assert request_handler.emails == ["user@example.com", "nobody@example.com"]

    def test_invalid_email(self, client):
        response = client.post(
            "/api/v1/password-reset-tokens", json={"email": "not-an-email"}
        )

        assert response.status_code == 422


@pytest.mark.api
class TestCreatePasswordReset:
    """Tests for POST /api/v1/password-resets."""

    def test_reset_success(self, client):
        response = client.post(
            "/api/v1/password-resets",
            json={"token": VALID_TOKEN, "new_password": "NewSecret456!"},
        )

        assert response.status_code == 201
        assert "new session" in response.json()["message"]

    def test_used_token_is_bad_request(self, client):
        response = client.post(
            "/api/v1/password-resets",
            json={"token": USED_TOKEN, "new_password": "NewSecret456!"},
        )

        assert response.status_code == 400
        assert "WWW-Authenticate" not in response.headers
        data = response.json()
        assert data["status"] == 400
        assert data["type"].endswith("/errors/invalid-or-expired-token")

    def test_malformed_token(self, client):
        response = client.post(
            "/api/v1/password-resets",
            json={"token": "z" * 64, "new_password": "NewSecret456!"},
        )

        assert response.status_code == 422

    def test_weak_new_password(self, client):
        response = client.post(
            "/api/v1/password-resets",
            json={"token": VALID_TOKEN, "new_password": "short"},
        )

        assert response.status_code == 422
