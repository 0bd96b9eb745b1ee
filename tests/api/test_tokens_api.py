"""API tests for token endpoints.

Tests the HTTP request/response cycle for:
- POST /api/v1/tokens (refresh access token)

Also covers persistence faults surfacing as 503 with Retry-After.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from warden.application.dtos import AccessTokenRefresh
from warden.core.container import get_refresh_token_handler
from warden.core.result import Failure, Success
from warden.domain.errors import AuthenticationError
from warden.main import app


class StubRefreshAccessTokenHandler:
    """Token string selects the outcome."""

    async def handle(self, cmd, request=None):
        if cmd.refresh_token == "revoked":
            return Failure(error=AuthenticationError.INVALID_OR_EXPIRED_TOKEN)
        if cmd.refresh_token == "db-down":
            raise OperationalError("SELECT 1", {}, ConnectionRefusedError())
        if cmd.refresh_token == "timeout":
            raise TimeoutError("statement timeout")
        return Success(value=AccessTokenRefresh(access_token="new_access_token"))


@pytest.fixture(autouse=True)
def override_dependencies():
    """Override app dependencies with test doubles."""
    app.dependency_overrides[get_refresh_token_handler] = (
        lambda: StubRefreshAccessTokenHandler()
    )
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.mark.api
class TestCreateTokens:
    """Tests for POST /api/v1/tokens."""

    def test_refresh_success(self, client):
        response = client.post("/api/v1/tokens", json={"refresh_token": "valid"})

        assert response.status_code == 201
        assert response.json() == {
            "access_token": "new_access_token",
            "token_type": "bearer",
            "expires_in": 900,
        }

    def test_refresh_revoked_token(self, client):
        response = client.post("/api/v1/tokens", json={"refresh_token": "revoked"})

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        data = response.json()
        assert data["type"].endswith("/errors/invalid-or-expired-token")
        assert data["detail"] == "The token is invalid or has expired."

    def test_refresh_missing_token(self, client):
        response = client.post("/api/v1/tokens", json={})

        assert response.status_code == 422

    def test_database_fault_is_service_unavailable(self, client):
        response = client.post("/api/v1/tokens", json={"refresh_token": "db-down"})

        assert response.status_code == 503
        assert response.headers["Retry-After"] == "5"
        data = response.json()
        assert data["type"].endswith("/errors/service-unavailable")
        assert "OperationalError" not in data["detail"]

    def test_timeout_is_service_unavailable(self, client):
        response = client.post("/api/v1/tokens", json={"refresh_token": "timeout"})

        assert response.status_code == 503
