"""API tests for step-up endpoints.

Tests the HTTP request/response cycle for:
- POST /api/v1/step-up (request enablement, bearer auth)
- POST /api/v1/step-up/verifications (verify login or enable code)
"""

import pytest
from fastapi.testclient import TestClient
from uuid_extensions import uuid7

from warden.application.dtos import AuthTokens, StepUpVerification
from warden.core.container import (
    get_enable_step_up_handler,
    get_token_service,
    get_verify_one_time_secret_handler,
)
from warden.core.result import Failure, Success
from warden.domain.enums import SecretPurpose, TokenType
from warden.domain.errors import AuthenticationError
from warden.main import app


class StubEnableStepUpHandler:
    """Returns the configured result and remembers who asked."""

    def __init__(self):
        self.result = Success(value=None)
        self.user_ids = []

    async def handle(self, cmd, request=None):
        self.user_ids.append(cmd.user_id)
        return self.result


class StubVerifyOneTimeSecretHandler:
    """Code selects the outcome: 000000 wrong, 999999 locked, else success."""

    async def handle(self, cmd, request=None):
        if cmd.code == "000000":
            return Failure(error=AuthenticationError.INVALID_SECRET)
        if cmd.code == "999999":
            return Failure(error=AuthenticationError.ATTEMPTS_EXCEEDED)
        if cmd.code == "111111":
            return Failure(error=AuthenticationError.SECRET_NOT_FOUND)
        tokens = None
        if cmd.purpose is SecretPurpose.LOGIN_STEP_UP:
            tokens = AuthTokens(
                access_token="mock_access_token", refresh_token="mock_refresh_token"
            )
        return Success(
            value=StepUpVerification(
                purpose=cmd.purpose, user_id=cmd.user_id, tokens=tokens
            )
        )


@pytest.fixture
def enable_handler():
    return StubEnableStepUpHandler()


@pytest.fixture(autouse=True)
def override_dependencies(enable_handler, token_service):
    """Override app dependencies with test doubles."""
    app.dependency_overrides[get_enable_step_up_handler] = lambda: enable_handler
    app.dependency_overrides[get_verify_one_time_secret_handler] = (
        lambda: StubVerifyOneTimeSecretHandler()
    )
    app.dependency_overrides[get_token_service] = lambda: token_service
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    """Create TestClient for API tests using real app."""
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def user_id():
    return uuid7()


@pytest.fixture
def auth_headers(token_service, user_id):
    token = token_service.mint(TokenType.ACCESS, user_id, "test@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.mark.api
class TestCreateStepUp:
    """Tests for POST /api/v1/step-up."""

    def test_code_sent(self, client, auth_headers, enable_handler, user_id):
        response = client.post("/api/v1/step-up", headers=auth_headers)

        assert response.status_code == 202
        assert "verification code" in response.json()["message"]
        assert enable_handler.user_ids == [user_id]

    def test_requires_authentication(self, client, enable_handler):
        response = client.post("/api/v1/step-up")

        assert response.status_code == 401
        assert enable_handler.user_ids == []

    def test_phone_required(self, client, auth_headers, enable_handler):
        enable_handler.result = Failure(error=AuthenticationError.PHONE_REQUIRED)

        response = client.post("/api/v1/step-up", headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["type"].endswith("/errors/phone-required")

    def test_already_enabled(self, client, auth_headers, enable_handler):
        enable_handler.result = Failure(
            error=AuthenticationError.STEP_UP_ALREADY_ENABLED
        )

        response = client.post("/api/v1/step-up", headers=auth_headers)

        assert response.status_code == 409


@pytest.mark.api
class TestCreateStepUpVerification:
    """Tests for POST /api/v1/step-up/verifications."""

    def test_login_code_returns_tokens(self, client, user_id):
        response = client.post(
            "/api/v1/step-up/verifications",
            json={"user_id": str(user_id), "code": "123456", "purpose": "login_2fa"},
        )

        assert response.status_code == 201
        data = response.json()
        assert data["purpose"] == "login_2fa"
        assert data["access_token"] == "mock_access_token"
        assert data["refresh_token"] == "mock_refresh_token"

    def test_enable_code_turns_on_step_up(self, client, user_id):
        response = client.post(
            "/api/v1/step-up/verifications",
            json={"user_id": str(user_id), "code": "123456", "purpose": "enable_2fa"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["access_token"] is None
        assert data["message"] == "Two-factor verification enabled."

    @pytest.mark.parametrize(
        ("code", "status_code", "slug"),
        [
            ("000000", 400, "invalid-secret"),
            ("111111", 400, "secret-not-found"),
            ("999999", 429, "attempts-exceeded"),
        ],
    )
    def test_verification_failures(self, client, user_id, code, status_code, slug):
        response = client.post(
            "/api/v1/step-up/verifications",
            json={"user_id": str(user_id), "code": code, "purpose": "login_2fa"},
        )

        assert response.status_code == status_code
        assert response.json()["type"].endswith(f"/errors/{slug}")

    def test_reset_purpose_not_accepted(self, client, user_id):
        response = client.post(
            "/api/v1/step-up/verifications",
            json={
                "user_id": str(user_id),
                "code": "123456",
                "purpose": "forgot_password",
            },
        )

        assert response.status_code == 422

    def test_non_numeric_code_rejected(self, client, user_id):
        response = client.post(
            "/api/v1/step-up/verifications",
            json={"user_id": str(user_id), "code": "12ab56", "purpose": "login_2fa"},
        )

        assert response.status_code == 422
