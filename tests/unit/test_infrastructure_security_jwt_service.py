"""Unit tests for JWTService.

Tests cover:
- Minting access and refresh tokens (claims, structure)
- Verification of valid tokens
- Expiry (freezegun moves the wall clock past exp)
- Kind confusion (refresh presented as access and vice versa)
- Tampered and garbage tokens
- Constructor secret checks

Note:
    Synchronous tests: JWTService operates synchronously on JWT strings.
"""

from datetime import timedelta
from uuid import UUID

import jwt
import pytest
from freezegun import freeze_time
from uuid_extensions import uuid7

from warden.core.result import Failure, Success
from warden.domain.enums import TokenType
from warden.domain.errors import TokenError
from warden.infrastructure.security import JWTService
from tests.conftest import TEST_ACCESS_SECRET, TEST_REFRESH_SECRET


@pytest.mark.unit
class TestJWTServiceMint:
    """Test token minting."""

    def test_mint_returns_three_part_jwt(self, token_service):
        token = token_service.mint(TokenType.ACCESS, uuid7(), "u@test.com")

        assert len(token.split(".")) == 3

    def test_mint_embeds_required_claims(self, token_service):
        user_id = uuid7()
        token = token_service.mint(TokenType.REFRESH, user_id, "u@test.com")

        claims = jwt.decode(token, TEST_REFRESH_SECRET, algorithms=["HS256"])

        assert claims["sub"] == str(user_id)
        assert claims["email"] == "u@test.com"
        assert claims["type"] == "refresh"
        assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())
        assert claims["jti"]

    def test_each_token_has_unique_jti(self, token_service):
        user_id = uuid7()
        first = token_service.mint(TokenType.ACCESS, user_id, "u@test.com")
        second = token_service.mint(TokenType.ACCESS, user_id, "u@test.com")

        assert first != second

    def test_access_token_ttl_seconds(self, token_service):
        assert token_service.access_token_ttl_seconds == 900
        assert token_service.lifetime(TokenType.ACCESS) == timedelta(minutes=15)


@pytest.mark.unit
class TestJWTServiceVerify:
    """Test token verification."""

    def test_verify_valid_access_token(self, token_service):
        user_id = uuid7()
        token = token_service.mint(TokenType.ACCESS, user_id, "u@test.com")

        result = token_service.verify(TokenType.ACCESS, token)

        assert isinstance(result, Success)
        assert result.value.user_id == user_id
        assert isinstance(result.value.user_id, UUID)
        assert result.value.email == "u@test.com"
        assert result.value.token_type is TokenType.ACCESS

    def test_refresh_token_rejected_as_access(self, token_service):
        token = token_service.mint(TokenType.REFRESH, uuid7(), "u@test.com")

        result = token_service.verify(TokenType.ACCESS, token)

        assert isinstance(result, Failure)

    def test_access_token_rejected_as_refresh(self, token_service):
        token = token_service.mint(TokenType.ACCESS, uuid7(), "u@test.com")

        result = token_service.verify(TokenType.REFRESH, token)

        assert isinstance(result, Failure)

    def test_type_claim_checked_even_with_matching_signature(self, token_service):
        """A token signed with the access secret but typed 'refresh' is rejected."""
        forged = jwt.encode(
            {
                "sub": str(uuid7()),
                "email": "u@test.com",
                "type": "refresh",
                "iat": 1_700_000_000,
                "exp": 4_000_000_000,
                "jti": "x",
            },
            TEST_ACCESS_SECRET,
            algorithm="HS256",
        )

        result = token_service.verify(TokenType.ACCESS, forged)

        assert result == Failure(error=TokenError.WRONG_TOKEN_TYPE)

    def test_expired_access_token(self, token_service):
        with freeze_time("2025-01-01 12:00:00"):
            token = token_service.mint(TokenType.ACCESS, uuid7(), "u@test.com")

        with freeze_time("2025-01-01 12:16:00"):
            result = token_service.verify(TokenType.ACCESS, token)

        assert result == Failure(error=TokenError.EXPIRED_TOKEN)

    def test_access_token_valid_just_before_expiry(self, token_service):
        with freeze_time("2025-01-01 12:00:00"):
            token = token_service.mint(TokenType.ACCESS, uuid7(), "u@test.com")

        with freeze_time("2025-01-01 12:14:00"):
            result = token_service.verify(TokenType.ACCESS, token)

        assert isinstance(result, Success)

    def test_tampered_token_rejected(self, token_service):
        token = token_service.mint(TokenType.ACCESS, uuid7(), "u@test.com")
        header, payload, signature = token.split(".")
        tampered = f"{header}.{payload}.{signature[::-1]}"

        result = token_service.verify(TokenType.ACCESS, tampered)

        assert result == Failure(error=TokenError.INVALID_TOKEN)

    def test_garbage_rejected(self, token_service):
        result = token_service.verify(TokenType.ACCESS, "not-a-jwt")

        assert result == Failure(error=TokenError.INVALID_TOKEN)

    def test_missing_claim_rejected(self, token_service):
        token = jwt.encode(
            {"sub": str(uuid7()), "type": "access", "exp": 4_000_000_000},
            TEST_ACCESS_SECRET,
            algorithm="HS256",
        )

        result = token_service.verify(TokenType.ACCESS, token)

        assert result == Failure(error=TokenError.INVALID_TOKEN)

    def test_non_uuid_subject_is_malformed(self, token_service):
        token = jwt.encode(
            {
                "sub": "not-a-uuid",
                "email": "u@test.com",
                "type": "access",
                "iat": 1_700_000_000,
                "exp": 4_000_000_000,
                "jti": "x",
            },
            TEST_ACCESS_SECRET,
            algorithm="HS256",
        )

        result = token_service.verify(TokenType.ACCESS, token)

        assert result == Failure(error=TokenError.MALFORMED_PAYLOAD)


@pytest.mark.unit
class TestJWTServiceConstruction:
    """Test constructor validation."""

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError, match="at least 32 bytes"):
            JWTService(access_secret="short", refresh_secret="b" * 32)

    def test_identical_secrets_rejected(self):
        with pytest.raises(ValueError, match="different secrets"):
            JWTService(access_secret="a" * 32, refresh_secret="a" * 32)
