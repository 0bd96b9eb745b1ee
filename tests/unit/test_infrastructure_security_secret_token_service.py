"""Unit tests for SecretTokenService."""

import hashlib
import re

import pytest

from warden.infrastructure.security import SecretTokenService


@pytest.mark.unit
class TestSecretTokenService:
    """Secret generation and SHA-256 digests."""

    def test_otp_is_fixed_length_digits(self, secret_token_service):
        for _ in range(50):
            code = secret_token_service.generate_otp()
            assert re.fullmatch(r"\d{6}", code)

    def test_otp_length_configurable(self):
        assert len(SecretTokenService(otp_length=8).generate_otp()) == 8

    def test_otp_length_below_four_rejected(self):
        with pytest.raises(ValueError):
            SecretTokenService(otp_length=3)

    def test_reset_token_is_64_hex(self, secret_token_service):
        token = secret_token_service.generate_reset_token()

        assert re.fullmatch(r"[0-9a-f]{64}", token)

    def test_reset_tokens_are_unique(self, secret_token_service):
        tokens = {secret_token_service.generate_reset_token() for _ in range(20)}

        assert len(tokens) == 20

    def test_hash_token_is_sha256_hex(self, secret_token_service):
        assert secret_token_service.hash_token("abc") == (
            hashlib.sha256(b"abc").hexdigest()
        )

    def test_hash_token_is_deterministic(self, secret_token_service):
        token = secret_token_service.generate_reset_token()

        assert secret_token_service.hash_token(token) == (
            secret_token_service.hash_token(token)
        )
