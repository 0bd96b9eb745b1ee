"""Unit tests for domain validators and Annotated request types."""

import pytest
from pydantic import ValidationError

from warden.domain.validators import (
    validate_email,
    validate_otp_code,
    validate_phone,
    validate_strong_password,
    validate_token_format,
)
from warden.schemas.auth_schemas import (
    PasswordResetCreateRequest,
    StepUpVerificationCreateRequest,
    UserCreateRequest,
)


@pytest.mark.unit
class TestValidators:
    """Pure validator functions."""

    def test_email_normalized_to_lowercase(self):
        assert validate_email("  User@Example.COM ") == "user@example.com"

    @pytest.mark.parametrize("email", ["no-at-sign", "a@b", "@example.com"])
    def test_invalid_email(self, email):
        with pytest.raises(ValueError):
            validate_email(email)

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("Ab1!", "at least 8"),
            ("secret123!", "uppercase"),
            ("SECRET123!", "lowercase"),
            ("Secretabc!", "digit"),
            ("Secret1234", "special"),
        ],
    )
    def test_weak_passwords(self, password, message):
        with pytest.raises(ValueError, match=message):
            validate_strong_password(password)

    def test_strong_password_unchanged(self):
        assert validate_strong_password("Secret123!") == "Secret123!"

    def test_password_at_72_bytes_accepted(self):
        password = "Aa1!" + "x" * 68

        assert validate_strong_password(password) == password

    @pytest.mark.parametrize(
        "password",
        ["Aa1!" + "x" * 96, "Aa1!" + "\u00e9" * 35],
        ids=["ascii", "multibyte"],
    )
    def test_password_over_72_bytes_rejected(self, password):
        with pytest.raises(ValueError, match="at most 72 bytes"):
            validate_strong_password(password)

    def test_phone_normalized(self):
        assert validate_phone("+1 (555) 123-4567") == "+15551234567"

    @pytest.mark.parametrize("phone", ["5551234567", "+0123456789", "+1-abc"])
    def test_invalid_phone(self, phone):
        with pytest.raises(ValueError):
            validate_phone(phone)

    def test_otp_code_must_be_digits(self):
        assert validate_otp_code("042917") == "042917"
        with pytest.raises(ValueError):
            validate_otp_code("04a917")

    def test_token_must_be_hex(self):
        with pytest.raises(ValueError):
            validate_token_format("zz" * 32)


@pytest.mark.unit
class TestRequestSchemas:
    """Annotated types applied through Pydantic schemas."""

    def test_user_create_normalizes_email_and_phone(self):
        request = UserCreateRequest(
            email="U@Test.com", password="Secret123!", phone="+1 555 123 4567"
        )

        assert request.email == "u@test.com"
        assert request.phone == "+15551234567"

    def test_user_create_phone_optional(self):
        assert UserCreateRequest(email="u@test.com", password="Secret123!").phone is None

    def test_user_create_rejects_weak_password(self):
        with pytest.raises(ValidationError):
            UserCreateRequest(email="u@test.com", password="weak")

    def test_user_create_rejects_password_longer_than_bcrypt_input(self):
        with pytest.raises(ValidationError):
            UserCreateRequest(email="u@test.com", password="Aa1!" + "x" * 96)

    def test_reset_rejects_password_longer_than_bcrypt_input(self):
        with pytest.raises(ValidationError):
            PasswordResetCreateRequest(token="ab" * 32, new_password="Aa1!" + "x" * 96)

    def test_verification_purpose_restricted_to_step_up(self):
        with pytest.raises(ValidationError):
            StepUpVerificationCreateRequest(
                user_id="0192f7a8-0000-7000-8000-000000000000",
                code="123456",
                purpose="forgot_password",
            )

    def test_reset_token_length_enforced(self):
        with pytest.raises(ValidationError):
            PasswordResetCreateRequest(token="ab" * 10, new_password="Secret123!")
