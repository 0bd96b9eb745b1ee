"""Validation functions used by the Annotated types in warden.domain.types."""

from warden.domain.validators.functions import (
    validate_email,
    validate_otp_code,
    validate_phone,
    validate_strong_password,
    validate_token_format,
)

__all__ = [
    "validate_email",
    "validate_otp_code",
    "validate_phone",
    "validate_strong_password",
    "validate_token_format",
]
