"""Validated string types.

Commands and request schemas share these, so a value is validated and
normalized the same way wherever it enters::

    class UserCreateRequest(BaseModel):
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from warden.domain.validators import (
    validate_email,
    validate_otp_code,
    validate_phone,
    validate_strong_password,
    validate_token_format,
)

# Lower-cased on the way in
Email = Annotated[
    str,
    Field(min_length=5, max_length=255, examples=["user@example.com"]),
    AfterValidator(validate_email),
]

# 8-72 characters (and 72 bytes in UTF-8) with upper, lower, digit and
# special character
Password = Annotated[
    str,
    Field(min_length=8, max_length=72, examples=["Secret123!"]),
    AfterValidator(validate_strong_password),
]

# E.164 after punctuation is removed
PhoneNumber = Annotated[
    str,
    Field(min_length=8, max_length=32, examples=["+15551234567"]),
    AfterValidator(validate_phone),
]

OtpCode = Annotated[
    str,
    Field(min_length=4, max_length=10, examples=["123456"]),
    AfterValidator(validate_otp_code),
]

# 32 random bytes, hex encoded
ResetToken = Annotated[
    str,
    Field(min_length=64, max_length=64),
    AfterValidator(validate_token_format),
]
