"""HTTP request and response bodies for the ``/api/v1`` routes.

Registration and reset bodies use the validated types from
``warden.domain.types``. Login accepts any non-empty password, so a password
that breaks the strength rules fails as invalid credentials, not as a 422.
"""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from warden.domain.types import Email, OtpCode, Password, PhoneNumber, ResetToken


class _TokenPairFields(BaseModel):
    """Token fields present only when tokens were issued."""

    user_id: UUID
    access_token: str | None = None
    refresh_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = Field(default=None, description="Access token seconds")
    message: str


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "u@test.com",
                "password": "Secret123!",
                "phone": "+15551234567",
            }
        }
    )

    email: Email
    password: Password
    phone: PhoneNumber | None = Field(
        default=None, description="Needed later to enable step-up verification"
    )


class UserResponse(BaseModel):
    """Public profile; the password hash is never part of it."""

    id: UUID
    email: str
    phone: str | None = None
    is_active: bool
    is_step_up_enabled: bool
    created_at: datetime
    updated_at: datetime


class SessionCreateRequest(BaseModel):
    email: EmailStr = Field(examples=["user@example.com"])
    password: str = Field(min_length=1, max_length=128, examples=["Secret123!"])


class SessionCreateResponse(_TokenPairFields):
    """201 with tokens, or 202 with ``requires_2fa`` and no tokens."""

    requires_2fa: bool


class SessionDeleteRequest(BaseModel):
    refresh_token: str = Field(min_length=1)


class TokenCreateRequest(BaseModel):
    refresh_token: str = Field(min_length=1)


class TokenCreateResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int = Field(default=900, description="Access token seconds")


class StepUpCreateResponse(BaseModel):
    message: str = "A verification code has been sent to your phone."


class StepUpVerificationCreateRequest(BaseModel):
    """Code check; ``forgot_password`` is not accepted here."""

    user_id: UUID
    code: OtpCode
    purpose: Literal["login_2fa", "enable_2fa"]


class StepUpVerificationCreateResponse(_TokenPairFields):
    purpose: str


class PasswordResetTokenCreateRequest(BaseModel):
    email: EmailStr = Field(examples=["user@example.com"])


class PasswordResetTokenCreateResponse(BaseModel):
    """Identical for registered and unknown emails."""

    message: str = (
        "If an account with that email exists, a password reset token has been sent."
    )


class PasswordResetCreateRequest(BaseModel):
    token: ResetToken
    new_password: Password


class PasswordResetCreateResponse(BaseModel):
    message: str = "Password has been reset successfully. Please create a new session."
