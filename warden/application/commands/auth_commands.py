"""Write-side commands, one per state-changing operation.

Frozen, keyword-only dataclasses without behavior. Field types are the
validated ``warden.domain.types`` so a command built from a request schema
is already normalized.
"""

from dataclasses import dataclass
from uuid import UUID

from warden.domain.enums import SecretPurpose
from warden.domain.types import Email, OtpCode, Password, PhoneNumber, ResetToken


@dataclass(frozen=True, kw_only=True)
class RegisterUser:
    """New account; ``phone`` is optional until step-up is enabled.

    Example:
        >>> RegisterUser(email="u@test.com", password="Secret123!")
    """

    email: Email
    password: Password
    phone: PhoneNumber | None = None


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Log in with email and password.

    Result depends on the account: a token pair when step-up is off, or a
    pending state (code sent by SMS) when step-up is on.

    Attributes:
        email: User's email address.
        password: Plaintext password.
    """

    email: Email
    password: str


@dataclass(frozen=True, kw_only=True)
class EnableStepUp:
    """Start enabling step-up verification for the authenticated user.

    Sends a confirmation code to the phone on file.

    Attributes:
        user_id: Authenticated user.
    """

    user_id: UUID


@dataclass(frozen=True, kw_only=True)
class VerifyOneTimeSecret:
    """Verify a one-time code for a step-up purpose.

    Attributes:
        user_id: User the code was issued to.
        code: Numeric code as typed by the user.
        purpose: LOGIN_STEP_UP or ENABLE_STEP_UP.
    """

    user_id: UUID
    code: OtpCode
    purpose: SecretPurpose


@dataclass(frozen=True, kw_only=True)
class RefreshAccessToken:
    """Exchange a refresh token for a new access token.

    Attributes:
        refresh_token: Refresh JWT issued at login.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke a refresh token. Idempotent.

    Attributes:
        refresh_token: Refresh JWT to revoke.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset token.

    Always succeeds so callers cannot learn whether the email exists.

    Attributes:
        email: Email address of the account.
    """

    email: Email


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password using a reset token.

    Attributes:
        token: Raw reset token delivered out of band.
        new_password: New password (validated strength).
    """

    token: ResetToken
    new_password: Password
