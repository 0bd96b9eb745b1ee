"""Handler results returned to the routes.

None of them carries a password hash or a stored secret digest. Raw
tokens appear only in ``AuthTokens`` and ``AccessTokenRefresh``.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from warden.domain.entities.user import User
from warden.domain.enums import LoginState, SecretPurpose

if TYPE_CHECKING:
    from fastapi import Request


@dataclass(frozen=True, kw_only=True)
class RequestMetadata:
    """Client metadata recorded with audit events and refresh tokens.

    Attributes:
        ip_address: Client IP address, if known.
        user_agent: Client user agent, if sent.
    """

    ip_address: str | None = None
    user_agent: str | None = None

    @classmethod
    def from_request(cls, request: "Request | None") -> "RequestMetadata":
        """Extract metadata from an optional FastAPI request."""
        if request and request.client:
            return cls(
                ip_address=request.client.host,
                user_agent=request.headers.get("user-agent", "Unknown"),
            )
        return cls()


@dataclass(frozen=True, kw_only=True)
class AuthTokens:
    """Token pair returned on successful authentication.

    Attributes:
        access_token: Access JWT (short-lived).
        refresh_token: Refresh JWT (long-lived, revocable via ledger).
        token_type: Token type (always "bearer").
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int = 900  # 15 minutes in seconds


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Outcome of a successful LoginUser call.

    Attributes:
        state: AUTHENTICATED_DIRECT or STEP_UP_PENDING.
        user_id: Authenticated (or pending) user.
        tokens: Token pair; None while step-up is pending.
    """

    state: LoginState
    user_id: UUID
    tokens: AuthTokens | None = None

    @property
    def requires_step_up(self) -> bool:
        """True when a one-time code must be verified to finish login."""
        return self.state is LoginState.STEP_UP_PENDING


@dataclass(frozen=True, kw_only=True)
class StepUpVerification:
    """Outcome of a successful VerifyOneTimeSecret call.

    Attributes:
        purpose: Purpose the code was verified for.
        user_id: Owner of the code.
        tokens: Token pair for LOGIN_STEP_UP; None for ENABLE_STEP_UP.
        state: AUTHENTICATED_WITH_SESSION once a step-up login completes;
            None for ENABLE_STEP_UP.
    """

    purpose: SecretPurpose
    user_id: UUID
    tokens: AuthTokens | None = None
    state: LoginState | None = None


@dataclass(frozen=True, kw_only=True)
class AccessTokenRefresh:
    """New access token issued from a refresh token (no rotation).

    Attributes:
        access_token: Fresh access JWT.
        token_type: Token type (always "bearer").
        expires_in: Access token lifetime in seconds.
    """

    access_token: str
    token_type: str = "bearer"
    expires_in: int = 900


@dataclass(frozen=True, kw_only=True)
class UserProfile:
    """Public view of a user. Has no password hash field."""

    id: UUID
    email: str
    phone: str | None
    is_active: bool
    is_step_up_enabled: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfile":
        """Build a profile from the entity, dropping the password hash."""
        return cls(
            id=user.id,
            email=user.email,
            phone=user.phone,
            is_active=user.is_active,
            is_step_up_enabled=user.is_step_up_enabled,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
