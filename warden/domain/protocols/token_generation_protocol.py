"""Token generation protocol for domain layer.

Two kinds of signed, stateless bearer tokens (access and refresh), each
with its own secret and lifetime and an explicit ``type`` claim.

Token Strategy:
    - Access tokens: short-lived JWT (minutes)
    - Refresh tokens: long-lived JWT (days), revocable through the ledger
    - Stateless validation (no database lookup)
"""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Protocol
from uuid import UUID

from warden.core.result import Result
from warden.domain.enums import TokenType


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenPayload:
    """Verified token claims.

    Attributes:
        user_id: Subject (``sub`` claim).
        email: Subject email (``email`` claim).
        token_type: Token kind (``type`` claim).
        jti: Unique token identifier.
        issued_at: ``iat`` claim.
        expires_at: ``exp`` claim.
    """

    user_id: UUID
    email: str
    token_type: TokenType
    jti: str
    issued_at: datetime
    expires_at: datetime


class TokenGenerationProtocol(Protocol):
    """Bearer token minting and verification interface.

    Implementations:
        - JWTService: HMAC-SHA256, one secret per token kind

    Usage:
        token = token_service.mint(TokenType.ACCESS, user.id, user.email)

        match token_service.verify(TokenType.REFRESH, presented):
            case Success(value=payload):
                user_id = payload.user_id
            case Failure(error=error):
                # Bad signature, expired, malformed or wrong type
                ...
    """

    def mint(self, kind: TokenType, user_id: UUID, email: str) -> str:
        """Mint a signed token of the given kind.

        Args:
            kind: Token kind (selects secret and lifetime).
            user_id: Subject.
            email: Subject email.

        Returns:
            Encoded token.
        """
        ...

    def verify(self, kind: TokenType, token: str) -> Result[TokenPayload, str]:
        """Verify signature, expiry and kind.

        Args:
            kind: Expected token kind.
            token: Encoded token.

        Returns:
            Success(TokenPayload) if valid.
            Failure(TokenError.*) otherwise (never raises).
        """
        ...

    def lifetime(self, kind: TokenType) -> timedelta:
        """Lifetime of tokens of the given kind.

        Args:
            kind: Token kind.

        Returns:
            Token lifetime.
        """
        ...
