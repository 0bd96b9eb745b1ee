"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT with HMAC-SHA256.

Security:
    - HMAC-SHA256 (HS256) algorithm
    - Separate 256-bit secrets for access and refresh tokens
    - ``type`` claim checked on verification (no cross-kind use)
    - Unique JWT ID (jti, UUIDv7) per token

Claims:
    sub: user id, email, type, iat, exp, jti
"""

from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from warden.core.result import Failure, Result, Success
from warden.domain.enums import TokenType
from warden.domain.errors import TokenError
from warden.domain.protocols.token_generation_protocol import TokenPayload

_REQUIRED_CLAIMS = ["sub", "email", "type", "iat", "exp", "jti"]


class JWTService:
    """JWT access/refresh token minting and verification.

    Usage:
        from warden.core.container import get_token_service

        token_service = get_token_service()
        access = token_service.mint(TokenType.ACCESS, user.id, user.email)
        result = token_service.verify(TokenType.ACCESS, access)
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_expiration_minutes: int = 15,
        refresh_expiration_days: int = 7,
    ) -> None:
        """Initialize JWT service.

        Args:
            access_secret: HMAC secret for access tokens (>= 32 bytes).
            refresh_secret: HMAC secret for refresh tokens (>= 32 bytes).
            access_expiration_minutes: Access token lifetime.
            refresh_expiration_days: Refresh token lifetime.

        Raises:
            ValueError: If a secret is too short or both secrets are equal.
        """
        if len(access_secret) < 32 or len(refresh_secret) < 32:
            msg = "JWT secret keys must be at least 32 bytes (256 bits)"
            raise ValueError(msg)
        if access_secret == refresh_secret:
            msg = "Access and refresh tokens must use different secrets"
            raise ValueError(msg)

        self._secrets = {
            TokenType.ACCESS: access_secret,
            TokenType.REFRESH: refresh_secret,
        }
        self._lifetimes = {
            TokenType.ACCESS: timedelta(minutes=access_expiration_minutes),
            TokenType.REFRESH: timedelta(days=refresh_expiration_days),
        }
        self._algorithm = "HS256"  # HMAC-SHA256

    def lifetime(self, kind: TokenType) -> timedelta:
        """Lifetime of tokens of the given kind.

        Args:
            kind: Token kind.

        Returns:
            Token lifetime.
        """
        return self._lifetimes[kind]

    @property
    def access_token_ttl_seconds(self) -> int:
        """Access token lifetime in seconds (``expires_in`` response field)."""
        return int(self._lifetimes[TokenType.ACCESS].total_seconds())

    def mint(self, kind: TokenType, user_id: UUID, email: str) -> str:
        """Mint a signed token.

        Args:
            kind: Token kind (selects secret and lifetime).
            user_id: Subject.
            email: Subject email.

        Returns:
            Encoded JWT (header.payload.signature).

        Example:
            >>> service = JWTService("a" * 32, "b" * 32)
            >>> token = service.mint(TokenType.ACCESS, uuid7(), "u@test.com")
            >>> len(token.split("."))
            3
        """
        now = datetime.now(UTC)
        expires_at = now + self._lifetimes[kind]

        payload = {
            "sub": str(user_id),
            "email": email,
            "type": kind.value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
            "jti": str(uuid7()),
        }

        token: str = jwt.encode(payload, self._secrets[kind], algorithm=self._algorithm)
        return token

    def verify(self, kind: TokenType, token: str) -> Result[TokenPayload, str]:
        """Verify a token of the expected kind.

        Args:
            kind: Expected token kind.
            token: Encoded JWT.

        Returns:
            Success(TokenPayload) if signature, expiry and kind are valid.
            Failure(TokenError.*) otherwise.

        Note:
            A token of the other kind normally fails the signature check
            (different secret). The ``type`` claim check still rejects it
            if both secrets were ever configured identically.
        """
        try:
            claims = jwt.decode(
                token,
                self._secrets[kind],
                algorithms=[self._algorithm],
                options={"require": _REQUIRED_CLAIMS},
            )
        except ExpiredSignatureError:
            return Failure(error=TokenError.EXPIRED_TOKEN)
        except InvalidTokenError:
            return Failure(error=TokenError.INVALID_TOKEN)

        if claims["type"] != kind.value:
            return Failure(error=TokenError.WRONG_TOKEN_TYPE)

        try:
            payload = TokenPayload(
                user_id=UUID(str(claims["sub"])),
                email=str(claims["email"]),
                token_type=kind,
                jti=str(claims["jti"]),
                issued_at=datetime.fromtimestamp(int(claims["iat"]), UTC),
                expires_at=datetime.fromtimestamp(int(claims["exp"]), UTC),
            )
        except (TypeError, ValueError):
            return Failure(error=TokenError.MALFORMED_PAYLOAD)

        return Success(value=payload)
