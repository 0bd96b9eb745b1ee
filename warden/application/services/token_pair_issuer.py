"""Mint an access/refresh pair and record the refresh digest in the ledger."""

from warden.application.dtos import AuthTokens, RequestMetadata
from warden.application.services.refresh_token_ledger import RefreshTokenLedger
from warden.domain.entities.user import User
from warden.domain.enums import TokenType
from warden.domain.protocols import (
    ClockProtocol,
    SecretTokenProtocol,
    TokenGenerationProtocol,
)


class TokenPairIssuer:
    """Issue the token pair used by direct and step-up logins."""

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        secret_token_service: SecretTokenProtocol,
        ledger: RefreshTokenLedger,
        clock: ClockProtocol,
    ) -> None:
        self._token_service = token_service
        self._secret_token_service = secret_token_service
        self._ledger = ledger
        self._clock = clock

    async def issue(
        self, user: User, metadata: RequestMetadata | None = None
    ) -> AuthTokens:
        """Mint both tokens and persist only the refresh token digest.

        Args:
            user: Authenticated user.
            metadata: Client origin stored on the ledger row.

        Returns:
            AuthTokens with both raw tokens.
        """
        metadata = metadata or RequestMetadata()
        access_token = self._token_service.mint(TokenType.ACCESS, user.id, user.email)
        refresh_token = self._token_service.mint(TokenType.REFRESH, user.id, user.email)

        await self._ledger.record(
            user.id,
            self._secret_token_service.hash_token(refresh_token),
            self._clock.now() + self._token_service.lifetime(TokenType.REFRESH),
            ip_address=metadata.ip_address,
            user_agent=metadata.user_agent,
        )

        return AuthTokens(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_in=int(
                self._token_service.lifetime(TokenType.ACCESS).total_seconds()
            ),
        )
