"""Refresh access token handler.

Flow:
1. Verify refresh JWT (signature, expiry, type claim)
2. Hash token and check the ledger (exists, not revoked, not expired)
3. Mint a new access token (refresh token is not rotated)
4. Record token_refreshed

Every business failure collapses to INVALID_OR_EXPIRED_TOKEN so callers
cannot tell which check failed; the audit trail keeps the real reason.
Persistence faults are not collapsed: they propagate to the caller.
"""

from typing import TYPE_CHECKING

from warden.application.commands.auth_commands import RefreshAccessToken
from warden.application.dtos import AccessTokenRefresh, RequestMetadata
from warden.application.services import RefreshTokenLedger, SecurityAuditor
from warden.core.result import Failure, Result, Success
from warden.domain.enums import AuditAction, TokenType
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import SecretTokenProtocol, TokenGenerationProtocol

if TYPE_CHECKING:
    from uuid import UUID

    from fastapi import Request


class RefreshAccessTokenHandler:
    """Handler for RefreshAccessToken command."""

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        secret_token_service: SecretTokenProtocol,
        ledger: RefreshTokenLedger,
        auditor: SecurityAuditor,
    ) -> None:
        """Initialize refresh handler with dependencies.

        Args:
            token_service: JWT verification and minting.
            secret_token_service: SHA-256 digest of the refresh token.
            ledger: Refresh token revocation state.
            auditor: Audit trail writer.
        """
        self._token_service = token_service
        self._secret_token_service = secret_token_service
        self._ledger = ledger
        self._auditor = auditor

    async def handle(
        self, cmd: RefreshAccessToken, request: "Request | None" = None
    ) -> Result[AccessTokenRefresh, str]:
        """Handle refresh command.

        Returns:
            Success(AccessTokenRefresh) with a new access token.
            Failure(INVALID_OR_EXPIRED_TOKEN) on any token or ledger failure.
        """
        metadata = RequestMetadata.from_request(request)

        # Step 1: Verify JWT
        verification = self._token_service.verify(TokenType.REFRESH, cmd.refresh_token)
        if isinstance(verification, Failure):
            return await self._fail(verification.error, None, metadata)
        payload = verification.value

        # Step 2: Ledger check
        token_hash = self._secret_token_service.hash_token(cmd.refresh_token)
        ledger_check = await self._ledger.check(token_hash)
        if isinstance(ledger_check, Failure):
            return await self._fail(ledger_check.error, payload.user_id, metadata)

        # Step 3: Mint access token only
        access_token = self._token_service.mint(
            TokenType.ACCESS, payload.user_id, payload.email
        )

        # Step 4: Audit
        await self._auditor.record(
            AuditAction.TOKEN_REFRESHED,
            resource_type="token",
            user_id=payload.user_id,
            metadata=metadata,
        )

        return Success(
            value=AccessTokenRefresh(
                access_token=access_token,
                expires_in=int(
                    self._token_service.lifetime(TokenType.ACCESS).total_seconds()
                ),
            )
        )

    async def _fail(
        self,
        reason: str,
        user_id: "UUID | None",
        metadata: RequestMetadata,
    ) -> Result[AccessTokenRefresh, str]:
        await self._auditor.record(
            AuditAction.TOKEN_REFRESH_FAILED,
            resource_type="token",
            success=False,
            user_id=user_id,
            metadata=metadata,
            reason=reason,
        )
        return Failure(error=AuthenticationError.INVALID_OR_EXPIRED_TOKEN)
