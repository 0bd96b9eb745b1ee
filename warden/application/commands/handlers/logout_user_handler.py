"""Logout handler.

Revokes the presented refresh token in the ledger. Idempotent: unknown,
expired or already revoked tokens are not an error. The token is revoked
by digest even when its signature no longer verifies (e.g. expired JWT).
"""

from typing import TYPE_CHECKING

from warden.application.commands.auth_commands import LogoutUser
from warden.application.dtos import RequestMetadata
from warden.application.services import RefreshTokenLedger, SecurityAuditor
from warden.core.result import Result, Success
from warden.domain.enums import AuditAction, TokenType
from warden.domain.protocols import SecretTokenProtocol, TokenGenerationProtocol

if TYPE_CHECKING:
    from fastapi import Request


class LogoutUserHandler:
    """Handler for LogoutUser command."""

    def __init__(
        self,
        token_service: TokenGenerationProtocol,
        secret_token_service: SecretTokenProtocol,
        ledger: RefreshTokenLedger,
        auditor: SecurityAuditor,
    ) -> None:
        self._token_service = token_service
        self._secret_token_service = secret_token_service
        self._ledger = ledger
        self._auditor = auditor

    async def handle(
        self, cmd: LogoutUser, request: "Request | None" = None
    ) -> Result[None, str]:
        """Handle logout command.

        Returns:
            Success(None), always.
        """
        metadata = RequestMetadata.from_request(request)

        # Step 1: Revoke by digest
        token_hash = self._secret_token_service.hash_token(cmd.refresh_token)
        await self._ledger.revoke(token_hash, reason="logout")

        # Step 2: Audit (user known only if the token still verifies)
        verification = self._token_service.verify(TokenType.REFRESH, cmd.refresh_token)
        user_id = verification.value.user_id if isinstance(verification, Success) else None
        await self._auditor.record(
            AuditAction.LOGOUT,
            resource_type="session",
            user_id=user_id,
            metadata=metadata,
        )

        return Success(value=None)
