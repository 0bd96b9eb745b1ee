"""Confirm password reset handler.

Flow:
1. Look up an unused, unexpired reset token by SHA-256 digest
   (no attempt counter: reset tokens carry 256 bits of entropy)
2. Load the owning user
3. Hash the new password
4. In one transaction:
   - update the password hash
   - mark the reset token used
   - revoke all refresh tokens of the user (every session ends)
5. Record password_reset_completed

On failure:
- Record password_reset_failed
- Return Failure(INVALID_OR_EXPIRED_TOKEN)
"""

from typing import TYPE_CHECKING

from warden.application.commands.auth_commands import ConfirmPasswordReset
from warden.application.dtos import RequestMetadata
from warden.application.services import (
    OneTimeSecretService,
    RefreshTokenLedger,
    SecurityAuditor,
)
from warden.core.result import Failure, Result, Success
from warden.domain.enums import AuditAction
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import (
    ClockProtocol,
    PasswordHashingProtocol,
    UnitOfWorkProtocol,
    UserRepository,
)

if TYPE_CHECKING:
    from uuid import UUID

    from fastapi import Request


class _ResetTokenConsumed(Exception):
    """Another request consumed the token inside our transaction window."""


class ConfirmPasswordResetHandler:
    """Handler for ConfirmPasswordReset command.

    The three writes of step 4 run inside ``uow.atomic()``; any failure
    (including a concurrent consumption of the same token) rolls back all
    of them.
    """

    def __init__(
        self,
        user_repo: UserRepository,
        secret_service: OneTimeSecretService,
        ledger: RefreshTokenLedger,
        password_service: PasswordHashingProtocol,
        uow: UnitOfWorkProtocol,
        auditor: SecurityAuditor,
        clock: ClockProtocol,
    ) -> None:
        """Initialize reset confirmation handler with dependencies.

        Args:
            user_repo: User lookup and password update.
            secret_service: Reset token lookup and consumption.
            ledger: Refresh token revocation.
            password_service: Password hashing.
            uow: Transaction boundary for the three writes.
            auditor: Audit trail writer.
            clock: Time source for updated_at.
        """
        self._user_repo = user_repo
        self._secret_service = secret_service
        self._ledger = ledger
        self._password_service = password_service
        self._uow = uow
        self._auditor = auditor
        self._clock = clock

    async def handle(
        self, cmd: ConfirmPasswordReset, request: "Request | None" = None
    ) -> Result[None, str]:
        """Handle reset confirmation.

        Returns:
            Success(None) once the password is changed.
            Failure(INVALID_OR_EXPIRED_TOKEN) if the token is unknown,
            used, expired or its user is gone.
        """
        metadata = RequestMetadata.from_request(request)

        # Step 1: Direct lookup by digest
        reset_token = await self._secret_service.find_reset_token(cmd.token)
        if reset_token is None:
            return await self._fail("token_not_found", None, metadata)

        # Step 2: Load user
        user = await self._user_repo.find_by_id(reset_token.user_id)
        if user is None:
            return await self._fail(
                AuthenticationError.USER_NOT_FOUND, reset_token.user_id, metadata
            )

        # Step 3: Hash new password (outside the transaction, it is slow)
        password_hash = self._password_service.hash_password(cmd.new_password)

        # Step 4: All-or-nothing writes
        try:
            async with self._uow.atomic():
                user.change_password(password_hash, self._clock.now())
                await self._user_repo.update(user)
                if not await self._secret_service.consume(reset_token.id):
                    raise _ResetTokenConsumed
                revoked = await self._ledger.revoke_all(user.id, reason="password_reset")
        except _ResetTokenConsumed:
            return await self._fail("token_already_used", user.id, metadata)

        # Step 5: Audit
        await self._auditor.record(
            AuditAction.PASSWORD_RESET_COMPLETED,
            resource_type="user",
            user_id=user.id,
            metadata=metadata,
            revoked_sessions=revoked,
        )
        return Success(value=None)

    async def _fail(
        self,
        reason: str,
        user_id: "UUID | None",
        metadata: RequestMetadata,
    ) -> Result[None, str]:
        await self._auditor.record(
            AuditAction.PASSWORD_RESET_FAILED,
            resource_type="user",
            success=False,
            user_id=user_id,
            metadata=metadata,
            reason=reason,
        )
        return Failure(error=AuthenticationError.INVALID_OR_EXPIRED_TOKEN)
