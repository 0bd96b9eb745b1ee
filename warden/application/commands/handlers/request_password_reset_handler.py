"""Request password reset handler.

Flow:
1. Look up user by email
2. Unknown email: log a warning, audit with success=False, return Success
   (response identical to the known-email case, no account enumeration)
3. Issue a password reset token (TTL in hours)
4. Deliver the token out of band (SMS to the phone on file)
5. Record password_reset_requested
"""

from typing import TYPE_CHECKING

from warden.application.commands.auth_commands import RequestPasswordReset
from warden.application.dtos import RequestMetadata
from warden.application.services import (
    OneTimeSecretService,
    SecretDeliveryService,
    SecurityAuditor,
)
from warden.core.result import Result, Success
from warden.domain.enums import AuditAction, SecretPurpose
from warden.domain.protocols import LoggerProtocol, UserRepository

if TYPE_CHECKING:
    from fastapi import Request


class RequestPasswordResetHandler:
    """Handler for RequestPasswordReset command."""

    def __init__(
        self,
        user_repo: UserRepository,
        secret_service: OneTimeSecretService,
        delivery_service: SecretDeliveryService,
        auditor: SecurityAuditor,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize reset request handler with dependencies.

        Args:
            user_repo: User lookup by email.
            secret_service: Issues the reset token.
            delivery_service: Sends the token out of band.
            auditor: Audit trail writer.
            logger: Structured logger.
        """
        self._user_repo = user_repo
        self._secret_service = secret_service
        self._delivery_service = delivery_service
        self._auditor = auditor
        self._logger = logger

    async def handle(
        self, cmd: RequestPasswordReset, request: "Request | None" = None
    ) -> Result[None, str]:
        """Handle reset request.

        Returns:
            Success(None), whether or not the email is registered.
        """
        metadata = RequestMetadata.from_request(request)

        # Step 1: Look up user
        user = await self._user_repo.find_by_email(cmd.email)

        # Step 2: Unknown email
        if user is None:
            self._logger.warning("password_reset_unknown_email", email=cmd.email)
            await self._auditor.record(
                AuditAction.PASSWORD_RESET_REQUESTED,
                resource_type="secret",
                success=False,
                metadata=metadata,
                reason="user_not_found",
            )
            return Success(value=None)

        # Step 3: Issue reset token
        token = await self._secret_service.issue(user.id, SecretPurpose.PASSWORD_RESET)

        # Step 4: Deliver out of band
        await self._delivery_service.deliver(user, SecretPurpose.PASSWORD_RESET, token)

        # Step 5: Audit
        await self._auditor.record(
            AuditAction.PASSWORD_RESET_REQUESTED,
            resource_type="secret",
            user_id=user.id,
            metadata=metadata,
        )
        return Success(value=None)
