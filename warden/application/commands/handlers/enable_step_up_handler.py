"""Enable step-up handler (first half of enabling two-factor login).

Flow:
1. Load user (USER_NOT_FOUND)
2. Reject if step-up already enabled (STEP_UP_ALREADY_ENABLED)
3. Reject if no phone on file (PHONE_REQUIRED)
4. Issue enable_2fa code and deliver it by SMS
5. Record 2fa_enable_requested

The flag itself flips only when the code is verified
(VerifyOneTimeSecretHandler with ENABLE_STEP_UP).
"""

from typing import TYPE_CHECKING

from warden.application.commands.auth_commands import EnableStepUp
from warden.application.dtos import RequestMetadata
from warden.application.services import (
    OneTimeSecretService,
    SecretDeliveryService,
    SecurityAuditor,
)
from warden.core.result import Failure, Result, Success
from warden.domain.enums import AuditAction, SecretPurpose
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import UserRepository

if TYPE_CHECKING:
    from fastapi import Request


class EnableStepUpHandler:
    """Handler for EnableStepUp command."""

    def __init__(
        self,
        user_repo: UserRepository,
        secret_service: OneTimeSecretService,
        delivery_service: SecretDeliveryService,
        auditor: SecurityAuditor,
    ) -> None:
        self._user_repo = user_repo
        self._secret_service = secret_service
        self._delivery_service = delivery_service
        self._auditor = auditor

    async def handle(
        self, cmd: EnableStepUp, request: "Request | None" = None
    ) -> Result[None, str]:
        """Handle enable step-up command.

        Returns:
            Success(None) once a confirmation code has been issued.
            Failure(USER_NOT_FOUND | STEP_UP_ALREADY_ENABLED | PHONE_REQUIRED).
        """
        metadata = RequestMetadata.from_request(request)

        # Step 1: Load user
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            return await self._fail(cmd, AuthenticationError.USER_NOT_FOUND, metadata)

        # Step 2: Already enabled
        if user.is_step_up_enabled:
            return await self._fail(
                cmd, AuthenticationError.STEP_UP_ALREADY_ENABLED, metadata
            )

        # Step 3: Phone required
        if user.phone is None:
            return await self._fail(cmd, AuthenticationError.PHONE_REQUIRED, metadata)

        # Step 4: Issue and deliver code
        code = await self._secret_service.issue(user.id, SecretPurpose.ENABLE_STEP_UP)
        await self._delivery_service.deliver(user, SecretPurpose.ENABLE_STEP_UP, code)

        # Step 5: Audit
        await self._auditor.record(
            AuditAction.TWO_FACTOR_ENABLE_REQUESTED,
            resource_type="user",
            user_id=user.id,
            metadata=metadata,
        )
        return Success(value=None)

    async def _fail(
        self, cmd: EnableStepUp, reason: str, metadata: RequestMetadata
    ) -> Result[None, str]:
        await self._auditor.record(
            AuditAction.TWO_FACTOR_ENABLE_FAILED,
            resource_type="user",
            success=False,
            user_id=cmd.user_id,
            metadata=metadata,
            reason=reason,
        )
        return Failure(error=reason)
