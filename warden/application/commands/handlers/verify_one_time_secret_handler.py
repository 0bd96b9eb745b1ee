"""Verify one-time code handler (second half of step-up flows).

Flow:
1. Reject PASSWORD_RESET purpose (reset tokens go through ConfirmPasswordReset)
2. Verify and consume the code via OneTimeSecretService
   (store failures surface unchanged: SECRET_NOT_FOUND, ATTEMPTS_EXCEEDED,
   INVALID_SECRET)
3. Load user (USER_NOT_FOUND)
4. LOGIN_STEP_UP: mint and record tokens (login_success_with_2fa)
   ENABLE_STEP_UP: set the step-up flag (2fa_enabled)
"""

from typing import TYPE_CHECKING

from warden.application.commands.auth_commands import VerifyOneTimeSecret
from warden.application.dtos import RequestMetadata, StepUpVerification
from warden.application.services import (
    OneTimeSecretService,
    SecurityAuditor,
    TokenPairIssuer,
)
from warden.core.result import Failure, Result, Success
from warden.domain.enums import AuditAction, LoginState, SecretPurpose
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import ClockProtocol, UserRepository

if TYPE_CHECKING:
    from fastapi import Request


class VerifyOneTimeSecretHandler:
    """Handler for VerifyOneTimeSecret command."""

    def __init__(
        self,
        user_repo: UserRepository,
        secret_service: OneTimeSecretService,
        token_issuer: TokenPairIssuer,
        auditor: SecurityAuditor,
        clock: ClockProtocol,
    ) -> None:
        """Initialize verification handler with dependencies.

        Args:
            user_repo: User lookup and step-up flag update.
            secret_service: Verifies and consumes codes.
            token_issuer: Mints tokens for completed step-up logins.
            auditor: Audit trail writer.
            clock: Time source for updated_at.
        """
        self._user_repo = user_repo
        self._secret_service = secret_service
        self._token_issuer = token_issuer
        self._auditor = auditor
        self._clock = clock

    async def handle(
        self, cmd: VerifyOneTimeSecret, request: "Request | None" = None
    ) -> Result[StepUpVerification, str]:
        """Handle code verification.

        Args:
            cmd: VerifyOneTimeSecret command.
            request: Optional FastAPI Request for IP/user agent tracking.

        Returns:
            Success(StepUpVerification); tokens are set for LOGIN_STEP_UP.
            Failure(error) with the store failure kind, USER_NOT_FOUND or
            UNSUPPORTED_PURPOSE.
        """
        metadata = RequestMetadata.from_request(request)

        # Step 1: Only step-up purposes are verified here
        if not cmd.purpose.is_numeric_code:
            await self._record_failure(
                cmd, AuthenticationError.UNSUPPORTED_PURPOSE, metadata
            )
            return Failure(error=AuthenticationError.UNSUPPORTED_PURPOSE)

        # Step 2: Verify and consume
        verification = await self._secret_service.verify(
            cmd.user_id, cmd.purpose, cmd.code
        )
        if isinstance(verification, Failure):
            await self._record_failure(cmd, verification.error, metadata)
            return Failure(error=verification.error)

        # Step 3: Load user
        user = await self._user_repo.find_by_id(cmd.user_id)
        if user is None:
            await self._record_failure(cmd, AuthenticationError.USER_NOT_FOUND, metadata)
            return Failure(error=AuthenticationError.USER_NOT_FOUND)

        # Step 4: Apply the purpose
        match cmd.purpose:
            case SecretPurpose.LOGIN_STEP_UP:
                tokens = await self._token_issuer.issue(user, metadata)
                await self._auditor.record(
                    AuditAction.LOGIN_SUCCESS_WITH_2FA,
                    resource_type="session",
                    user_id=user.id,
                    metadata=metadata,
                )
                return Success(
                    value=StepUpVerification(
                        purpose=cmd.purpose,
                        user_id=user.id,
                        tokens=tokens,
                        state=LoginState.AUTHENTICATED_WITH_SESSION,
                    )
                )
            case SecretPurpose.ENABLE_STEP_UP:
                user.enable_step_up(self._clock.now())
                await self._user_repo.update(user)
                await self._auditor.record(
                    AuditAction.TWO_FACTOR_ENABLED,
                    resource_type="user",
                    user_id=user.id,
                    metadata=metadata,
                )
                return Success(
                    value=StepUpVerification(purpose=cmd.purpose, user_id=user.id)
                )
            case _:
                return Failure(error=AuthenticationError.UNSUPPORTED_PURPOSE)

    async def _record_failure(
        self, cmd: VerifyOneTimeSecret, reason: str, metadata: RequestMetadata
    ) -> None:
        action = (
            AuditAction.TWO_FACTOR_ENABLE_FAILED
            if cmd.purpose is SecretPurpose.ENABLE_STEP_UP
            else AuditAction.OTP_VERIFY_FAILED
        )
        await self._auditor.record(
            action,
            resource_type="secret",
            success=False,
            user_id=cmd.user_id,
            metadata=metadata,
            purpose=cmd.purpose.value,
            reason=reason,
        )
