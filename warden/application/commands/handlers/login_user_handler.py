"""Login handler.

Flow:
1. Extract request metadata for the audit trail
2. Look up user by email (unknown email -> INVALID_CREDENTIALS)
3. Check account is active (ACCOUNT_INACTIVE)
4. Verify password (wrong password -> INVALID_CREDENTIALS)
5a. Step-up enabled: issue login code, deliver by SMS, return STEP_UP_PENDING
5b. Step-up disabled: mint access + refresh, record refresh hash, return tokens

Unknown email and wrong password return the same error constant so the
API response cannot be used to enumerate accounts. The audit trail keeps
the real reason.

Every outcome is audited: login_failed, login_2fa_required, login_success.
"""

from typing import TYPE_CHECKING

from warden.application.commands.auth_commands import LoginUser
from warden.application.dtos import LoginResult, RequestMetadata
from warden.application.services import (
    OneTimeSecretService,
    SecretDeliveryService,
    SecurityAuditor,
    TokenPairIssuer,
)
from warden.core.result import Failure, Result, Success
from warden.domain.enums import AuditAction, LoginState, SecretPurpose
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import PasswordHashingProtocol, UserRepository

if TYPE_CHECKING:
    from fastapi import Request


class LoginUserHandler:
    """Handler for LoginUser command.

    Single entry point of the login state machine: ends in
    AUTHENTICATED_DIRECT, STEP_UP_PENDING or Failure (rejected).
    """

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        secret_service: OneTimeSecretService,
        token_issuer: TokenPairIssuer,
        delivery_service: SecretDeliveryService,
        auditor: SecurityAuditor,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User lookup by email.
            password_service: Password verification.
            secret_service: Issues the login step-up code.
            token_issuer: Mints and records the token pair.
            delivery_service: Sends the code to the user's phone.
            auditor: Audit trail writer.
        """
        self._user_repo = user_repo
        self._password_service = password_service
        self._secret_service = secret_service
        self._token_issuer = token_issuer
        self._delivery_service = delivery_service
        self._auditor = auditor

    async def handle(
        self, cmd: LoginUser, request: "Request | None" = None
    ) -> Result[LoginResult, str]:
        """Handle login command.

        Args:
            cmd: LoginUser command with email and password.
            request: Optional FastAPI Request for IP/user agent tracking.

        Returns:
            Success(LoginResult) with tokens or a pending step-up.
            Failure(INVALID_CREDENTIALS | ACCOUNT_INACTIVE) otherwise.
        """
        # Step 1: Extract request metadata
        metadata = RequestMetadata.from_request(request)

        # Step 2: Look up user
        user = await self._user_repo.find_by_email(cmd.email)
        if user is None:
            await self._auditor.record(
                AuditAction.LOGIN_FAILED,
                resource_type="session",
                success=False,
                metadata=metadata,
                reason="user_not_found",
            )
            return Failure(error=AuthenticationError.INVALID_CREDENTIALS)

        # Step 3: Check account is active
        if not user.is_active:
            await self._auditor.record(
                AuditAction.LOGIN_FAILED,
                resource_type="session",
                success=False,
                user_id=user.id,
                metadata=metadata,
                reason=AuthenticationError.ACCOUNT_INACTIVE,
            )
            return Failure(error=AuthenticationError.ACCOUNT_INACTIVE)

        # Step 4: Verify password
        if not self._password_service.verify_password(cmd.password, user.password_hash):
            await self._auditor.record(
                AuditAction.LOGIN_FAILED,
                resource_type="session",
                success=False,
                user_id=user.id,
                metadata=metadata,
                reason="invalid_password",
            )
            return Failure(error=AuthenticationError.INVALID_CREDENTIALS)

        # Step 5a: Step-up required
        if user.is_step_up_enabled:
            code = await self._secret_service.issue(user.id, SecretPurpose.LOGIN_STEP_UP)
            await self._delivery_service.deliver(user, SecretPurpose.LOGIN_STEP_UP, code)
            await self._auditor.record(
                AuditAction.LOGIN_2FA_REQUIRED,
                resource_type="session",
                user_id=user.id,
                metadata=metadata,
            )
            return Success(
                value=LoginResult(state=LoginState.STEP_UP_PENDING, user_id=user.id)
            )

        # Step 5b: Direct login
        tokens = await self._token_issuer.issue(user, metadata)
        await self._auditor.record(
            AuditAction.LOGIN_SUCCESS,
            resource_type="session",
            user_id=user.id,
            metadata=metadata,
        )
        return Success(
            value=LoginResult(
                state=LoginState.AUTHENTICATED_DIRECT,
                user_id=user.id,
                tokens=tokens,
            )
        )
