"""Registration.

The pre-insert email lookup only avoids hashing for an obvious duplicate;
the unique index decides races. Both duplicate paths are audited as
``registration_failed`` and return EMAIL_ALREADY_EXISTS.
"""

from typing import TYPE_CHECKING

from uuid_extensions import uuid7

from warden.application.commands.auth_commands import RegisterUser
from warden.application.dtos import RequestMetadata, UserProfile
from warden.application.services import SecurityAuditor
from warden.core.result import Failure, Result, Success
from warden.domain.entities.user import User
from warden.domain.enums import AuditAction
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import ClockProtocol, PasswordHashingProtocol, UserRepository

if TYPE_CHECKING:
    from fastapi import Request


class RegisterUserHandler:
    """Handler for user registration command."""

    def __init__(
        self,
        user_repo: UserRepository,
        password_service: PasswordHashingProtocol,
        auditor: SecurityAuditor,
        clock: ClockProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._password_service = password_service
        self._auditor = auditor
        self._clock = clock

    async def handle(
        self, cmd: RegisterUser, request: "Request | None" = None
    ) -> Result[UserProfile, str]:
        """Handle user registration command.

        Args:
            cmd: RegisterUser command (validated by Annotated types).
            request: Optional FastAPI Request for IP/user agent tracking.

        Returns:
            Success(UserProfile) on successful registration.
            Failure(AuthenticationError.EMAIL_ALREADY_EXISTS) if taken.
        """
        # Step 1: Extract request metadata
        metadata = RequestMetadata.from_request(request)

        # Step 2: Email/password/phone validation already handled by Annotated types

        # Step 3: Check email uniqueness
        existing_user = await self._user_repo.find_by_email(cmd.email)
        if existing_user is not None:
            await self._record_failure(metadata)
            return Failure(error=AuthenticationError.EMAIL_ALREADY_EXISTS)

        # Step 4: Hash password
        password_hash = self._password_service.hash_password(cmd.password)

        # Step 5: Create User entity
        now = self._clock.now()
        user = User(
            id=uuid7(),
            email=cmd.email,
            password_hash=password_hash,
            phone=cmd.phone,
            is_active=True,
            is_step_up_enabled=False,
            created_at=now,
            updated_at=now,
        )

        # Step 6: Save user (a concurrent registration may win the insert)
        save_result = await self._user_repo.save(user)
        if isinstance(save_result, Failure):
            await self._record_failure(metadata)
            return Failure(error=save_result.error)

        # Step 7: Record audit event
        await self._auditor.record(
            AuditAction.USER_REGISTERED,
            resource_type="user",
            user_id=user.id,
            metadata=metadata,
            has_phone=user.phone is not None,
        )

        # Step 8: Return public fields only
        return Success(value=UserProfile.from_user(user))

    async def _record_failure(self, metadata: RequestMetadata) -> None:
        await self._auditor.record(
            AuditAction.REGISTRATION_FAILED,
            resource_type="user",
            success=False,
            metadata=metadata,
            reason=AuthenticationError.EMAIL_ALREADY_EXISTS,
        )
