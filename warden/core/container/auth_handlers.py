"""Per-request handler factories.

Each factory builds its handler from the request session, so the handler's
repositories, unit of work and refresh token ledger commit or roll back
together. Audit rows go through ``get_audit`` on a second session.
"""

from datetime import timedelta
from typing import TYPE_CHECKING, Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from warden.core.config import settings
from warden.core.container.infrastructure import (
    get_audit,
    get_clock,
    get_db_session,
    get_logger,
    get_notification_service,
    get_password_service,
    get_secret_token_service,
    get_token_service,
)
from warden.domain.protocols import AuditProtocol

if TYPE_CHECKING:
    from warden.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from warden.application.commands.handlers.enable_step_up_handler import (
        EnableStepUpHandler,
    )
    from warden.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )
    from warden.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )
    from warden.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )
    from warden.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )
    from warden.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from warden.application.commands.handlers.verify_one_time_secret_handler import (
        VerifyOneTimeSecretHandler,
    )
    from warden.application.queries.handlers.get_profile_handler import (
        GetProfileHandler,
    )
    from warden.application.services import (
        OneTimeSecretService,
        RefreshTokenLedger,
        SecretDeliveryService,
        SecurityAuditor,
        TokenPairIssuer,
    )
    from warden.infrastructure.persistence.repositories import UserRepository


Session = Annotated[AsyncSession, Depends(get_db_session)]
Audit = Annotated[AuditProtocol, Depends(get_audit)]


def _one_time_secret_service(session: AsyncSession) -> "OneTimeSecretService":
    from warden.application.services import OneTimeSecretService
    from warden.infrastructure.persistence.repositories import (
        OneTimeSecretRepository,
    )

    return OneTimeSecretService(
        secret_repo=OneTimeSecretRepository(session=session),
        password_service=get_password_service(),
        secret_token_service=get_secret_token_service(),
        clock=get_clock(),
        max_attempts=settings.otp_max_attempts,
        otp_ttl=timedelta(minutes=settings.otp_expire_minutes),
        reset_ttl=timedelta(hours=settings.password_reset_expire_hours),
    )


def _refresh_token_ledger(session: AsyncSession) -> "RefreshTokenLedger":
    from warden.application.services import RefreshTokenLedger
    from warden.infrastructure.persistence.repositories import (
        RefreshTokenRepository,
    )

    return RefreshTokenLedger(
        refresh_token_repo=RefreshTokenRepository(session=session), clock=get_clock()
    )


def _token_pair_issuer(session: AsyncSession) -> "TokenPairIssuer":
    from warden.application.services import TokenPairIssuer

    return TokenPairIssuer(
        token_service=get_token_service(),
        secret_token_service=get_secret_token_service(),
        ledger=_refresh_token_ledger(session),
        clock=get_clock(),
    )


def _delivery() -> "SecretDeliveryService":
    from warden.application.services import SecretDeliveryService

    return SecretDeliveryService(
        notification_service=get_notification_service(), logger=get_logger()
    )


def _auditor(audit: AuditProtocol) -> "SecurityAuditor":
    from warden.application.services import SecurityAuditor

    return SecurityAuditor(audit=audit, logger=get_logger())


def _users(session: AsyncSession) -> "UserRepository":
    from warden.infrastructure.persistence.repositories import UserRepository

    return UserRepository(session=session)


async def get_register_user_handler(
    session: Session, audit: Audit
) -> "RegisterUserHandler":
    from warden.application.commands.handlers.register_user_handler import (
        RegisterUserHandler,
    )

    return RegisterUserHandler(
        user_repo=_users(session),
        password_service=get_password_service(),
        auditor=_auditor(audit),
        clock=get_clock(),
    )


async def get_login_user_handler(session: Session, audit: Audit) -> "LoginUserHandler":
    from warden.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )

    return LoginUserHandler(
        user_repo=_users(session),
        password_service=get_password_service(),
        secret_service=_one_time_secret_service(session),
        token_issuer=_token_pair_issuer(session),
        delivery_service=_delivery(),
        auditor=_auditor(audit),
    )


async def get_enable_step_up_handler(
    session: Session, audit: Audit
) -> "EnableStepUpHandler":
    from warden.application.commands.handlers.enable_step_up_handler import (
        EnableStepUpHandler,
    )

    return EnableStepUpHandler(
        user_repo=_users(session),
        secret_service=_one_time_secret_service(session),
        delivery_service=_delivery(),
        auditor=_auditor(audit),
    )


async def get_verify_one_time_secret_handler(
    session: Session, audit: Audit
) -> "VerifyOneTimeSecretHandler":
    """Handler for login and enable codes; flips the step-up flag on enable."""
    from warden.application.commands.handlers.verify_one_time_secret_handler import (
        VerifyOneTimeSecretHandler,
    )

    return VerifyOneTimeSecretHandler(
        user_repo=_users(session),
        secret_service=_one_time_secret_service(session),
        token_issuer=_token_pair_issuer(session),
        auditor=_auditor(audit),
        clock=get_clock(),
    )


async def get_refresh_token_handler(
    session: Session, audit: Audit
) -> "RefreshAccessTokenHandler":
    from warden.application.commands.handlers.refresh_access_token_handler import (
        RefreshAccessTokenHandler,
    )

    return RefreshAccessTokenHandler(
        token_service=get_token_service(),
        secret_token_service=get_secret_token_service(),
        ledger=_refresh_token_ledger(session),
        auditor=_auditor(audit),
    )


async def get_logout_user_handler(
    session: Session, audit: Audit
) -> "LogoutUserHandler":
    from warden.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )

    return LogoutUserHandler(
        token_service=get_token_service(),
        secret_token_service=get_secret_token_service(),
        ledger=_refresh_token_ledger(session),
        auditor=_auditor(audit),
    )


async def get_request_password_reset_handler(
    session: Session, audit: Audit
) -> "RequestPasswordResetHandler":
    from warden.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )

    return RequestPasswordResetHandler(
        user_repo=_users(session),
        secret_service=_one_time_secret_service(session),
        delivery_service=_delivery(),
        auditor=_auditor(audit),
        logger=get_logger(),
    )


async def get_confirm_password_reset_handler(
    session: Session, audit: Audit
) -> "ConfirmPasswordResetHandler":
    """Consumes the token, rewrites the password and revokes every session."""
    from warden.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from warden.infrastructure.persistence.unit_of_work import SqlAlchemyUnitOfWork

    return ConfirmPasswordResetHandler(
        user_repo=_users(session),
        secret_service=_one_time_secret_service(session),
        ledger=_refresh_token_ledger(session),
        password_service=get_password_service(),
        uow=SqlAlchemyUnitOfWork(session=session),
        auditor=_auditor(audit),
        clock=get_clock(),
    )


async def get_get_profile_handler(session: Session) -> "GetProfileHandler":
    from warden.application.queries.handlers.get_profile_handler import (
        GetProfileHandler,
    )

    return GetProfileHandler(user_repo=_users(session))
