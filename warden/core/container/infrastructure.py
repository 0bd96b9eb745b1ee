"""Infrastructure factories.

``lru_cache`` factories build process-wide singletons (database pool,
hashers, token services, clock, SMS adapter, rate limiter, logger). The
async generators are FastAPI dependencies that open one session per request.

Each request gets two sessions. ``get_db_session`` carries the business
transaction and commits once when the request succeeds. ``get_audit_session``
backs the audit adapter, which commits per row so audit entries outlive a
rolled-back business transaction.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from warden.core.config import settings
from warden.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from warden.domain.protocols import (
        AuditProtocol,
        ClockProtocol,
        LoggerProtocol,
        NotificationProtocol,
        PasswordHashingProtocol,
        RateLimitProtocol,
        SecretTokenProtocol,
        TokenGenerationProtocol,
    )


@lru_cache()
def get_database() -> Database:
    return Database(database_url=settings.database_url, echo=settings.db_echo)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Request transaction; repositories flush, this commits."""
    async with get_database().get_session() as session:
        yield session


async def get_audit_session() -> AsyncGenerator[AsyncSession, None]:
    """Session used only by the audit adapter."""
    async with get_database().get_session() as session:
        yield session


async def get_audit(
    audit_session: AsyncSession = Depends(get_audit_session),
) -> "AuditProtocol":
    from warden.infrastructure.audit.postgres_adapter import PostgresAuditAdapter

    return PostgresAuditAdapter(session=audit_session)


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """bcrypt hasher for passwords and one-time codes (cost from BCRYPT_ROUNDS)."""
    from warden.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=settings.bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    from warden.infrastructure.security import JWTService

    return JWTService(
        access_secret=settings.access_token_secret,
        refresh_secret=settings.refresh_token_secret,
        access_expiration_minutes=settings.access_token_expire_minutes,
        refresh_expiration_days=settings.refresh_token_expire_days,
    )


@lru_cache()
def get_secret_token_service() -> "SecretTokenProtocol":
    from warden.infrastructure.security import SecretTokenService

    return SecretTokenService(otp_length=settings.otp_length)


@lru_cache()
def get_clock() -> "ClockProtocol":
    from warden.infrastructure.clock import SystemClock

    return SystemClock()


@lru_cache()
def get_notification_service() -> "NotificationProtocol":
    """SMS adapter chosen by SMS_PROVIDER.

    ``mock`` logs each message (text included only in development);
    ``twilio`` sends through the Twilio REST API.

    Raises:
        ValueError: ``twilio`` is selected without all three TWILIO_* settings.
    """
    from warden.infrastructure.notifications import StubSmsService, TwilioSmsService

    if settings.sms_provider != "twilio":
        return StubSmsService(
            logger=get_logger(), reveal_messages=settings.is_development
        )

    credentials = (
        settings.twilio_account_sid,
        settings.twilio_auth_token,
        settings.twilio_from_number,
    )
    if not all(credentials):
        raise ValueError(
            "SMS_PROVIDER=twilio requires TWILIO_ACCOUNT_SID, "
            "TWILIO_AUTH_TOKEN and TWILIO_FROM_NUMBER"
        )
    account_sid, auth_token, from_number = credentials
    return TwilioSmsService(
        account_sid=account_sid,
        auth_token=auth_token,
        from_number=from_number,
        logger=get_logger(),
    )


@lru_cache()
def get_rate_limit() -> "RateLimitProtocol":
    """Process-wide token buckets for the credential endpoints."""
    from warden.infrastructure.rate_limit import TokenBucketAdapter, build_auth_rules

    return TokenBucketAdapter(
        rules=build_auth_rules(
            api_prefix=settings.api_v1_prefix,
            max_requests=settings.auth_rate_limit_max_requests,
            window_minutes=settings.auth_rate_limit_window_minutes,
            enabled=settings.rate_limit_enabled,
        ),
        clock=get_clock(),
        logger=get_logger(),
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Console logger: colored in development, JSON lines elsewhere."""
    from warden.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(use_json=not settings.is_development, level=settings.log_level)
