"""Unversioned operational endpoints: ``/``, ``/health`` and ``/config``."""

from typing import Any

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from warden.core.config import settings
from warden.core.container import get_database

system_router = APIRouter(tags=["System"])


@system_router.get("/")
async def root() -> dict[str, str]:
    return {
        "message": settings.app_name,
        "status": "operational",
        "version": settings.app_version,
    }


@system_router.get("/health")
async def health() -> JSONResponse:
    """200 when PostgreSQL answers, 503 ``degraded`` when it does not."""
    if await get_database().check_connection():
        return JSONResponse({"status": "healthy", "database": "ok"})
    return JSONResponse(
        {"status": "degraded", "database": "unreachable"},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@system_router.get("/config")
async def get_config() -> dict[str, Any]:
    """Effective non-secret settings, available in development only.

    Signing secrets, Twilio credentials and the database URL are never
    included.
    """
    if not settings.is_development:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="The config endpoint is only available in development.",
        )

    return {
        "environment": settings.environment.value,
        "debug": settings.debug,
        "api": {
            "name": settings.app_name,
            "version": settings.app_version,
            "base_url": settings.api_base_url,
            "v1_prefix": settings.api_v1_prefix,
        },
        "database": {"echo": settings.db_echo},
        "tokens": {
            "access_expire_minutes": settings.access_token_expire_minutes,
            "refresh_expire_days": settings.refresh_token_expire_days,
        },
        "one_time_secrets": {
            "otp_length": settings.otp_length,
            "otp_expire_minutes": settings.otp_expire_minutes,
            "otp_max_attempts": settings.otp_max_attempts,
            "password_reset_expire_hours": settings.password_reset_expire_hours,
        },
        "sms_provider": settings.sms_provider,
    }
