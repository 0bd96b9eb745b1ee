"""ASGI application.

Run locally with::

    uvicorn warden.main:app --reload
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from warden.core.config import settings
from warden.core.container import get_database, get_logger
from warden.presentation.routers.api.middleware.rate_limit_middleware import (
    RateLimitMiddleware,
)
from warden.presentation.routers.api.middleware.trace_middleware import TraceMiddleware
from warden.presentation.routers.api.v1 import v1_router
from warden.presentation.routers.api.v1.errors import register_exception_handlers
from warden.presentation.routers.system import system_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Log start and stop; dispose the connection pool on shutdown."""
    logger = get_logger()
    logger.info(
        "application_starting",
        environment=settings.environment.value,
        sms_provider=settings.sms_provider,
    )
    try:
        yield
    finally:
        await get_database().close()
        logger.info("application_stopped")


def create_app() -> FastAPI:
    application = FastAPI(
        title=settings.app_name,
        description=(
            "Credential service: registration, sessions, step-up verification "
            "and password reset."
        ),
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    # Last added runs first: trace IDs exist before rate limiting
    application.add_middleware(RateLimitMiddleware)
    application.add_middleware(TraceMiddleware)
    register_exception_handlers(application)
    application.include_router(system_router)
    application.include_router(v1_router)
    return application


app = create_app()
