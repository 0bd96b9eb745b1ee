"""API v1 routers.

RESTful resource-based endpoints. All endpoints use resource nouns, not
action verbs.

Resources:
    /api/v1/users                  - Registration and profile
    /api/v1/sessions               - Login and logout
    /api/v1/tokens                 - Access token refresh
    /api/v1/step-up                - Two-factor enablement and verification
    /api/v1/password-reset-tokens  - Password reset token requests
    /api/v1/password-resets        - Password reset execution
"""

from fastapi import APIRouter

from warden.core.config import settings
from warden.presentation.routers.api.v1.password_resets import (
    password_reset_tokens_router,
    password_resets_router,
)
from warden.presentation.routers.api.v1.sessions import router as sessions_router
from warden.presentation.routers.api.v1.step_up import router as step_up_router
from warden.presentation.routers.api.v1.tokens import router as tokens_router
from warden.presentation.routers.api.v1.users import router as users_router

v1_router = APIRouter(prefix=settings.api_v1_prefix)
v1_router.include_router(users_router)
v1_router.include_router(sessions_router)
v1_router.include_router(tokens_router)
v1_router.include_router(step_up_router)
v1_router.include_router(password_reset_tokens_router)
v1_router.include_router(password_resets_router)

__all__ = [
    "v1_router",
]
