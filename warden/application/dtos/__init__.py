"""Application DTOs returned by handlers."""

from warden.application.dtos.auth_dtos import (
    AccessTokenRefresh,
    AuthTokens,
    LoginResult,
    RequestMetadata,
    StepUpVerification,
    UserProfile,
)

__all__ = [
    "AccessTokenRefresh",
    "AuthTokens",
    "LoginResult",
    "RequestMetadata",
    "StepUpVerification",
    "UserProfile",
]
