"""Dependency factories for FastAPI routes and tests.

Override any of them in tests through ``app.dependency_overrides``.
"""

from warden.core.container.infrastructure import (
    get_audit,
    get_audit_session,
    get_clock,
    get_database,
    get_db_session,
    get_logger,
    get_notification_service,
    get_password_service,
    get_rate_limit,
    get_secret_token_service,
    get_token_service,
)
from warden.core.container.auth_handlers import (
    get_confirm_password_reset_handler,
    get_enable_step_up_handler,
    get_get_profile_handler,
    get_login_user_handler,
    get_logout_user_handler,
    get_refresh_token_handler,
    get_register_user_handler,
    get_request_password_reset_handler,
    get_verify_one_time_secret_handler,
)

__all__ = [
    "get_audit",
    "get_audit_session",
    "get_clock",
    "get_database",
    "get_db_session",
    "get_logger",
    "get_notification_service",
    "get_password_service",
    "get_rate_limit",
    "get_secret_token_service",
    "get_token_service",
    "get_confirm_password_reset_handler",
    "get_enable_step_up_handler",
    "get_get_profile_handler",
    "get_login_user_handler",
    "get_logout_user_handler",
    "get_refresh_token_handler",
    "get_register_user_handler",
    "get_request_password_reset_handler",
    "get_verify_one_time_secret_handler",
]
