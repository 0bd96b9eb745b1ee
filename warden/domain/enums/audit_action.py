"""Stored names of audit events.

A failure reason is event context (``reason="invalid_password"``), never a
separate member.
"""

from enum import Enum


class AuditAction(str, Enum):
    USER_REGISTERED = "user_registered"
    REGISTRATION_FAILED = "registration_failed"

    LOGIN_FAILED = "login_failed"
    LOGIN_2FA_REQUIRED = "login_2fa_required"
    LOGIN_SUCCESS = "login_success"
    LOGIN_SUCCESS_WITH_2FA = "login_success_with_2fa"

    # step-up enrollment and code checks
    TWO_FACTOR_ENABLE_REQUESTED = "2fa_enable_requested"
    TWO_FACTOR_ENABLE_FAILED = "2fa_enable_failed"
    TWO_FACTOR_ENABLED = "2fa_enabled"
    OTP_VERIFY_FAILED = "otp_verify_failed"

    TOKEN_REFRESHED = "token_refreshed"
    TOKEN_REFRESH_FAILED = "token_refresh_failed"
    LOGOUT = "logout"

    PASSWORD_RESET_REQUESTED = "password_reset_requested"
    PASSWORD_RESET_COMPLETED = "password_reset_completed"
    PASSWORD_RESET_FAILED = "password_reset_failed"
