"""Commands (write operations) of the credential engine."""

from warden.application.commands.auth_commands import (
    ConfirmPasswordReset,
    EnableStepUp,
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    RequestPasswordReset,
    VerifyOneTimeSecret,
)

__all__ = [
    "ConfirmPasswordReset",
    "EnableStepUp",
    "LoginUser",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    "RequestPasswordReset",
    "VerifyOneTimeSecret",
]
