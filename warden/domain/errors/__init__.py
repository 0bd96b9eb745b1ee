"""Domain error types.

Usage:
    from warden.domain.errors import AuditError, AuthenticationError
"""

from warden.domain.errors.audit_error import AuditError
from warden.domain.errors.authentication_error import (
    AuthenticationError,
    LedgerError,
    OneTimeSecretError,
    TokenError,
)

__all__ = [
    "AuditError",
    "AuthenticationError",
    "LedgerError",
    "OneTimeSecretError",
    "TokenError",
]
