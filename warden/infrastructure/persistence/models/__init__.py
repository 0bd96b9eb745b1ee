"""Database models for the persistence layer.

Models Organization:
    - user.py: User accounts
    - refresh_token.py: Refresh token ledger (hashes only)
    - one_time_secret.py: Hashed one-time codes and reset tokens
    - audit_log.py: Append-only audit trail

Domain entities live in warden/domain/entities/ and are mapped to/from
these models by the repositories.
"""

from warden.infrastructure.persistence.models.audit_log import AuditLogModel
from warden.infrastructure.persistence.models.one_time_secret import (
    OneTimeSecretModel,
)
from warden.infrastructure.persistence.models.refresh_token import RefreshTokenModel
from warden.infrastructure.persistence.models.user import UserModel

__all__ = [
    "AuditLogModel",
    "OneTimeSecretModel",
    "RefreshTokenModel",
    "UserModel",
]
