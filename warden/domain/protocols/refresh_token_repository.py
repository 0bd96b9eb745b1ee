"""RefreshTokenRepository protocol (port) for the refresh token ledger.

Only the SHA-256 digest of a refresh token is ever persisted. The raw
token exists only in the login/verify response and during hashing.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID


@dataclass
class RefreshTokenData:
    """Data transfer object for an issued refresh token record.

    Used by protocol methods to return ledger rows without exposing
    infrastructure model classes to the application layer.
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    revoked_at: datetime | None
    revoked_reason: str | None
    ip_address: str | None
    user_agent: str | None
    created_at: datetime

    @property
    def is_revoked(self) -> bool:
        """True once the record has been revoked."""
        return self.revoked_at is not None


class RefreshTokenRepository(Protocol):
    """Protocol for refresh token ledger persistence.

    Record Lifecycle:
        1. Created on login (direct or after step-up)
        2. Checked on every access token refresh
        3. Revoked on logout (one record) or password reset (all records)
        4. Terminal once revoked or expired

    Implementations:
        - persistence.repositories.RefreshTokenRepository (SQLAlchemy)
        - tests.utils.memory.InMemoryRefreshTokenRepository (tests only)
    """

    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> RefreshTokenData:
        """Insert a new, non-revoked record.

        Args:
            user_id: Owning user.
            token_hash: SHA-256 hex digest of the raw token.
            expires_at: Expiry copied from the token's lifetime.
            ip_address: Client address at issuance (optional).
            user_agent: Client user agent at issuance (optional).

        Returns:
            Created RefreshTokenData.
        """
        ...

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        """Find a record by token digest.

        Returns revoked and expired records too; the caller decides.

        Args:
            token_hash: SHA-256 hex digest of the presented token.

        Returns:
            RefreshTokenData if found, None otherwise.
        """
        ...

    async def revoke(self, token_hash: str, *, revoked_at: datetime, reason: str) -> None:
        """Revoke one record.

        Idempotent: revoking an unknown or already revoked record is a no-op.

        Args:
            token_hash: SHA-256 hex digest of the token.
            revoked_at: Revocation timestamp.
            reason: Why the record was revoked (logout, password_reset).
        """
        ...

    async def revoke_all_for_user(
        self, user_id: UUID, *, revoked_at: datetime, reason: str
    ) -> int:
        """Revoke every non-revoked record of a user.

        Args:
            user_id: Owning user.
            revoked_at: Revocation timestamp.
            reason: Why the records were revoked.

        Returns:
            Number of records revoked by this call.
        """
        ...
