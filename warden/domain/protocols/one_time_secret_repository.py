"""OneTimeSecretRepository protocol (port).

Stores hashed one-time codes and password reset tokens with expiry, a
used marker and an attempt counter.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from warden.domain.enums import SecretPurpose


@dataclass
class OneTimeSecretData:
    """Data transfer object for a one-time secret record."""

    id: UUID
    user_id: UUID
    purpose: SecretPurpose
    secret_hash: str
    expires_at: datetime
    used_at: datetime | None
    attempts: int
    created_at: datetime

    @property
    def is_used(self) -> bool:
        """True once the secret has been consumed."""
        return self.used_at is not None


class OneTimeSecretRepository(Protocol):
    """Protocol for one-time secret persistence.

    Invariants:
        - attempts never decreases
        - used_at, once set, is never cleared
        - lookups consult only the newest effective (unused, unexpired) row

    Implementations:
        - persistence.repositories.OneTimeSecretRepository (SQLAlchemy)
        - tests.utils.memory.InMemoryOneTimeSecretRepository (tests only)
    """

    async def save(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        secret_hash: str,
        expires_at: datetime,
    ) -> OneTimeSecretData:
        """Insert a new secret with attempts=0 and no used marker.

        Args:
            user_id: Owning user.
            purpose: What the secret authorizes.
            secret_hash: Bcrypt hash (codes) or SHA-256 digest (reset tokens).
            expires_at: Expiry timestamp.

        Returns:
            Created OneTimeSecretData.
        """
        ...

    async def find_latest_active(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        now: datetime,
        *,
        for_update: bool = False,
    ) -> OneTimeSecretData | None:
        """Find the most recently created unused, unexpired secret.

        Args:
            user_id: Owning user.
            purpose: Secret purpose.
            now: Current time for the expiry comparison.
            for_update: Lock the row until the transaction ends, so
                concurrent verifications of the same secret run one at a
                time and each sees the previous attempt count.

        Returns:
            Newest matching OneTimeSecretData, or None.
        """
        ...

    async def find_active_by_hash(
        self, secret_hash: str, purpose: SecretPurpose, now: datetime
    ) -> OneTimeSecretData | None:
        """Find an unused, unexpired secret by its digest.

        Used for high-entropy reset tokens where the digest is a lookup key.

        Args:
            secret_hash: SHA-256 hex digest of the presented token.
            purpose: Secret purpose.
            now: Current time for the expiry comparison.

        Returns:
            Matching OneTimeSecretData, or None.
        """
        ...

    async def increment_attempts(self, secret_id: UUID) -> None:
        """Atomically add one to the attempt counter.

        MUST be a single atomic increment (``attempts = attempts + 1``),
        never a read-modify-write.

        Args:
            secret_id: Secret identifier.
        """
        ...

    async def mark_used(self, secret_id: UUID, used_at: datetime) -> bool:
        """Consume a secret.

        Args:
            secret_id: Secret identifier.
            used_at: Consumption timestamp.

        Returns:
            True if this call consumed the secret, False if it was
            already used (a concurrent verification won).
        """
        ...
