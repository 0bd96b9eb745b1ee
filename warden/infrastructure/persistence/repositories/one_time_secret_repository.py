"""OneTimeSecretRepository - SQLAlchemy implementation.

Attempt counting and consumption are single UPDATE statements, and code
verification reads the secret under a row lock, so two concurrent
verifications cannot both read the same counter or both consume the same
secret.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from warden.domain.enums import SecretPurpose
from warden.domain.protocols.one_time_secret_repository import OneTimeSecretData
from warden.infrastructure.persistence.models.one_time_secret import (
    OneTimeSecretModel,
)


def _to_data(model: OneTimeSecretModel) -> OneTimeSecretData:
    """Convert database model to domain DTO."""
    return OneTimeSecretData(
        id=model.id,
        user_id=model.user_id,
        purpose=SecretPurpose(model.purpose),
        secret_hash=model.secret_hash,
        expires_at=model.expires_at,
        used_at=model.used_at,
        attempts=model.attempts,
        created_at=model.created_at,
    )


class OneTimeSecretRepository:
    """SQLAlchemy implementation of OneTimeSecretRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def save(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        secret_hash: str,
        expires_at: datetime,
    ) -> OneTimeSecretData:
        """Insert a new secret (attempts=0, unused).

        Args:
            user_id: Owning user.
            purpose: Secret purpose.
            secret_hash: Hashed secret.
            expires_at: Expiry timestamp.

        Returns:
            Created OneTimeSecretData.
        """
        model = OneTimeSecretModel(
            user_id=user_id,
            purpose=purpose.value,
            secret_hash=secret_hash,
            expires_at=expires_at,
            attempts=0,
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return _to_data(model)

    async def find_latest_active(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        now: datetime,
        *,
        for_update: bool = False,
    ) -> OneTimeSecretData | None:
        """Newest unused, unexpired secret for (user, purpose).

        Args:
            user_id: Owning user.
            purpose: Secret purpose.
            now: Current time.
            for_update: Take a row lock (``SELECT ... FOR UPDATE``) held
                until the session commits. A concurrent locked read waits,
                then sees the committed attempt count and ``used_at``.

        Returns:
            OneTimeSecretData or None.
        """
        stmt = (
            select(OneTimeSecretModel)
            .where(OneTimeSecretModel.user_id == user_id)
            .where(OneTimeSecretModel.purpose == purpose.value)
            .where(OneTimeSecretModel.used_at.is_(None))
            .where(OneTimeSecretModel.expires_at > now)
            .order_by(OneTimeSecretModel.created_at.desc(), OneTimeSecretModel.id.desc())
            .limit(1)
        )
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def find_active_by_hash(
        self, secret_hash: str, purpose: SecretPurpose, now: datetime
    ) -> OneTimeSecretData | None:
        """Unused, unexpired secret with the given digest.

        Args:
            secret_hash: SHA-256 digest of the presented token.
            purpose: Secret purpose.
            now: Current time.

        Returns:
            OneTimeSecretData or None.
        """
        stmt = (
            select(OneTimeSecretModel)
            .where(OneTimeSecretModel.secret_hash == secret_hash)
            .where(OneTimeSecretModel.purpose == purpose.value)
            .where(OneTimeSecretModel.used_at.is_(None))
            .where(OneTimeSecretModel.expires_at > now)
            .order_by(OneTimeSecretModel.created_at.desc())
            .limit(1)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return _to_data(model) if model else None

    async def increment_attempts(self, secret_id: UUID) -> None:
        """Atomically increment the attempt counter.

        Args:
            secret_id: Secret identifier.
        """
        stmt = (
            update(OneTimeSecretModel)
            .where(OneTimeSecretModel.id == secret_id)
            .values(attempts=OneTimeSecretModel.attempts + 1)
        )
        await self.session.execute(stmt)

    async def mark_used(self, secret_id: UUID, used_at: datetime) -> bool:
        """Consume a secret if nobody else has.

        Args:
            secret_id: Secret identifier.
            used_at: Consumption timestamp.

        Returns:
            True if this call set used_at, False if it was already set.
        """
        stmt = (
            update(OneTimeSecretModel)
            .where(OneTimeSecretModel.id == secret_id)
            .where(OneTimeSecretModel.used_at.is_(None))
            .values(used_at=used_at)
        )
        result = await self.session.execute(stmt)
        return (result.rowcount or 0) == 1
