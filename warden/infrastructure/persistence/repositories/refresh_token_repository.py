"""Refresh token ledger over the ``refresh_tokens`` table."""

from dataclasses import fields
from datetime import datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from warden.domain.protocols.refresh_token_repository import RefreshTokenData
from warden.infrastructure.persistence.models.refresh_token import RefreshTokenModel

_FIELDS = tuple(f.name for f in fields(RefreshTokenData))


def _record(row: RefreshTokenModel) -> RefreshTokenData:
    return RefreshTokenData(**{name: getattr(row, name) for name in _FIELDS})


class RefreshTokenRepository:
    """Ledger rows keyed by token digest.

    Revocation is a conditional UPDATE on ``revoked_at IS NULL``, so the
    first revocation of a row wins and later ones change nothing.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _revoke(self, *criteria, revoked_at: datetime, reason: str):
        return (
            update(RefreshTokenModel)
            .where(*criteria, RefreshTokenModel.revoked_at.is_(None))
            .values(revoked_at=revoked_at, revoked_reason=reason)
        )

    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> RefreshTokenData:
        row = RefreshTokenModel(
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        self.session.add(row)
        await self.session.flush()
        # created_at is filled in by the database
        await self.session.refresh(row)
        return _record(row)

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        row = await self.session.scalar(
            select(RefreshTokenModel).where(RefreshTokenModel.token_hash == token_hash)
        )
        return None if row is None else _record(row)

    async def revoke(
        self, token_hash: str, *, revoked_at: datetime, reason: str
    ) -> None:
        await self.session.execute(
            self._revoke(
                RefreshTokenModel.token_hash == token_hash,
                revoked_at=revoked_at,
                reason=reason,
            )
        )

    async def revoke_all_for_user(
        self, user_id: UUID, *, revoked_at: datetime, reason: str
    ) -> int:
        """Revoke every live row of ``user_id`` and return how many changed."""
        result = await self.session.execute(
            self._revoke(
                RefreshTokenModel.user_id == user_id,
                revoked_at=revoked_at,
                reason=reason,
            )
        )
        return result.rowcount or 0
