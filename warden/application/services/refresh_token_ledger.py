"""Refresh token ledger.

Server-side record of every issued refresh token, keyed by the SHA-256
digest of the token. The token itself is stateless; this ledger is the
only way to invalidate one before its embedded expiry.
"""

from datetime import datetime
from uuid import UUID

from warden.core.result import Failure, Result, Success
from warden.domain.errors import LedgerError
from warden.domain.protocols import ClockProtocol, RefreshTokenData, RefreshTokenRepository


class RefreshTokenLedger:
    """Record, check and revoke refresh token digests."""

    def __init__(
        self,
        refresh_token_repo: RefreshTokenRepository,
        clock: ClockProtocol,
    ) -> None:
        self._refresh_token_repo = refresh_token_repo
        self._clock = clock

    async def record(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> RefreshTokenData:
        """Insert a non-revoked ledger row."""
        return await self._refresh_token_repo.save(
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            ip_address=ip_address,
            user_agent=user_agent,
        )

    async def check(self, token_hash: str) -> Result[RefreshTokenData, str]:
        """Check that a token digest is usable.

        Returns:
            Success(RefreshTokenData) if the row exists, is not revoked and
            has not expired. Failure(LedgerError.*) otherwise.
        """
        record = await self._refresh_token_repo.find_by_token_hash(token_hash)
        if record is None:
            return Failure(error=LedgerError.TOKEN_NOT_FOUND)
        if record.is_revoked:
            return Failure(error=LedgerError.TOKEN_REVOKED)
        if record.expires_at <= self._clock.now():
            return Failure(error=LedgerError.TOKEN_EXPIRED)
        return Success(value=record)

    async def revoke(self, token_hash: str, *, reason: str = "logout") -> None:
        """Revoke one token. Unknown or already revoked digests are ignored."""
        await self._refresh_token_repo.revoke(
            token_hash, revoked_at=self._clock.now(), reason=reason
        )

    async def revoke_all(self, user_id: UUID, *, reason: str) -> int:
        """Revoke every outstanding token of a user.

        Returns:
            Number of rows revoked by this call.
        """
        return await self._refresh_token_repo.revoke_all_for_user(
            user_id, revoked_at=self._clock.now(), reason=reason
        )
