"""In-memory repositories and unit of work.

Each method body runs without awaiting, so on a single event loop every
method is atomic, including increment_attempts and mark_used. Returned
objects are copies; callers never alias stored rows.
"""

from __future__ import annotations

import asyncio
import copy
from contextlib import asynccontextmanager
from dataclasses import replace
from datetime import datetime
from typing import AsyncIterator
from uuid import UUID

from uuid_extensions import uuid7

from warden.core.result import Failure, Result, Success
from warden.domain.entities.user import User
from warden.domain.enums import SecretPurpose
from warden.domain.errors import AuthenticationError
from warden.domain.protocols.clock_protocol import ClockProtocol
from warden.domain.protocols.one_time_secret_repository import OneTimeSecretData
from warden.domain.protocols.refresh_token_repository import RefreshTokenData
from warden.infrastructure.clock import SystemClock
from tests.utils.memory.store import InMemoryStore


class InMemoryUserRepository:
    """UserRepository over an InMemoryStore."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    async def find_by_id(self, user_id: UUID) -> User | None:
        user = self._store.users.get(user_id)
        return copy.deepcopy(user) if user else None

    async def find_by_email(self, email: str) -> User | None:
        user_id = self._store.user_ids_by_email.get(email.strip().lower())
        if user_id is None:
            return None
        return await self.find_by_id(user_id)

    async def save(self, user: User) -> Result[None, str]:
        email = user.email.lower()
        if email in self._store.user_ids_by_email:
            return Failure(error=AuthenticationError.EMAIL_ALREADY_EXISTS)
        self._store.user_ids_by_email[email] = user.id
        self._store.users[user.id] = copy.deepcopy(user)
        return Success(value=None)

    async def update(self, user: User) -> None:
        if user.id not in self._store.users:
            msg = f"User {user.id} does not exist"
            raise LookupError(msg)
        self._store.users[user.id] = copy.deepcopy(user)


class InMemoryRefreshTokenRepository:
    """Refresh token ledger over an InMemoryStore."""

    def __init__(self, store: InMemoryStore, clock: ClockProtocol | None = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()

    async def save(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
        *,
        ip_address: str | None = None,
        user_agent: str | None = None,
    ) -> RefreshTokenData:
        if token_hash in self._store.refresh_tokens:
            msg = "Duplicate refresh token hash"
            raise ValueError(msg)
        record = RefreshTokenData(
            id=uuid7(),
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            revoked_at=None,
            revoked_reason=None,
            ip_address=ip_address,
            user_agent=user_agent,
            created_at=self._clock.now(),
        )
        self._store.refresh_tokens[token_hash] = record
        return replace(record)

    async def find_by_token_hash(self, token_hash: str) -> RefreshTokenData | None:
        record = self._store.refresh_tokens.get(token_hash)
        return replace(record) if record else None

    async def revoke(self, token_hash: str, *, revoked_at: datetime, reason: str) -> None:
        record = self._store.refresh_tokens.get(token_hash)
        if record is not None and record.revoked_at is None:
            record.revoked_at = revoked_at
            record.revoked_reason = reason

    async def revoke_all_for_user(
        self, user_id: UUID, *, revoked_at: datetime, reason: str
    ) -> int:
        revoked = 0
        for record in self._store.refresh_tokens.values():
            if record.user_id == user_id and record.revoked_at is None:
                record.revoked_at = revoked_at
                record.revoked_reason = reason
                revoked += 1
        return revoked


class InMemoryOneTimeSecretRepository:
    """One-time secret storage over an InMemoryStore."""

    def __init__(self, store: InMemoryStore, clock: ClockProtocol | None = None) -> None:
        self._store = store
        self._clock = clock or SystemClock()

    async def save(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        secret_hash: str,
        expires_at: datetime,
    ) -> OneTimeSecretData:
        record = OneTimeSecretData(
            id=uuid7(),
            user_id=user_id,
            purpose=purpose,
            secret_hash=secret_hash,
            expires_at=expires_at,
            used_at=None,
            attempts=0,
            created_at=self._clock.now(),
        )
        self._store.one_time_secrets[record.id] = record
        return replace(record)

    async def find_latest_active(
        self,
        user_id: UUID,
        purpose: SecretPurpose,
        now: datetime,
        *,
        for_update: bool = False,
    ) -> OneTimeSecretData | None:
        # for_update has no effect: callers never interleave between awaits here.
        # dicts keep insertion order, so the last match is the newest
        latest = None
        for record in self._store.one_time_secrets.values():
            if (
                record.user_id == user_id
                and record.purpose == purpose
                and record.used_at is None
                and record.expires_at > now
            ):
                latest = record
        return replace(latest) if latest else None

    async def find_active_by_hash(
        self, secret_hash: str, purpose: SecretPurpose, now: datetime
    ) -> OneTimeSecretData | None:
        latest = None
        for record in self._store.one_time_secrets.values():
            if (
                record.secret_hash == secret_hash
                and record.purpose == purpose
                and record.used_at is None
                and record.expires_at > now
            ):
                latest = record
        return replace(latest) if latest else None

    async def increment_attempts(self, secret_id: UUID) -> None:
        record = self._store.one_time_secrets.get(secret_id)
        if record is not None:
            record.attempts += 1

    async def mark_used(self, secret_id: UUID, used_at: datetime) -> bool:
        record = self._store.one_time_secrets.get(secret_id)
        if record is None or record.used_at is not None:
            return False
        record.used_at = used_at
        return True


class InMemoryUnitOfWork:
    """Snapshot-and-restore unit of work over an InMemoryStore.

    Blocks are serialized with a lock; a block that raises restores the
    snapshot taken when it started.
    """

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self._lock:
            snapshot = self._store.snapshot()
            try:
                yield
            except BaseException:
                self._store.restore(snapshot)
                raise
