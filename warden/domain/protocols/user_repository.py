"""User persistence port."""

from typing import Protocol
from uuid import UUID

from warden.core.result import Result
from warden.domain.entities.user import User


class UserRepository(Protocol):
    async def find_by_id(self, user_id: UUID) -> User | None: ...

    async def find_by_email(self, email: str) -> User | None:
        """Lookup ignoring case."""
        ...

    async def save(self, user: User) -> Result[None, str]:
        """Insert ``user``.

        Email uniqueness is enforced by storage at insert time, never by an
        earlier read, so of two concurrent registrations for one address
        exactly one succeeds.

        Returns:
            Success(None), or Failure(AuthenticationError.EMAIL_ALREADY_EXISTS).
        """
        ...

    async def update(self, user: User) -> None: ...
