"""PostgreSQL user repository.

Emails are stored lower-cased and carry a unique index; that index is the
final guard against two concurrent registrations of the same address.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from warden.core.result import Failure, Result, Success
from warden.domain.entities.user import User
from warden.domain.errors import AuthenticationError
from warden.infrastructure.persistence.models.user import UserModel

_COLUMNS = (
    "id",
    "email",
    "password_hash",
    "phone",
    "is_active",
    "is_step_up_enabled",
    "created_at",
    "updated_at",
)


def _to_entity(row: UserModel) -> User:
    return User(**{name: getattr(row, name) for name in _COLUMNS})


class UserRepository:
    """Implements ``warden.domain.protocols.UserRepository`` over an AsyncSession.

    Example:
        >>> async with db.get_session() as session:
        ...     user = await UserRepository(session).find_by_email("u@test.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _one(self, *criteria) -> User | None:
        result = await self.session.execute(select(UserModel).where(*criteria))
        row = result.scalar_one_or_none()
        return _to_entity(row) if row is not None else None

    async def find_by_id(self, user_id: UUID) -> User | None:
        """User with this id, or None."""
        return await self._one(UserModel.id == user_id)

    async def find_by_email(self, email: str) -> User | None:
        """User with this email (case-insensitive), or None."""
        return await self._one(UserModel.email == email.strip().lower())

    async def save(self, user: User) -> Result[None, str]:
        """Insert a new user.

        The INSERT is flushed inside a SAVEPOINT, so a duplicate email only
        undoes this statement and the request transaction stays usable.

        Returns:
            Success(None), or Failure(EMAIL_ALREADY_EXISTS) on a unique
            violation.
        """
        row = UserModel(**{name: getattr(user, name) for name in _COLUMNS})
        try:
            async with self.session.begin_nested():
                self.session.add(row)
        except IntegrityError:
            return Failure(error=AuthenticationError.EMAIL_ALREADY_EXISTS)
        return Success(value=None)

    async def update(self, user: User) -> None:
        """Write the mutable fields of an existing user.

        Raises:
            NoResultFound: If the user row does not exist.
        """
        result = await self.session.execute(
            select(UserModel).where(UserModel.id == user.id)
        )
        row = result.scalar_one()
        for name in _COLUMNS[1:]:
            if name != "created_at":
                setattr(row, name, getattr(user, name))
        await self.session.flush()
