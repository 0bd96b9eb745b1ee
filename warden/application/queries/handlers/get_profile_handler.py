"""GetProfile query handler.

Returns the public profile of a user. The password hash never leaves the
application layer.
"""

from warden.application.dtos import UserProfile
from warden.application.queries.user_queries import GetProfile
from warden.core.result import Failure, Result, Success
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import UserRepository


class GetProfileHandler:
    """Handler for GetProfile query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(self, query: GetProfile) -> Result[UserProfile, str]:
        """Handle profile query.

        Returns:
            Success(UserProfile) or Failure(USER_NOT_FOUND).
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(error=AuthenticationError.USER_NOT_FOUND)
        return Success(value=UserProfile.from_user(user))
