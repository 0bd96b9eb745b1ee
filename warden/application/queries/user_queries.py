"""User queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetProfile:
    """Fetch the public profile of a user.

    Attributes:
        user_id: User to look up (from the access token subject).
    """

    user_id: UUID
