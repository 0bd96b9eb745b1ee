"""Domain entities."""

from warden.domain.entities.user import User

__all__ = ["User"]
