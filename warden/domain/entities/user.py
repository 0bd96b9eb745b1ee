"""User domain entity.

Pure business logic, no framework dependencies.

The password hash lives on the entity because login and reset need it;
every read path that leaves the application layer goes through
UserProfile, which omits it.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class User:
    """User account with credential state.

    Business Rules:
        - Email is unique and stored lower-cased
        - Inactive accounts cannot log in
        - Step-up verification requires a phone number on file
        - Step-up is enabled only after the phone is confirmed with a code

    Attributes:
        id: Unique user identifier (UUIDv7).
        email: Lower-cased email address.
        password_hash: Bcrypt hash (never plaintext, never exposed).
        phone: E.164 phone number for step-up codes (optional).
        is_active: Deactivated users cannot log in.
        is_step_up_enabled: Login requires a one-time code when True.
        created_at: Timestamp when user was created.
        updated_at: Timestamp when user was last updated.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="user@example.com",
        ...     password_hash="$2b$10$...",
        ...     phone="+15551234567",
        ...     is_active=True,
        ...     is_step_up_enabled=False,
        ...     created_at=now,
        ...     updated_at=now,
        ... )
        >>> user.can_enable_step_up()
        True
    """

    id: UUID
    email: str
    password_hash: str
    phone: str | None
    is_active: bool
    is_step_up_enabled: bool
    created_at: datetime
    updated_at: datetime

    def can_enable_step_up(self) -> bool:
        """Check whether step-up can be enabled right now.

        Returns:
            True if a phone is on file and step-up is not already on.
        """
        return self.phone is not None and not self.is_step_up_enabled

    def enable_step_up(self, now: datetime) -> None:
        """Turn on step-up verification for future logins.

        Args:
            now: Current time (from the injected clock).
        """
        self.is_step_up_enabled = True
        self.updated_at = now

    def change_password(self, password_hash: str, now: datetime) -> None:
        """Replace the password hash.

        Args:
            password_hash: New bcrypt hash.
            now: Current time (from the injected clock).
        """
        self.password_hash = password_hash
        self.updated_at = now
