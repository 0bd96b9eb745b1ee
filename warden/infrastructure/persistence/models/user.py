"""``users`` table."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from warden.infrastructure.persistence.base import BaseMutableModel


class UserModel(BaseMutableModel):
    """Account row. The unique email index settles concurrent registrations."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        comment="Lower-cased email address (unique)",
    )
    password_hash: Mapped[str] = mapped_column(
        String(255), comment="Bcrypt password hash (NEVER plaintext)"
    )
    phone: Mapped[str | None] = mapped_column(
        String(32), default=None, comment="E.164 phone number for step-up codes"
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean, default=True, comment="Inactive accounts cannot log in"
    )
    is_step_up_enabled: Mapped[bool] = mapped_column(
        Boolean, default=False, comment="Login requires a one-time code"
    )
