"""One-time secret model (step-up codes and password reset tokens)."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from warden.infrastructure.persistence.base import BaseMutableModel


class OneTimeSecretModel(BaseMutableModel):
    """Hashed one-time secret.

    Invariants:
        - attempts only ever grows (UPDATE ... attempts = attempts + 1)
        - used_at is set once and never cleared

    Indexes:
        - ix_one_time_secrets_lookup: (user_id, purpose, created_at) for
          newest-effective-secret lookups
        - ix_one_time_secrets_secret_hash: reset token lookup by digest
    """

    __tablename__ = "one_time_secrets"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        comment="User the secret was issued to",
    )

    purpose: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        comment="login_2fa, enable_2fa or forgot_password",
    )

    secret_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        index=True,
        comment="Bcrypt hash (codes) or SHA-256 digest (reset tokens)",
    )

    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Secret expiry",
    )

    used_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Set when the secret is consumed",
    )

    attempts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        server_default="0",
        comment="Failed verification attempts",
    )

    __table_args__ = (
        Index("ix_one_time_secrets_lookup", "user_id", "purpose", "created_at"),
    )
