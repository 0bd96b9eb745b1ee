"""``refresh_tokens`` table: one row per issued refresh token.

Only the SHA-256 hex digest is stored. ``revoked_at`` is set once (logout
or password reset) and never cleared.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from warden.infrastructure.persistence.base import BaseMutableModel


class RefreshTokenModel(BaseMutableModel):
    __tablename__ = "refresh_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    token_hash: Mapped[str] = mapped_column(
        String(64), nullable=False, unique=True, index=True
    )
    expires_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True
    )
    revoked_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), default=None
    )
    revoked_reason: Mapped[str | None] = mapped_column(
        Text, default=None, comment="logout or password_reset"
    )
    # issuance metadata
    ip_address: Mapped[str | None] = mapped_column(String(45), default=None)
    user_agent: Mapped[str | None] = mapped_column(Text, default=None)
