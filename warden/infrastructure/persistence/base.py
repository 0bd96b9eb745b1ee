"""Declarative bases for the warden tables.

``BaseModel`` gives every table a UUIDv7 primary key and ``created_at``.
``BaseMutableModel`` adds ``updated_at`` for rows that change after insert
(users, refresh tokens, one-time secrets). Audit rows are append-only and
use ``BaseModel`` directly.

UUIDv7 ids sort by creation time, so ``ORDER BY created_at, id`` is a total
order even for rows inserted in one transaction (same ``now()``).
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from uuid_extensions import uuid7


class BaseModel(DeclarativeBase):
    """Primary key and creation time."""

    __abstract__ = True

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid7)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, server_default=func.now()
    )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.id}>"


class BaseMutableModel(BaseModel):
    """BaseModel plus ``updated_at``, refreshed by the database on UPDATE."""

    __abstract__ = True

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
