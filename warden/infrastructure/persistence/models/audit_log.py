"""``audit_logs`` table, insert-only."""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, Boolean, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from warden.infrastructure.persistence.base import BaseModel


class AuditLogModel(BaseModel):
    """One security event.

    ``user_id`` has no foreign key. Failed logins for unknown emails carry
    no user, and rows outlive the users they mention.
    """

    __tablename__ = "audit_logs"
    __table_args__ = (Index("ix_audit_logs_user_action", "user_id", "action"),)

    action: Mapped[str] = mapped_column(
        String(64), index=True, comment="Event name (AuditAction value)"
    )
    user_id: Mapped[UUID | None] = mapped_column(
        index=True, comment="Affected user (NULL before identity is resolved)"
    )
    resource_type: Mapped[str] = mapped_column(
        String(32), comment="user, session, token or secret"
    )
    resource_id: Mapped[UUID | None] = mapped_column(
        comment="Specific resource identifier"
    )
    success: Mapped[bool] = mapped_column(
        Boolean, default=True, comment="Outcome of the action"
    )
    ip_address: Mapped[str | None] = mapped_column(
        String(45), comment="Client IP address"
    )
    user_agent: Mapped[str | None] = mapped_column(Text, comment="Client user agent")
    context: Mapped[dict[str, Any] | None] = mapped_column(
        JSON, comment="Structured event metadata"
    )
