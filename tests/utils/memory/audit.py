"""In-memory implementation of AuditProtocol.

Appends events to a list. Tests assert against ``events`` directly.
"""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from warden.core.result import Result, Success
from warden.domain.enums import AuditAction
from warden.domain.errors import AuditError
from tests.utils.memory.store import InMemoryStore


class InMemoryAuditAdapter:
    """List-backed audit sink.

    Args:
        store: Optional shared store; when given, events are appended to
            ``store.audit_events`` so they sit next to the other tables.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self.events: list[dict[str, Any]] = (
            store.audit_events if store is not None else []
        )

    async def record(
        self,
        *,
        action: AuditAction,
        resource_type: str,
        success: bool = True,
        user_id: UUID | None = None,
        resource_id: UUID | None = None,
        ip_address: str | None = None,
        user_agent: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> Result[None, AuditError]:
        self.events.append(
            {
                "action": action,
                "resource_type": resource_type,
                "success": success,
                "user_id": user_id,
                "resource_id": resource_id,
                "ip_address": ip_address,
                "user_agent": user_agent,
                "context": dict(context) if context else None,
                "created_at": datetime.now(UTC),
            }
        )
        return Success(value=None)

    def actions(self) -> list[AuditAction]:
        """Recorded actions in order."""
        return [event["action"] for event in self.events]
