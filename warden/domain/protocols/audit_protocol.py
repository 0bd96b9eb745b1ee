"""Audit sink port.

The engine appends an event for every state transition, successful or not,
and never reads the trail back.
"""

from typing import Any, Protocol
from uuid import UUID

from warden.core.result import Result
from warden.domain.enums import AuditAction
from warden.domain.errors import AuditError


class AuditProtocol(Protocol):
    """Sink for audit events (``PostgresAuditAdapter``; tests use an in-memory list).

    ``record`` never raises. A ``Failure`` is logged by ``SecurityAuditor``
    and leaves the operation result untouched.
    """

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
        """Append one event.

        Args:
            action: Event name.
            resource_type: ``user``, ``session``, ``token`` or ``secret``.
            success: False for rejected attempts.
            user_id: None when no account was resolved, e.g. unknown email.
            resource_id: Row the event concerns, when there is one.
            ip_address: Client address.
            user_agent: Client ``User-Agent``.
            context: Extra fields such as ``reason`` or ``purpose``. Never
                passwords, codes or tokens.
        """
        ...
