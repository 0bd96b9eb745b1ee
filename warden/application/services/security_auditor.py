"""Audit writes on behalf of the engine.

A failed audit write is logged and swallowed: the business outcome of the
operation never depends on the audit sink.
"""

from typing import Any
from uuid import UUID

from warden.application.dtos import RequestMetadata
from warden.core.result import Failure
from warden.domain.enums import AuditAction
from warden.domain.protocols import AuditProtocol, LoggerProtocol


class SecurityAuditor:
    """Thin wrapper over AuditProtocol used by every handler."""

    def __init__(self, audit: AuditProtocol, logger: LoggerProtocol) -> None:
        self._audit = audit
        self._logger = logger

    async def record(
        self,
        action: AuditAction,
        *,
        resource_type: str,
        success: bool = True,
        user_id: UUID | None = None,
        metadata: RequestMetadata | None = None,
        **context: Any,
    ) -> None:
        """Record one audit event.

        Args:
            action: Event name.
            resource_type: user, session, token or secret.
            success: Outcome.
            user_id: Affected user, None if unresolved.
            metadata: Client IP and user agent.
            **context: Structured metadata (e.g. reason=...). Never secrets.
        """
        metadata = metadata or RequestMetadata()
        result = await self._audit.record(
            action=action,
            resource_type=resource_type,
            success=success,
            user_id=user_id,
            ip_address=metadata.ip_address,
            user_agent=metadata.user_agent,
            context=context or None,
        )
        if isinstance(result, Failure):
            self._logger.error(
                "audit_record_failed",
                action=action.value,
                user_id=str(user_id) if user_id else None,
                error_code=result.error.code.value,
                error_message=result.error.message,
            )
