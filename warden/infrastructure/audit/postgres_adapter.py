"""Audit trail stored in the ``audit_logs`` table.

The adapter owns a session separate from the request's unit of work and
commits after every row, so failed logins and rejected codes stay recorded
when the request transaction is rolled back.
"""

from typing import Any
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.enums import AuditAction
from warden.domain.errors import AuditError
from warden.infrastructure.persistence.models.audit_log import AuditLogModel


class PostgresAuditAdapter:
    """AuditProtocol over its own AsyncSession.

    Example:
        >>> adapter = PostgresAuditAdapter(audit_session)
        >>> await adapter.record(
        ...     action=AuditAction.LOGIN_SUCCESS,
        ...     resource_type="session",
        ...     user_id=user.id,
        ... )
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

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
        """Append one row and commit it.

        Database errors are returned as ``Failure(AuditError)`` after a
        rollback; nothing is raised.
        """
        self.session.add(
            AuditLogModel(
                action=action.value,
                resource_type=resource_type,
                success=success,
                user_id=user_id,
                resource_id=resource_id,
                ip_address=ip_address,
                user_agent=user_agent,
                context=context,
            )
        )
        try:
            await self.session.commit()
        except SQLAlchemyError as exc:
            await self.session.rollback()
            return Failure(
                error=AuditError(
                    code=ErrorCode.AUDIT_RECORD_FAILED,
                    message=f"Audit row for {action.value} not stored: {exc}",
                    details={
                        "action": action.value,
                        "resource_type": resource_type,
                        "error_type": type(exc).__name__,
                    },
                )
            )
        return Success(value=None)
