"""Test doubles shared across test modules."""

from typing import Any

from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result
from warden.domain.errors import AuditError


class RecordingSmsService:
    """NotificationProtocol double that keeps every message.

    Args:
        deliver: Value returned from send() (False simulates an outage).
    """

    def __init__(self, *, deliver: bool = True) -> None:
        self.outbox: list[tuple[str, str]] = []
        self._deliver = deliver

    async def send(self, destination: str, message: str) -> bool:
        self.outbox.append((destination, message))
        return self._deliver

    def last_secret(self) -> str:
        """Secret embedded in the most recent message ("...: <secret>")."""
        _, message = self.outbox[-1]
        return message.rsplit(": ", 1)[1]


class FailingAuditAdapter:
    """AuditProtocol double whose writes always fail."""

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []

    async def record(self, **kwargs: Any) -> Result[None, AuditError]:
        self.calls.append(kwargs)
        return Failure(
            error=AuditError(
                code=ErrorCode.AUDIT_RECORD_FAILED,
                message="audit sink unavailable",
            )
        )
