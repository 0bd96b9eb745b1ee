"""Structured logging port.

Events are snake_case names plus keyword context::

    logger.warning("secret_delivery_failed", user_id=str(user.id), purpose="login_2fa")

Passwords, raw tokens and one-time codes are never passed as context.
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger used by application services and adapters."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error; adapters expand ``error`` into type and message fields."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """New logger that adds ``context`` to every event."""
        ...
