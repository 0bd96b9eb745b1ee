"""Structured error value carried inside ``Failure``.

Business outcomes of the credential engine are plain string constants
(see ``warden.domain.errors``). Adapters that need to report richer context,
such as the audit sink, return a ``DomainError`` subclass instead. Neither is
ever raised.
"""

from dataclasses import dataclass

from warden.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value with a stable code.

    Attributes:
        code: Stable machine-readable code.
        message: Text for logs; never shown to API clients.
        details: Extra key/value context (no secrets).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"
