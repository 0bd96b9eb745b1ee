"""Error returned by audit adapters when an event could not be stored."""

from dataclasses import dataclass

from warden.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditError(DomainError):
    """The audit sink rejected an event.

    ``SecurityAuditor`` logs it and lets the engine operation continue.
    ``details`` carries the action and the database error type.
    """
