"""Success/Failure result values.

Expected outcomes such as a wrong password, an expired code or a revoked
token are returned, not raised::

    match await handler.handle(command):
        case Success(value=tokens):
            ...
        case Failure(error=AuthenticationError.ATTEMPTS_EXCEEDED):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Expected failure; ``error`` is usually an error-constant string."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
