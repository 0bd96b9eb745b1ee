"""Core shared kernel.

Foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Base error class for data-style errors
- Environment and error code enums

The core module has NO dependencies on other application layers.
"""

from warden.core.enums import Environment, ErrorCode
from warden.core.errors import DomainError
from warden.core.result import Failure, Result, Success

__all__ = [
    "DomainError",
    "Environment",
    "ErrorCode",
    "Failure",
    "Result",
    "Success",
]
