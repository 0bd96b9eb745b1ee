"""Core errors package.

Usage:
    from warden.core.errors import DomainError
"""

from warden.core.errors.domain_error import DomainError

__all__ = ["DomainError"]
