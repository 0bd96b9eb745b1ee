"""Rate limit port.

Checked by the HTTP middleware before a rate limited route runs.
"""

from typing import Protocol

from warden.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule


class RateLimitProtocol(Protocol):
    """Token bucket rate limiter."""

    def rule_for(self, endpoint: str) -> RateLimitRule | None:
        """Rule configured for ``"METHOD /path"``, or None when unlimited."""
        ...

    async def is_allowed(self, *, endpoint: str, identifier: str) -> RateLimitResult:
        """Consume tokens for one request if enough are available.

        Args:
            endpoint: ``"METHOD /path"``, e.g. ``"POST /api/v1/sessions"``.
            identifier: Client address (IP scope); ignored for GLOBAL scope.

        Returns:
            RateLimitResult. Endpoints without an enabled rule are always
            allowed.
        """
        ...
