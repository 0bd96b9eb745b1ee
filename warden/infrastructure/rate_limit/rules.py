"""Rate limit rules per endpoint.

Unauthenticated credential endpoints share one strict policy, keyed by
client IP: ``max_requests`` per ``window_minutes``, refilled continuously.
Token refresh, logout and the authenticated routes are not limited.
"""

from warden.domain.enums import RateLimitScope
from warden.domain.value_objects import RateLimitRule

# Relative to the API version prefix
STRICT_AUTH_ENDPOINTS = (
    "POST /users",
    "POST /sessions",
    "POST /step-up/verifications",
    "POST /password-reset-tokens",
    "POST /password-resets",
)


def build_auth_rules(
    *,
    api_prefix: str,
    max_requests: int,
    window_minutes: int,
    enabled: bool = True,
) -> dict[str, RateLimitRule]:
    """Map ``"METHOD /api/v1/path"`` to the strict credential rule.

    >>> rules = build_auth_rules(api_prefix="/api/v1", max_requests=100, window_minutes=15)
    >>> rules["POST /api/v1/sessions"].max_tokens
    100
    """
    rule = RateLimitRule(
        max_tokens=max_requests,
        refill_rate=max_requests / window_minutes,
        scope=RateLimitScope.IP,
        enabled=enabled,
    )
    rules = {}
    for endpoint in STRICT_AUTH_ENDPOINTS:
        method, path = endpoint.split(" ", 1)
        rules[f"{method} {api_prefix}{path}"] = rule
    return rules
