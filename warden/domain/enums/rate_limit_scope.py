"""Rate limit scopes.

A scope decides which identifier a token bucket is keyed on.
"""

from enum import Enum


class RateLimitScope(str, Enum):
    """How requests are grouped into buckets.

    Key Formats:
        IP: rate_limit:ip:{address}:{endpoint}
        GLOBAL: rate_limit:global:{endpoint}
    """

    IP = "ip"
    """One bucket per client address.

    Used for the unauthenticated credential endpoints (register, login,
    step-up verification, reset request and reset).
    """

    GLOBAL = "global"
    """One bucket shared by every caller of the endpoint."""
