"""Rate limit rule and check result value objects.

Usage:
    from warden.domain.enums import RateLimitScope
    from warden.domain.value_objects import RateLimitRule

    rule = RateLimitRule(
        max_tokens=100,
        refill_rate=100 / 15,
        scope=RateLimitScope.IP,
    )
"""

from dataclasses import dataclass

from warden.domain.enums.rate_limit_scope import RateLimitScope


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitRule:
    """Token bucket parameters for one endpoint.

    Token Bucket Algorithm:
        - Bucket starts full (max_tokens)
        - Each request consumes `cost` tokens
        - Tokens refill continuously at `refill_rate` per minute
        - A request that finds too few tokens is denied with retry_after

    Attributes:
        max_tokens: Bucket capacity (burst size).
        refill_rate: Tokens added per minute.
        scope: What the bucket is keyed on.
        cost: Tokens consumed per request.
        enabled: Disabled rules allow every request.

    Raises:
        ValueError: If max_tokens, refill_rate or cost is not positive.
    """

    max_tokens: int
    refill_rate: float
    scope: RateLimitScope
    cost: int = 1
    enabled: bool = True

    def __post_init__(self) -> None:
        if self.max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive, got {self.max_tokens}")
        if self.refill_rate <= 0:
            raise ValueError(f"refill_rate must be positive, got {self.refill_rate}")
        if self.cost <= 0:
            raise ValueError(f"cost must be positive, got {self.cost}")

    @property
    def seconds_per_token(self) -> float:
        """Seconds between token refills (5.0 per minute -> 12.0)."""
        return 60.0 / self.refill_rate

    @property
    def reset_seconds(self) -> int:
        """Seconds for an empty bucket to refill completely."""
        return int(self.max_tokens * self.seconds_per_token)


@dataclass(frozen=True, slots=True, kw_only=True)
class RateLimitResult:
    """Outcome of one rate limit check.

    Attributes:
        allowed: Whether the request may proceed.
        retry_after: Seconds until enough tokens exist (0 when allowed).
        remaining: Whole tokens left after this request.
        limit: Bucket capacity.
        reset_seconds: Seconds until the bucket is full again.
    """

    allowed: bool
    retry_after: float = 0.0
    remaining: int = 0
    limit: int = 0
    reset_seconds: int = 0
