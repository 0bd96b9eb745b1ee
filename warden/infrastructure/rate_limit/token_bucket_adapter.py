"""In-process token bucket rate limiter implementing RateLimitProtocol.

Buckets live in this process, so each worker enforces its own limits.
Refill is computed lazily from the elapsed clock time on every check.

Architecture:
    RateLimitMiddleware -> TokenBucketAdapter -> dict of buckets

Usage:
    from warden.core.container import get_rate_limit

    result = await get_rate_limit().is_allowed(
        endpoint="POST /api/v1/sessions",
        identifier="192.168.1.1",
    )
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING

from warden.domain.enums import RateLimitScope
from warden.domain.value_objects import RateLimitResult, RateLimitRule

if TYPE_CHECKING:
    from warden.domain.protocols import ClockProtocol, LoggerProtocol


@dataclass(slots=True)
class _Bucket:
    endpoint: str
    tokens: float
    updated_at: float


class TokenBucketAdapter:
    """Token bucket rate limiter.

    Args:
        rules: ``"METHOD /path"`` -> RateLimitRule.
        clock: Time source for refill.
        logger: Structured logger (denials are logged at info).
        max_buckets: Bucket count above which full buckets are dropped.
    """

    def __init__(
        self,
        *,
        rules: dict[str, RateLimitRule],
        clock: ClockProtocol,
        logger: LoggerProtocol,
        max_buckets: int = 10_000,
    ) -> None:
        self._rules = rules
        self._clock = clock
        self._logger = logger
        self._max_buckets = max_buckets
        self._buckets: dict[str, _Bucket] = {}
        self._lock = asyncio.Lock()

    def rule_for(self, endpoint: str) -> RateLimitRule | None:
        return self._rules.get(endpoint)

    async def is_allowed(self, *, endpoint: str, identifier: str) -> RateLimitResult:
        """Check the bucket for (endpoint, identifier) and consume on success.

        Args:
            endpoint: ``"METHOD /path"``.
            identifier: Client address for IP-scoped rules.

        Returns:
            RateLimitResult; allowed with limit 0 when no rule applies.
        """
        rule = self._rules.get(endpoint)
        if rule is None or not rule.enabled:
            return RateLimitResult(allowed=True)

        key = self._build_key(endpoint=endpoint, identifier=identifier, scope=rule.scope)
        now = self._clock.now().timestamp()

        async with self._lock:
            tokens = self._current_tokens(key, rule, now)
            allowed = tokens >= rule.cost
            if allowed:
                tokens -= rule.cost
            self._buckets[key] = _Bucket(
                endpoint=endpoint, tokens=tokens, updated_at=now
            )
            if len(self._buckets) > self._max_buckets:
                self._drop_full_buckets(now)

        if allowed:
            return RateLimitResult(
                allowed=True,
                remaining=int(tokens),
                limit=rule.max_tokens,
                reset_seconds=rule.reset_seconds,
            )

        retry_after = (rule.cost - tokens) * rule.seconds_per_token
        self._logger.info(
            "rate_limit_exceeded",
            endpoint=endpoint,
            identifier=identifier,
            scope=rule.scope.value,
            retry_after=round(retry_after, 2),
        )
        return RateLimitResult(
            allowed=False,
            retry_after=retry_after,
            remaining=0,
            limit=rule.max_tokens,
            reset_seconds=rule.reset_seconds,
        )

    def _current_tokens(self, key: str, rule: RateLimitRule, now: float) -> float:
        bucket = self._buckets.get(key)
        if bucket is None:
            return float(rule.max_tokens)
        elapsed = max(0.0, now - bucket.updated_at)
        refilled = bucket.tokens + elapsed / rule.seconds_per_token
        return min(float(rule.max_tokens), refilled)

    def _drop_full_buckets(self, now: float) -> None:
        for key, bucket in list(self._buckets.items()):
            rule = self._rules.get(bucket.endpoint)
            if rule is None or self._current_tokens(key, rule, now) >= rule.max_tokens:
                del self._buckets[key]

    @staticmethod
    def _build_key(*, endpoint: str, identifier: str, scope: RateLimitScope) -> str:
        """Key format: rate_limit:{scope}[:{identifier}]:{endpoint}."""
        match scope:
            case RateLimitScope.IP:
                return f"rate_limit:ip:{identifier}:{endpoint}"
            case RateLimitScope.GLOBAL:
                return f"rate_limit:global:{endpoint}"
