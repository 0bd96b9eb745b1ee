"""Immutable domain values."""

from warden.domain.value_objects.rate_limit_rule import RateLimitResult, RateLimitRule

__all__ = ["RateLimitResult", "RateLimitRule"]
