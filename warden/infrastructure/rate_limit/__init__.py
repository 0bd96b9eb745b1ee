"""Rate limiting adapters."""

from warden.infrastructure.rate_limit.rules import build_auth_rules
from warden.infrastructure.rate_limit.token_bucket_adapter import TokenBucketAdapter

__all__ = ["TokenBucketAdapter", "build_auth_rules"]
