"""Unit tests for the token bucket rate limiter.

Tests cover:
- Burst up to capacity, then denial with retry_after
- Continuous refill driven by the clock
- IP-scoped buckets are independent per address and per endpoint
- Unlimited and disabled endpoints always pass
- Rule validation
"""

import pytest

from warden.domain.enums import RateLimitScope
from warden.domain.value_objects import RateLimitRule
from warden.infrastructure.rate_limit import TokenBucketAdapter, build_auth_rules

LOGIN = "POST /api/v1/sessions"
REGISTER = "POST /api/v1/users"


@pytest.fixture
def limiter(clock, mock_logger):
    """Two requests per minute per IP on the credential endpoints."""
    return TokenBucketAdapter(
        rules=build_auth_rules(api_prefix="/api/v1", max_requests=2, window_minutes=1),
        clock=clock,
        logger=mock_logger,
    )


@pytest.mark.unit
class TestBuildAuthRules:
    def test_credential_endpoints_share_ip_rule(self):
        rules = build_auth_rules(api_prefix="/api/v1", max_requests=100, window_minutes=15)

        assert set(rules) == {
            "POST /api/v1/users",
            "POST /api/v1/sessions",
            "POST /api/v1/step-up/verifications",
            "POST /api/v1/password-reset-tokens",
            "POST /api/v1/password-resets",
        }
        rule = rules[LOGIN]
        assert rule.scope is RateLimitScope.IP
        assert rule.max_tokens == 100
        assert rule.reset_seconds == 15 * 60

    def test_token_refresh_not_limited(self):
        rules = build_auth_rules(api_prefix="/api/v1", max_requests=5, window_minutes=1)

        assert "POST /api/v1/tokens" not in rules

    @pytest.mark.parametrize(
        "fields",
        [
            {"max_tokens": 0, "refill_rate": 1.0},
            {"max_tokens": 1, "refill_rate": 0.0},
            {"max_tokens": 1, "refill_rate": 1.0, "cost": 0},
        ],
    )
    def test_invalid_rule_rejected(self, fields):
        with pytest.raises(ValueError):
            RateLimitRule(scope=RateLimitScope.IP, **fields)


@pytest.mark.unit
class TestTokenBucketAdapter:
    async def test_burst_then_denied(self, limiter, mock_logger):
        first = await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")
        second = await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")
        third = await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")

        assert (first.allowed, first.remaining, first.limit) == (True, 1, 2)
        assert (second.allowed, second.remaining) == (True, 0)
        assert third.allowed is False
        assert third.retry_after == pytest.approx(30.0)
        mock_logger.info.assert_called_once()
        assert mock_logger.info.call_args.args[0] == "rate_limit_exceeded"

    async def test_tokens_refill_with_time(self, limiter, clock):
        for _ in range(2):
            await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")

        clock.advance(seconds=29)
        assert (await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")).allowed is False

        clock.advance(seconds=2)
        assert (await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")).allowed is True

    async def test_buckets_are_per_ip_and_endpoint(self, limiter):
        for _ in range(2):
            await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")

        other_ip = await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.2")
        other_endpoint = await limiter.is_allowed(endpoint=REGISTER, identifier="10.0.0.1")

        assert other_ip.allowed is True
        assert other_endpoint.allowed is True

    async def test_unlimited_endpoint_always_allowed(self, limiter):
        for _ in range(5):
            result = await limiter.is_allowed(
                endpoint="POST /api/v1/tokens", identifier="10.0.0.1"
            )
            assert result.allowed is True
            assert result.limit == 0

    async def test_disabled_rule_always_allowed(self, clock, mock_logger):
        limiter = TokenBucketAdapter(
            rules=build_auth_rules(
                api_prefix="/api/v1", max_requests=1, window_minutes=1, enabled=False
            ),
            clock=clock,
            logger=mock_logger,
        )

        for _ in range(3):
            assert (await limiter.is_allowed(endpoint=LOGIN, identifier="x")).allowed

    async def test_full_buckets_dropped_past_bucket_cap(self, clock, mock_logger):
        limiter = TokenBucketAdapter(
            rules=build_auth_rules(api_prefix="/api/v1", max_requests=2, window_minutes=1),
            clock=clock,
            logger=mock_logger,
            max_buckets=2,
        )
        await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.1")
        await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.2")
        clock.advance(minutes=1)

        await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.3")

        # The two refilled buckets are gone; the new one keeps its count
        assert len(limiter._buckets) == 1
        result = await limiter.is_allowed(endpoint=LOGIN, identifier="10.0.0.3")
        assert result.remaining == 0
