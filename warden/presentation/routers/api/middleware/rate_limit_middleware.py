"""Rate limit middleware.

Applies the token bucket rules to every request whose ``"METHOD /path"``
has one. Denied requests get a 429 problem details response with
``Retry-After``; allowed ones carry ``X-RateLimit-*`` headers. Errors in
the limiter itself are logged and the request proceeds.

The client address is ``request.client.host``. Behind a reverse proxy run
uvicorn with ``--proxy-headers`` so that address is the real client.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from warden.core.container import get_logger, get_rate_limit
from warden.presentation.routers.api.v1.errors import problem_response

if TYPE_CHECKING:
    from warden.domain.value_objects import RateLimitResult


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Return 429 once a client exhausts an endpoint's bucket.

    Response Headers:
        - Retry-After: Whole seconds until a retry can succeed (on 429)
        - X-RateLimit-Limit: Bucket capacity
        - X-RateLimit-Remaining: Tokens left
        - X-RateLimit-Reset: Seconds until the bucket is full again
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        endpoint = f"{request.method} {request.url.path}"
        rate_limit = get_rate_limit()
        rule = rate_limit.rule_for(endpoint)
        if rule is None or not rule.enabled:
            return await call_next(request)

        identifier = self._client_ip(request)
        try:
            result = await rate_limit.is_allowed(endpoint=endpoint, identifier=identifier)
        except Exception as exc:
            get_logger().error(
                "rate_limit_check_failed",
                error=exc,
                endpoint=endpoint,
                identifier=identifier,
                result="fail_open",
            )
            return await call_next(request)

        if not result.allowed:
            return self._too_many_requests(request, result)

        response = await call_next(request)
        response.headers.update(self._limit_headers(result))
        return response

    @staticmethod
    def _client_ip(request: Request) -> str:
        return request.client.host if request.client else "unknown"

    @staticmethod
    def _limit_headers(result: RateLimitResult) -> dict[str, str]:
        return {
            "X-RateLimit-Limit": str(result.limit),
            "X-RateLimit-Remaining": str(result.remaining),
            "X-RateLimit-Reset": str(result.reset_seconds),
        }

    def _too_many_requests(self, request: Request, result: RateLimitResult) -> Response:
        retry_after = max(1, math.ceil(result.retry_after))
        return problem_response(
            request,
            429,
            f"Too many authentication attempts. Retry in {retry_after} seconds.",
            headers={"Retry-After": str(retry_after), **self._limit_headers(result)},
        )
