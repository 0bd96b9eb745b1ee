"""Per-request trace ID.

A client-supplied ``X-Trace-Id`` is reused (up to 128 characters), otherwise
a UUID4 is generated. The ID is echoed in the response header, included in
problem details bodies and bound to structlog so every log line of the
request carries it.
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Awaitable, Callable
from uuid import uuid4

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

TRACE_HEADER = "X-Trace-Id"
_MAX_TRACE_ID_LENGTH = 128

_current_trace_id: ContextVar[str | None] = ContextVar("trace_id", default=None)


def get_trace_id() -> str | None:
    """Trace ID of the request being handled, None outside a request."""
    return _current_trace_id.get()


class TraceMiddleware(BaseHTTPMiddleware):
    """Assign and propagate a trace ID for each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        incoming = request.headers.get(TRACE_HEADER, "")
        if 0 < len(incoming) <= _MAX_TRACE_ID_LENGTH:
            trace_id = incoming
        else:
            trace_id = str(uuid4())

        token = _current_trace_id.set(trace_id)
        request.state.trace_id = trace_id
        structlog.contextvars.bind_contextvars(trace_id=trace_id)
        try:
            response = await call_next(request)
        finally:
            _current_trace_id.reset(token)
            structlog.contextvars.unbind_contextvars("trace_id")

        response.headers[TRACE_HEADER] = trace_id
        return response
