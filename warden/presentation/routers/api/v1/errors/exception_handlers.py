"""Application-wide exception handlers.

Every exception that escapes a route becomes a problem details response:

- ``HTTPException`` (including routing 404/405) keeps its status and headers
- ``RequestValidationError`` becomes 422 with one entry per invalid field
- persistence faults (``SQLAlchemyError``, ``OSError``, ``TimeoutError``)
  become 503 with ``Retry-After``
- anything else becomes 500 without internal detail
"""

from typing import Mapping

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException

from warden.core.config import settings
from warden.core.container import get_logger
from warden.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

# status -> (slug, title)
_GENERIC_PROBLEMS: dict[int, tuple[str, str]] = {
    400: ("bad-request", "Bad Request"),
    401: ("unauthorized", "Authentication Required"),
    403: ("forbidden", "Access Denied"),
    404: ("not-found", "Resource Not Found"),
    405: ("method-not-allowed", "Method Not Allowed"),
    409: ("conflict", "Resource Conflict"),
    415: ("unsupported-media-type", "Unsupported Media Type"),
    422: ("validation-failed", "Validation Failed"),
    429: ("too-many-requests", "Too Many Requests"),
    500: ("internal-server-error", "Internal Server Error"),
    503: ("service-unavailable", "Service Unavailable"),
}

RETRY_AFTER_SECONDS = 5


def problem_response(
    request: Request,
    status_code: int,
    detail: str,
    *,
    errors: list[ErrorDetail] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Problem details body with the generic type and title for ``status_code``."""
    slug, title = _GENERIC_PROBLEMS.get(status_code, ("error", "Error"))
    body = ProblemDetails(
        type=f"{settings.api_base_url}/errors/{slug}",
        title=title,
        status=status_code,
        detail=detail,
        instance=request.url.path,
        errors=errors or None,
        trace_id=getattr(request.state, "trace_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=dict(headers) if headers else None,
    )


def _log_failure(event: str, request: Request, exc: Exception) -> None:
    get_logger().error(
        event,
        error=exc,
        trace_id=getattr(request.state, "trace_id", None),
        request_path=request.url.path,
        request_method=request.method,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, HTTPException)
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return problem_response(request, exc.status_code, detail, headers=exc.headers)


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """422 listing each invalid field by its dotted path without the ``body`` root."""
    assert isinstance(exc, RequestValidationError)
    errors = []
    for item in exc.errors():
        path = [str(part) for part in item.get("loc", ()) if part != "body"]
        errors.append(
            ErrorDetail(
                field=".".join(path) or "unknown",
                code=item.get("type", "validation_error"),
                message=item.get("msg", "Validation failed"),
            )
        )
    return problem_response(
        request,
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "Request validation failed. Check 'errors' for details.",
        errors=errors,
    )


async def infrastructure_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """503 for an unreachable or failing backing service.

    Logged but never audited, and never reported as an authentication error.
    """
    _log_failure("infrastructure_failure", request, exc)
    return problem_response(
        request,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "A backing service is unavailable. Please retry later.",
        headers={"Retry-After": str(RETRY_AFTER_SECONDS)},
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    _log_failure("unhandled_exception", request, exc)
    return problem_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An unexpected error occurred. Quote the trace ID when reporting it.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers above on ``app``."""
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    for fault in (SQLAlchemyError, OSError, TimeoutError):
        app.add_exception_handler(fault, infrastructure_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
