"""Response models for RFC 9457 problem details.

Every non-2xx response of the API has this body. ``type`` is
``{api_base_url}/errors/<slug>`` where the slug is the engine error constant
in kebab case (``invalid-credentials``) or a generic HTTP slug
(``validation-failed``, ``service-unavailable``).
"""

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """One invalid request field (422 responses only)."""

    field: str = Field(..., description="Dotted field path, e.g. 'password'")
    code: str = Field(..., description="Pydantic error type, e.g. 'value_error'")
    message: str = Field(..., description="Validation message")


class ProblemDetails(BaseModel):
    """Problem details body.

    Example:
        >>> ProblemDetails(
        ...     type="http://localhost:8000/errors/attempts-exceeded",
        ...     title="Too Many Attempts",
        ...     status=429,
        ...     detail="Too many failed attempts. Request a new code.",
        ...     instance="/api/v1/step-up/verifications",
        ... ).status
        429
    """

    type: str = Field(
        ...,
        description="Problem type URI",
        examples=["http://localhost:8000/errors/invalid-credentials"],
    )
    title: str = Field(..., description="Summary of the problem type")
    status: int = Field(..., description="HTTP status code", examples=[401])
    detail: str = Field(..., description="Explanation for this occurrence")
    instance: str = Field(
        ..., description="Request path", examples=["/api/v1/sessions"]
    )
    errors: list[ErrorDetail] | None = Field(
        None, description="Invalid fields (validation failures)"
    )
    trace_id: str | None = Field(None, description="Value of X-Trace-Id")
