"""RFC 9457 error responses.

Exports:
    ErrorDetail, ProblemDetails: Response models
    ErrorResponseBuilder: Maps engine error constants to responses
    register_exception_handlers: Global handlers for the FastAPI app
    problem_response: Generic problem details response for a status code
"""

from warden.presentation.routers.api.v1.errors.error_response_builder import (
    ErrorResponseBuilder,
)
from warden.presentation.routers.api.v1.errors.exception_handlers import (
    problem_response,
    register_exception_handlers,
)
from warden.presentation.routers.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = [
    "ErrorDetail",
    "ErrorResponseBuilder",
    "ProblemDetails",
    "problem_response",
    "register_exception_handlers",
]
