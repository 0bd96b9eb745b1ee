"""Error response builder for RFC 9457 Problem Details.

Maps credential engine error constants (AuthenticationError.*) to HTTP
status codes, titles and user-facing messages.

Exports:
    ErrorResponseBuilder: Utility class for building RFC 9457 responses
"""

from fastapi import Request, status
from fastapi.responses import JSONResponse

from warden.core.config import settings
from warden.domain.errors import AuthenticationError
from warden.presentation.routers.api.middleware.trace_middleware import get_trace_id
from warden.presentation.routers.api.v1.errors.problem_details import ProblemDetails

# error constant -> (status, title, detail)
_AUTH_ERRORS: dict[str, tuple[int, str, str]] = {
    AuthenticationError.EMAIL_ALREADY_EXISTS: (
        status.HTTP_409_CONFLICT,
        "Email Already Registered",
        "An account with this email already exists.",
    ),
    AuthenticationError.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Invalid Credentials",
        "Email or password is incorrect.",
    ),
    AuthenticationError.ACCOUNT_INACTIVE: (
        status.HTTP_403_FORBIDDEN,
        "Account Inactive",
        "This account has been deactivated.",
    ),
    AuthenticationError.PHONE_REQUIRED: (
        status.HTTP_400_BAD_REQUEST,
        "Phone Required",
        "A phone number is required to enable two-factor verification.",
    ),
    AuthenticationError.STEP_UP_ALREADY_ENABLED: (
        status.HTTP_409_CONFLICT,
        "Two-Factor Already Enabled",
        "Two-factor verification is already enabled.",
    ),
    AuthenticationError.SECRET_NOT_FOUND: (
        status.HTTP_400_BAD_REQUEST,
        "Code Not Found",
        "No valid verification code found. Request a new one.",
    ),
    AuthenticationError.ATTEMPTS_EXCEEDED: (
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Too Many Attempts",
        "Too many failed attempts. Request a new code.",
    ),
    AuthenticationError.INVALID_SECRET: (
        status.HTTP_400_BAD_REQUEST,
        "Invalid Code",
        "The verification code is incorrect.",
    ),
    AuthenticationError.INVALID_OR_EXPIRED_TOKEN: (
        status.HTTP_401_UNAUTHORIZED,
        "Invalid Or Expired Token",
        "The token is invalid or has expired.",
    ),
    AuthenticationError.USER_NOT_FOUND: (
        status.HTTP_404_NOT_FOUND,
        "User Not Found",
        "User account not found.",
    ),
    AuthenticationError.UNSUPPORTED_PURPOSE: (
        status.HTTP_400_BAD_REQUEST,
        "Unsupported Purpose",
        "This purpose cannot be verified with a code.",
    ),
}


class ErrorResponseBuilder:
    """Build RFC 9457 Problem Details error responses.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_auth_error(error, request)
    """

    @staticmethod
    def from_auth_error(
        error: str,
        request: Request,
        status_code: int | None = None,
    ) -> JSONResponse:
        """Convert an engine error constant to an RFC 9457 JSON response.

        Args:
            error: AuthenticationError constant from a Failure.
            request: FastAPI Request object (for instance URL).
            status_code: Override of the default status for this error.

        Returns:
            JSONResponse with ProblemDetails content.
        """
        default_status, title, detail = _AUTH_ERRORS.get(
            error,
            (status.HTTP_400_BAD_REQUEST, "Request Failed", "The request failed."),
        )
        status_code = status_code or default_status
        trace_id = get_trace_id()

        problem = ProblemDetails(
            type=f"{settings.api_base_url}/errors/{error.replace('_', '-')}",
            title=title,
            status=status_code,
            detail=detail,
            instance=str(request.url.path),
            trace_id=trace_id,
        )

        headers = {"WWW-Authenticate": "Bearer"} if status_code == 401 else None
        return JSONResponse(
            status_code=status_code,
            content=problem.model_dump(exclude_none=True),
            headers=headers,
        )
