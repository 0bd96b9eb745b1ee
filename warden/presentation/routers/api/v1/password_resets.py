"""Password reset routes.

The reset is two resources: a reset token is created for an email (and sent
by SMS), then a password reset is created by presenting that token.
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from warden.application.commands.auth_commands import (
    ConfirmPasswordReset,
    RequestPasswordReset,
)
from warden.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from warden.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from warden.core.container import (
    get_confirm_password_reset_handler,
    get_request_password_reset_handler,
)
from warden.core.result import Failure, Success
from warden.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from warden.schemas.auth_schemas import (
    PasswordResetCreateRequest,
    PasswordResetCreateResponse,
    PasswordResetTokenCreateRequest,
    PasswordResetTokenCreateResponse,
)

password_reset_tokens_router = APIRouter(
    prefix="/password-reset-tokens", tags=["Password Reset Tokens"]
)
password_resets_router = APIRouter(prefix="/password-resets", tags=["Password Resets"])


@password_reset_tokens_router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=PasswordResetTokenCreateResponse,
    summary="Request a password reset",
    description=(
        "Sends a reset token to the phone on file. The response is the same "
        "whether or not the email is registered."
    ),
)
async def create_password_reset_token(
    request: Request,
    data: PasswordResetTokenCreateRequest,
    handler: RequestPasswordResetHandler = Depends(get_request_password_reset_handler),
) -> PasswordResetTokenCreateResponse:
    await handler.handle(RequestPasswordReset(email=data.email), request)
    return PasswordResetTokenCreateResponse()


@password_resets_router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=PasswordResetCreateResponse,
    responses={
        400: {"description": "Unknown, used or expired token", "model": ProblemDetails}
    },
    summary="Reset a password",
    description="Consumes a reset token, sets the new password and ends every session.",
)
async def create_password_reset(
    request: Request,
    data: PasswordResetCreateRequest,
    handler: ConfirmPasswordResetHandler = Depends(get_confirm_password_reset_handler),
) -> PasswordResetCreateResponse | JSONResponse:
    """POST /api/v1/password-resets.

    Every failure is reported as 400 ``invalid-or-expired-token`` with no
    ``WWW-Authenticate`` header: the caller is not authenticating.
    """
    command = ConfirmPasswordReset(token=data.token, new_password=data.new_password)
    match await handler.handle(command, request):
        case Success():
            return PasswordResetCreateResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(
                error, request, status_code=status.HTTP_400_BAD_REQUEST
            )
