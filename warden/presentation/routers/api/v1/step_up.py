"""Step-up (two-factor) resource router.

Endpoints:
    POST /api/v1/step-up                - Request step-up enablement (bearer)
    POST /api/v1/step-up/verifications  - Verify a one-time code
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from warden.application.commands.auth_commands import EnableStepUp, VerifyOneTimeSecret
from warden.application.commands.handlers.enable_step_up_handler import (
    EnableStepUpHandler,
)
from warden.application.commands.handlers.verify_one_time_secret_handler import (
    VerifyOneTimeSecretHandler,
)
from warden.core.container import (
    get_enable_step_up_handler,
    get_verify_one_time_secret_handler,
)
from warden.core.result import Failure, Success
from warden.domain.enums import SecretPurpose
from warden.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from warden.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from warden.schemas.auth_schemas import (
    StepUpCreateResponse,
    StepUpVerificationCreateRequest,
    StepUpVerificationCreateResponse,
)

router = APIRouter(prefix="/step-up", tags=["Step-up"])


@router.post(
    "",
    status_code=status.HTTP_202_ACCEPTED,
    response_model=StepUpCreateResponse,
    responses={
        400: {"description": "Phone required", "model": ProblemDetails},
        401: {"description": "Not authenticated", "model": ProblemDetails},
        409: {"description": "Already enabled", "model": ProblemDetails},
    },
    summary="Request step-up",
    description="Send a code to the phone on file to enable two-factor login.",
)
async def create_step_up(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    handler: EnableStepUpHandler = Depends(get_enable_step_up_handler),
) -> StepUpCreateResponse | JSONResponse:
    """Request step-up enablement.

    POST /api/v1/step-up → 202 Accepted
    """
    result = await handler.handle(EnableStepUp(user_id=current_user.user_id), request)

    match result:
        case Success():
            return StepUpCreateResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)


@router.post(
    "/verifications",
    status_code=status.HTTP_201_CREATED,
    response_model=StepUpVerificationCreateResponse,
    responses={
        200: {
            "description": "Two-factor enabled",
            "model": StepUpVerificationCreateResponse,
        },
        400: {"description": "Invalid or missing code", "model": ProblemDetails},
        429: {"description": "Too many attempts", "model": ProblemDetails},
    },
    summary="Verify one-time code",
    description=(
        "Verify a code. login_2fa returns a token pair; enable_2fa turns on "
        "two-factor login."
    ),
)
async def create_step_up_verification(
    request: Request,
    response: Response,
    data: StepUpVerificationCreateRequest,
    handler: VerifyOneTimeSecretHandler = Depends(get_verify_one_time_secret_handler),
) -> StepUpVerificationCreateResponse | JSONResponse:
    """Verify a one-time code.

    POST /api/v1/step-up/verifications → 201 Created (tokens) or 200 OK
    """
    command = VerifyOneTimeSecret(
        user_id=data.user_id,
        code=data.code,
        purpose=SecretPurpose(data.purpose),
    )

    result = await handler.handle(command, request)

    match result:
        case Success(value=verification) if verification.tokens is not None:
            return StepUpVerificationCreateResponse(
                purpose=verification.purpose.value,
                user_id=verification.user_id,
                access_token=verification.tokens.access_token,
                refresh_token=verification.tokens.refresh_token,
                token_type=verification.tokens.token_type,
                expires_in=verification.tokens.expires_in,
                message="Login successful.",
            )
        case Success(value=verification):
            response.status_code = status.HTTP_200_OK
            return StepUpVerificationCreateResponse(
                purpose=verification.purpose.value,
                user_id=verification.user_id,
                message="Two-factor verification enabled.",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)
