"""Sessions resource router.

Endpoints:
    POST   /api/v1/sessions          - Create session (login)
    DELETE /api/v1/sessions/current  - Delete session (logout)
"""

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse

from warden.application.commands.auth_commands import LoginUser, LogoutUser
from warden.application.commands.handlers.login_user_handler import LoginUserHandler
from warden.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from warden.core.container import get_login_user_handler, get_logout_user_handler
from warden.core.result import Failure, Success
from warden.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from warden.schemas.auth_schemas import (
    SessionCreateRequest,
    SessionCreateResponse,
    SessionDeleteRequest,
)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SessionCreateResponse,
    responses={
        202: {
            "description": "Two-factor code sent, verification required",
            "model": SessionCreateResponse,
        },
        401: {"description": "Invalid credentials", "model": ProblemDetails},
        403: {"description": "Account inactive", "model": ProblemDetails},
    },
    summary="Create session",
    description="Log in with email and password.",
)
async def create_session(
    request: Request,
    response: Response,
    data: SessionCreateRequest,
    handler: LoginUserHandler = Depends(get_login_user_handler),
) -> SessionCreateResponse | JSONResponse:
    """Create session (login).

    POST /api/v1/sessions → 201 Created (tokens) or 202 Accepted (2FA pending)

    Unknown email and wrong password produce the same 401 body.

    Args:
        request: FastAPI request object.
        response: Response used to set 202 for pending step-up.
        data: Login credentials.
        handler: Login handler (injected).
    """
    command = LoginUser(email=data.email, password=data.password)

    result = await handler.handle(command, request)

    match result:
        case Success(value=login) if login.requires_step_up:
            response.status_code = status.HTTP_202_ACCEPTED
            return SessionCreateResponse(
                requires_2fa=True,
                user_id=login.user_id,
                message="A verification code has been sent to your phone.",
            )
        case Success(value=login):
            assert login.tokens is not None
            return SessionCreateResponse(
                requires_2fa=False,
                user_id=login.user_id,
                access_token=login.tokens.access_token,
                refresh_token=login.tokens.refresh_token,
                token_type=login.tokens.token_type,
                expires_in=login.tokens.expires_in,
                message="Login successful.",
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)


@router.delete(
    "/current",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete session",
    description="Revoke a refresh token. Idempotent.",
)
async def delete_current_session(
    request: Request,
    data: SessionDeleteRequest,
    handler: LogoutUserHandler = Depends(get_logout_user_handler),
) -> Response:
    """Delete session (logout).

    DELETE /api/v1/sessions/current → 204 No Content
    """
    await handler.handle(LogoutUser(refresh_token=data.refresh_token), request)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
