"""Users resource router.

Endpoints:
    POST /api/v1/users     - Create user (registration)
    GET  /api/v1/users/me  - Read the authenticated user's profile
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from warden.application.commands.auth_commands import RegisterUser
from warden.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from warden.application.dtos import UserProfile
from warden.application.queries.handlers.get_profile_handler import GetProfileHandler
from warden.application.queries.user_queries import GetProfile
from warden.core.container import get_get_profile_handler, get_register_user_handler
from warden.core.result import Failure, Success
from warden.presentation.routers.api.middleware.auth_dependencies import (
    CurrentUser,
    get_current_user,
)
from warden.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from warden.schemas.auth_schemas import UserCreateRequest, UserResponse

router = APIRouter(prefix="/users", tags=["Users"])


def _to_response(profile: UserProfile) -> UserResponse:
    return UserResponse(
        id=profile.id,
        email=profile.email,
        phone=profile.phone,
        is_active=profile.is_active,
        is_step_up_enabled=profile.is_step_up_enabled,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
    )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponse,
    responses={
        409: {"description": "Email already registered", "model": ProblemDetails},
        422: {"description": "Validation failed", "model": ProblemDetails},
    },
    summary="Create user",
    description="Register a new account. The password hash is never returned.",
)
async def create_user(
    request: Request,
    data: UserCreateRequest,
    handler: RegisterUserHandler = Depends(get_register_user_handler),
) -> UserResponse | JSONResponse:
    """Create user (registration).

    POST /api/v1/users → 201 Created

    Args:
        request: FastAPI request object.
        data: Registration data (email, password, optional phone).
        handler: Registration handler (injected).

    Returns:
        UserResponse on success, RFC 9457 error otherwise.
    """
    command = RegisterUser(email=data.email, password=data.password, phone=data.phone)

    result = await handler.handle(command, request)

    match result:
        case Success(value=profile):
            return _to_response(profile)
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)


@router.get(
    "/me",
    response_model=UserResponse,
    responses={
        401: {"description": "Not authenticated", "model": ProblemDetails},
        404: {"description": "User not found", "model": ProblemDetails},
    },
    summary="Get own profile",
)
async def get_me(
    request: Request,
    current_user: CurrentUser = Depends(get_current_user),
    handler: GetProfileHandler = Depends(get_get_profile_handler),
) -> UserResponse | JSONResponse:
    """Read the authenticated user's profile.

    GET /api/v1/users/me → 200 OK
    """
    result = await handler.handle(GetProfile(user_id=current_user.user_id))

    match result:
        case Success(value=profile):
            return _to_response(profile)
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)
