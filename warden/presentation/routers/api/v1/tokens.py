"""``POST /api/v1/tokens``: exchange a refresh token for an access token."""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from warden.application.commands.auth_commands import RefreshAccessToken
from warden.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from warden.core.container import get_refresh_token_handler
from warden.core.result import Failure, Success
from warden.presentation.routers.api.v1.errors import (
    ErrorResponseBuilder,
    ProblemDetails,
)
from warden.schemas.auth_schemas import TokenCreateRequest, TokenCreateResponse

router = APIRouter(prefix="/tokens", tags=["Tokens"])

_ERRORS = {
    401: {"description": "Refresh token rejected", "model": ProblemDetails},
    503: {"description": "Database unavailable, retry later", "model": ProblemDetails},
}


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenCreateResponse,
    responses=_ERRORS,
    summary="Refresh access token",
)
async def create_tokens(
    request: Request,
    data: TokenCreateRequest,
    handler: RefreshAccessTokenHandler = Depends(get_refresh_token_handler),
) -> TokenCreateResponse | JSONResponse:
    """Issue a new access token. The refresh token itself is not rotated.

    Every rejection (bad signature, expired, revoked, not in the ledger,
    inactive user) is the same 401 ``invalid-or-expired-token``.
    """
    command = RefreshAccessToken(refresh_token=data.refresh_token)
    match await handler.handle(command, request):
        case Success(value=refreshed):
            return TokenCreateResponse(
                access_token=refreshed.access_token,
                token_type=refreshed.token_type,
                expires_in=refreshed.expires_in,
            )
        case Failure(error=error):
            return ErrorResponseBuilder.from_auth_error(error, request)
