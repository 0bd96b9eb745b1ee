"""Bearer access token dependency.

A missing header, a bad signature, an expired token and a refresh token
presented as an access token all end in the same 401 problem response with
``WWW-Authenticate: Bearer``.
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from warden.core.container import get_token_service
from warden.core.result import Failure, Success
from warden.domain.enums import TokenType
from warden.domain.errors import AuthenticationError
from warden.domain.protocols import TokenGenerationProtocol

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True, slots=True, kw_only=True)
class CurrentUser:
    """Identity carried by a verified access token."""

    user_id: UUID
    email: str
    token_jti: str | None = None


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    token_service: Annotated[TokenGenerationProtocol, Depends(get_token_service)],
) -> CurrentUser:
    """Resolve the caller from ``Authorization: Bearer <access token>``.

    Raises:
        HTTPException: 401 for any missing or unacceptable token.
    """
    if credentials is None:
        raise _unauthorized("Not authenticated")

    match token_service.verify(TokenType.ACCESS, credentials.credentials):
        case Success(value=claims):
            return CurrentUser(
                user_id=claims.user_id, email=claims.email, token_jti=claims.jti
            )
        case Failure():
            raise _unauthorized(AuthenticationError.INVALID_OR_EXPIRED_TOKEN)
