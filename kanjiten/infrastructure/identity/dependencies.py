"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from kanjiten.config import Settings, get_settings
from kanjiten.domain.common.value_objects.ids import MAX_USER_ID_LENGTH
from kanjiten.exceptions import AuthError
from kanjiten.infrastructure.identity.auth.token_service import (
    AuthenticatedUser,
    verify_access_token,
)

bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AuthenticatedUser:
    """
    Get the current authenticated user from the bearer token.

    Args:
        credentials: Parsed Authorization header, if any
        settings: Application settings holding the verification key

    Returns:
        The verified user

    Raises:
        AuthError: If the header is missing or the token is invalid or expired
    """
    if credentials is None:
        raise AuthError("No token provided")

    user = verify_access_token(credentials.credentials, settings)
    if user is None or len(user.id) > MAX_USER_ID_LENGTH:
        raise AuthError

    return user


CurrentUser = Annotated[AuthenticatedUser, Depends(get_current_user)]
