"""Verification of bearer tokens issued by the external identity provider."""

from dataclasses import dataclass
from typing import Any

import jwt
from jwt import InvalidTokenError

from kanjiten.config import Settings

GUEST_USERNAME_PREFIX = "guest_"


@dataclass(frozen=True)
class AuthenticatedUser:
    """Identity extracted from a verified access token."""

    id: str
    username: str | None = None
    email: str | None = None

    @property
    def is_anonymous(self) -> bool:
        return bool(self.username and self.username.startswith(GUEST_USERNAME_PREFIX))


def verify_access_token(token: str, settings: Settings) -> AuthenticatedUser | None:
    """
    Verify an access token and return the user it identifies.

    The signature, expiry and (when configured) audience are checked. The
    ``sub`` claim is the user id; the username is read from
    ``user_metadata.username`` or a top-level ``username`` claim.

    Returns:
        AuthenticatedUser if the token is valid, None otherwise
    """
    if not settings.SECRET_KEY:
        return None

    options: dict[str, Any] = {"require": ["sub", "exp"]}
    if settings.JWT_AUDIENCE is None:
        options["verify_aud"] = False

    try:
        payload = jwt.decode(
            token,
            settings.SECRET_KEY,
            algorithms=[settings.JWT_ALGORITHM],
            audience=settings.JWT_AUDIENCE,
            options=options,
        )
    except InvalidTokenError:
        return None

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id.strip():
        return None

    metadata = payload.get("user_metadata")
    username = metadata.get("username") if isinstance(metadata, dict) else None
    if not isinstance(username, str):
        username = payload.get("username") if isinstance(payload.get("username"), str) else None

    email = payload.get("email")
    return AuthenticatedUser(
        id=user_id,
        username=username,
        email=email if isinstance(email, str) else None,
    )
