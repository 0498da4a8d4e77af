"""Identity context schemas."""

from kanjiten.infrastructure.identity.schemas.identity_schemas import (
    TokenVerifyResponse,
    VerifiedUser,
)

__all__ = [
    "TokenVerifyResponse",
    "VerifiedUser",
]
