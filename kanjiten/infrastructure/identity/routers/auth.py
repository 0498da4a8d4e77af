from fastapi import APIRouter

from kanjiten.infrastructure.identity.dependencies import CurrentUser
from kanjiten.infrastructure.identity.schemas import TokenVerifyResponse, VerifiedUser

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/verify")
async def verify_token(current_user: CurrentUser) -> TokenVerifyResponse:
    """
    Check that the bearer token is valid and return the user it identifies.

    Invalid or missing tokens never reach this handler; they are answered with
    401 by the authentication dependency.
    """
    return TokenVerifyResponse(
        success=True,
        valid=True,
        user=VerifiedUser(
            id=current_user.id,
            username=current_user.username,
            email=current_user.email,
            is_anonymous=current_user.is_anonymous,
        ),
    )
