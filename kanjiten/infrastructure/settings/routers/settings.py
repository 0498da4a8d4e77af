"""API routes for user settings."""

import logging
from dataclasses import asdict

from fastapi import APIRouter, Depends, HTTPException, status

from kanjiten.application.settings.use_cases.settings_use_case import SettingsUseCase
from kanjiten.core import container
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.exceptions import KanjitenError
from kanjiten.infrastructure.common.di import inject_use_case
from kanjiten.infrastructure.common.schemas import SuccessResponse
from kanjiten.infrastructure.identity.dependencies import CurrentUser
from kanjiten.infrastructure.settings.schemas import (
    UserSettings,
    UserSettingsResponse,
    UserSettingsUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("", response_model=UserSettingsResponse, status_code=status.HTTP_200_OK)
def get_user_settings(
    current_user: CurrentUser,
    use_case: SettingsUseCase = Depends(inject_use_case(container.settings_use_case)),
) -> UserSettingsResponse:
    """
    Get the effective settings of the current user.

    Fields the user never set are filled from the defaults; the display name
    falls back to the account username.
    """
    try:
        resolved = use_case.get_settings(
            current_user.id, display_name_fallback=current_user.username
        )
        return UserSettingsResponse(success=True, settings=UserSettings(**asdict(resolved)))
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch settings: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("", response_model=SuccessResponse, status_code=status.HTTP_200_OK)
def update_user_settings(
    request: UserSettingsUpdateRequest,
    current_user: CurrentUser,
    use_case: SettingsUseCase = Depends(inject_use_case(container.settings_use_case)),
) -> SuccessResponse:
    """
    Save a partial settings update.

    Only fields present in the body are written. Nothing is saved if any
    value is invalid.

    Args:
        request: Settings fields to change
        use_case: SettingsUseCase injected via dependency container

    Returns:
        Update confirmation
    """
    try:
        use_case.save_settings(current_user.id, request.model_dump(exclude_unset=True))
        return SuccessResponse(success=True, message="Settings saved successfully")
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to save settings: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
