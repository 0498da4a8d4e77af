"""API routes for the interface language."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from kanjiten.application.settings.use_cases.settings_use_case import SettingsUseCase
from kanjiten.core import container
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.exceptions import KanjitenError
from kanjiten.infrastructure.common.di import inject_use_case
from kanjiten.infrastructure.identity.dependencies import CurrentUser
from kanjiten.infrastructure.settings.schemas import LanguageResponse, LanguageUpdateRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/user", tags=["settings"])


@router.get("/language", response_model=LanguageResponse, status_code=status.HTTP_200_OK)
def get_language(
    current_user: CurrentUser,
    use_case: SettingsUseCase = Depends(inject_use_case(container.settings_use_case)),
) -> LanguageResponse:
    """Get the interface language of the current user (defaults to "en")."""
    try:
        return LanguageResponse(success=True, language=use_case.get_language(current_user.id))
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch language: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.put("/language", response_model=LanguageResponse, status_code=status.HTTP_200_OK)
def update_language(
    request: LanguageUpdateRequest,
    current_user: CurrentUser,
    use_case: SettingsUseCase = Depends(inject_use_case(container.settings_use_case)),
) -> LanguageResponse:
    """
    Change the interface language of the current user.

    Raises:
        ValidationError: If the language is not "en" or "ja"
    """
    try:
        language = use_case.update_language(current_user.id, request.language)
        return LanguageResponse(success=True, language=language)
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update language: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
