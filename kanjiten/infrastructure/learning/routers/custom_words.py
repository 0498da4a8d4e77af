"""API routes for custom vocabulary words."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from kanjiten.application.learning.use_cases.custom_word_use_case import CustomWordUseCase
from kanjiten.core import container
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.domain.learning.entities.custom_word import CustomWord as CustomWordEntity
from kanjiten.exceptions import KanjitenError
from kanjiten.infrastructure.common.di import inject_use_case
from kanjiten.infrastructure.identity.dependencies import CurrentUser
from kanjiten.infrastructure.learning.schemas import (
    CustomWord,
    CustomWordCreateRequest,
    CustomWordCreateResponse,
    CustomWordDeleteResponse,
    CustomWordsListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/custom-words", tags=["custom-words"])


def _to_schema(word: CustomWordEntity) -> CustomWord:
    return CustomWord(
        id=word.id.value,
        kanji_id=word.kanji_id.value,
        word=word.word,
        reading=word.reading,
        meaning=word.meaning,
        word_type=word.word_type,
        jlpt_level=word.jlpt_level,
        created_at=word.created_at,
    )


@router.get("/{kanji_id}", response_model=CustomWordsListResponse, status_code=status.HTTP_200_OK)
def get_custom_words(
    kanji_id: int,
    current_user: CurrentUser,
    use_case: CustomWordUseCase = Depends(inject_use_case(container.custom_word_use_case)),
) -> CustomWordsListResponse:
    """
    Get the current user's custom words for a kanji.

    Args:
        kanji_id: ID of the kanji
        use_case: CustomWordUseCase injected via dependency container

    Returns:
        Custom words, oldest first
    """
    try:
        words = use_case.list_words(current_user.id, kanji_id)
        return CustomWordsListResponse(success=True, words=[_to_schema(w) for w in words])
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch custom words for kanji {kanji_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=CustomWordCreateResponse, status_code=status.HTTP_200_OK)
def add_custom_word(
    request: CustomWordCreateRequest,
    current_user: CurrentUser,
    use_case: CustomWordUseCase = Depends(inject_use_case(container.custom_word_use_case)),
) -> CustomWordCreateResponse:
    """
    Add a custom word to a kanji.

    Args:
        request: Kanji ID and the word with its optional details
        use_case: CustomWordUseCase injected via dependency container

    Returns:
        Created custom word

    Raises:
        ValidationError: If the kanji already holds the maximum number of words
    """
    try:
        word = use_case.add_word(
            user_id=current_user.id,
            kanji_id=request.kanji_id,
            word=request.word,
            reading=request.reading,
            meaning=request.meaning,
            word_type=request.word_type,
            jlpt_level=request.jlpt_level,
        )
        return CustomWordCreateResponse(
            success=True,
            message="Custom word added successfully",
            word=_to_schema(word),
        )
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to add custom word: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete(
    "/{word_id}", response_model=CustomWordDeleteResponse, status_code=status.HTTP_200_OK
)
def delete_custom_word(
    word_id: int,
    current_user: CurrentUser,
    use_case: CustomWordUseCase = Depends(inject_use_case(container.custom_word_use_case)),
) -> CustomWordDeleteResponse:
    """
    Delete one of the current user's custom words.

    Raises:
        CustomWordNotFoundError: If the word does not exist or belongs to another user
    """
    try:
        use_case.delete_word(current_user.id, word_id)
        return CustomWordDeleteResponse(success=True, message="Custom word deleted successfully")
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete custom word {word_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
