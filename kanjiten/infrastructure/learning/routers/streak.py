"""API routes for the daily review streak."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from kanjiten.application.learning.use_cases.streak_use_case import StreakUseCase
from kanjiten.core import container
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.exceptions import KanjitenError
from kanjiten.infrastructure.common.di import inject_use_case
from kanjiten.infrastructure.identity.dependencies import CurrentUser
from kanjiten.infrastructure.learning.dependencies import ReviewDate
from kanjiten.infrastructure.learning.schemas import Streak, StreakResponse, StreakUpdateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/streak", tags=["streak"])


@router.get("", response_model=StreakResponse, status_code=status.HTTP_200_OK)
def get_streak(
    current_user: CurrentUser,
    use_case: StreakUseCase = Depends(inject_use_case(container.streak_use_case)),
) -> StreakResponse:
    """
    Get the stored streak of the current user.

    A user who never reviewed gets a streak of 0 and no review date.
    """
    try:
        state = use_case.get_streak(current_user.id)
        return StreakResponse(
            success=True,
            streak=Streak(
                daily_streak=state.daily_streak,
                last_review_date=state.last_review_date,
            ),
        )
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch streak: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/update", response_model=StreakUpdateResponse, status_code=status.HTTP_200_OK)
def update_streak(
    current_user: CurrentUser,
    today: ReviewDate,
    use_case: StreakUseCase = Depends(inject_use_case(container.streak_use_case)),
) -> StreakUpdateResponse:
    """
    Record that the current user reviewed today.

    Reviewing again on the same day leaves the streak unchanged, reviewing on
    the next day extends it, and a longer gap starts over at 1.

    Args:
        today: Current date in the configured streak time zone
        use_case: StreakUseCase injected via dependency container

    Returns:
        The streak after this review
    """
    try:
        streak = use_case.record_review(current_user.id, today)
        return StreakUpdateResponse(success=True, streak=streak)
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update streak: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
