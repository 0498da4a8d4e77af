"""API routes for kanji progress."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status

from kanjiten.application.learning.use_cases.progress_use_case import ProgressUseCase
from kanjiten.config import get_settings
from kanjiten.core import container
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.exceptions import KanjitenError
from kanjiten.infrastructure.common.di import inject_use_case
from kanjiten.infrastructure.common.rate_limit import limiter
from kanjiten.infrastructure.identity.dependencies import CurrentUser
from kanjiten.infrastructure.learning.schemas import (
    BulkProgressUpdateRequest,
    BulkProgressUpdateResponse,
    KanjiProgress,
    ProgressListResponse,
    ProgressUpdateRequest,
    ProgressUpdateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


def _bulk_update_limit() -> str:
    return get_settings().BULK_UPDATE_RATE_LIMIT


@router.get("", response_model=ProgressListResponse, status_code=status.HTTP_200_OK)
def get_progress(
    current_user: CurrentUser,
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> ProgressListResponse:
    """
    Get every progress record of the current user.

    Returns:
        List of records, empty if the user has not studied anything yet
    """
    try:
        records = use_case.get_progress(current_user.id)
        return ProgressListResponse(
            success=True,
            progress=[
                KanjiProgress(
                    kanji_id=record.kanji_id.value,
                    learned=record.learned,
                    in_review=record.in_review,
                    interval=record.interval,
                    ease=record.ease,
                    consecutive_correct=record.consecutive_correct,
                    total_reviews=record.total_reviews,
                    correct_reviews=record.correct_reviews,
                    last_reviewed_at=record.last_reviewed_at,
                    next_review_at=record.next_review_at,
                    note=record.note,
                    updated_at=record.updated_at,
                )
                for record in records
            ],
        )
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to fetch progress: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("/update", response_model=ProgressUpdateResponse, status_code=status.HTTP_200_OK)
def update_progress(
    request: ProgressUpdateRequest,
    current_user: CurrentUser,
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> ProgressUpdateResponse:
    """
    Upsert the progress of a single kanji.

    Omitted fields take their defaults; the review time defaults to now.

    Args:
        request: Kanji ID and progress fields
        use_case: ProgressUseCase injected via dependency container

    Returns:
        Update confirmation
    """
    try:
        use_case.update_progress(
            user_id=current_user.id,
            kanji_id=request.kanji_id,
            fields=request.model_dump(exclude_unset=True, exclude={"kanji_id"}),
        )
        return ProgressUpdateResponse(success=True, message="Progress updated successfully")
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(
            f"Failed to update progress of kanji {request.kanji_id}: {e!s}", exc_info=True
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post(
    "/bulk-update", response_model=BulkProgressUpdateResponse, status_code=status.HTTP_200_OK
)
@limiter.limit(_bulk_update_limit)  # type: ignore[misc]
def bulk_update_progress(
    request: Request,
    body: BulkProgressUpdateRequest,
    current_user: CurrentUser,
    use_case: ProgressUseCase = Depends(inject_use_case(container.progress_use_case)),
) -> BulkProgressUpdateResponse:
    """
    Reconcile a batch of progress snapshots from the client.

    The whole batch is validated first and written in one transaction:
    either every entry is applied or none is. When a kanji appears more than
    once, the last entry wins.

    Args:
        request: HTTP request (used for rate limiting)
        body: List of [kanjiId, progress] pairs
        use_case: ProgressUseCase injected via dependency container

    Returns:
        Number of entries processed
    """
    try:
        batch = [
            (kanji_id, fields.model_dump(exclude_unset=True)) for kanji_id, fields in body.items
        ]
        updated = use_case.reconcile(current_user.id, batch)
        return BulkProgressUpdateResponse(success=True, updated=updated)
    except (KanjitenError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to reconcile progress batch: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
