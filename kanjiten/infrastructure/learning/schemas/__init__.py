"""Learning context schemas."""

from kanjiten.infrastructure.learning.schemas.custom_word_schemas import (
    CustomWord,
    CustomWordCreateRequest,
    CustomWordCreateResponse,
    CustomWordDeleteResponse,
    CustomWordsListResponse,
)
from kanjiten.infrastructure.learning.schemas.progress_schemas import (
    BulkProgressUpdateRequest,
    BulkProgressUpdateResponse,
    KanjiProgress,
    ProgressFields,
    ProgressListResponse,
    ProgressUpdateRequest,
    ProgressUpdateResponse,
)
from kanjiten.infrastructure.learning.schemas.streak_schemas import (
    Streak,
    StreakResponse,
    StreakUpdateResponse,
)

__all__ = [
    "BulkProgressUpdateRequest",
    "BulkProgressUpdateResponse",
    "CustomWord",
    "CustomWordCreateRequest",
    "CustomWordCreateResponse",
    "CustomWordDeleteResponse",
    "CustomWordsListResponse",
    "KanjiProgress",
    "ProgressFields",
    "ProgressListResponse",
    "ProgressUpdateRequest",
    "ProgressUpdateResponse",
    "Streak",
    "StreakResponse",
    "StreakUpdateResponse",
]
