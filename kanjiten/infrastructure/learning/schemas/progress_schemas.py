"""Pydantic schemas for progress API request/response validation."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from kanjiten.domain.common.value_objects.ids import MAX_INTEGER
from kanjiten.infrastructure.common.schemas import CamelModel


class ProgressFields(BaseModel):
    """
    Progress snapshot of one kanji as sent by the client.

    Every field is optional; omitted or null fields take their defaults when
    the record is written. Both the camelCase names and the legacy snake_case
    column names are accepted.
    """

    learned: bool | None = Field(None, description="Whether the kanji is learned")
    in_review: bool | None = Field(
        None,
        validation_alias=AliasChoices("inReview", "in_review"),
        description="Whether the kanji is in the review queue",
    )
    interval: int | None = Field(
        None,
        le=MAX_INTEGER,
        validation_alias=AliasChoices("interval", "srsInterval", "srs_interval"),
        description="Current review interval in days (>= 1)",
    )
    ease: float | None = Field(
        None,
        allow_inf_nan=False,
        validation_alias=AliasChoices("ease", "easeFactor", "ease_factor"),
        description="Ease factor (>= 1.0)",
    )
    consecutive_correct: int | None = Field(
        None,
        le=MAX_INTEGER,
        validation_alias=AliasChoices("consecutiveCorrect", "consecutive_correct"),
        description="Correct answers in a row",
    )
    total_reviews: int | None = Field(
        None,
        le=MAX_INTEGER,
        validation_alias=AliasChoices("totalReviews", "total_reviews"),
        description="Total number of reviews",
    )
    correct_reviews: int | None = Field(
        None,
        le=MAX_INTEGER,
        validation_alias=AliasChoices("correctReviews", "correct_reviews"),
        description="Number of correct reviews (<= totalReviews)",
    )
    last_reviewed_at: datetime | None = Field(
        None,
        validation_alias=AliasChoices(
            "lastReviewedAt", "lastReview", "last_review", "last_reviewed_at"
        ),
        description="Time of the last review",
    )
    next_review_at: datetime | None = Field(
        None,
        validation_alias=AliasChoices("nextReviewAt", "nextReview", "next_review", "next_review_at"),
        description="Time the next review is due",
    )
    note: str | None = Field(
        None,
        validation_alias=AliasChoices("note", "mnemonic"),
        description="Learner's mnemonic",
    )


class ProgressUpdateRequest(ProgressFields):
    """Schema for upserting the progress of a single kanji."""

    kanji_id: int = Field(
        ...,
        gt=0,
        le=MAX_INTEGER,
        validation_alias=AliasChoices("kanjiId", "kanji_id"),
        description="ID of the kanji",
    )


class BulkProgressUpdateRequest(BaseModel):
    """Schema for reconciling a batch of client snapshots."""

    items: list[tuple[int, ProgressFields]] = Field(
        ...,
        validation_alias=AliasChoices("items", "kanjiProgressData"),
        description="List of [kanjiId, progress] pairs, applied in order",
    )


class KanjiProgress(CamelModel):
    """Schema for a stored progress record."""

    kanji_id: int
    learned: bool
    in_review: bool
    interval: int
    ease: float
    consecutive_correct: int
    total_reviews: int
    correct_reviews: int
    last_reviewed_at: datetime | None
    next_review_at: datetime | None
    note: str | None
    updated_at: datetime | None = None


class ProgressListResponse(BaseModel):
    """Schema for the list of a user's progress records."""

    success: bool = Field(..., description="Whether the request was successful")
    progress: list[KanjiProgress] = Field(..., description="All progress records of the user")


class ProgressUpdateResponse(BaseModel):
    """Schema for single progress update response."""

    success: bool = Field(..., description="Whether the update was successful")
    message: str = Field(..., description="Response message")


class BulkProgressUpdateResponse(BaseModel):
    """Schema for bulk reconciliation response."""

    success: bool = Field(..., description="Whether the batch was applied")
    updated: int = Field(..., description="Number of entries processed, duplicates included")
