"""Pydantic schemas for streak API responses."""

from datetime import date

from pydantic import BaseModel, Field

from kanjiten.infrastructure.common.schemas import CamelModel


class Streak(CamelModel):
    """Schema for the stored streak state."""

    daily_streak: int = Field(..., description="Consecutive days with a review")
    last_review_date: date | None = Field(..., description="Day of the last counted review")


class StreakResponse(BaseModel):
    """Schema for reading the streak."""

    success: bool = Field(..., description="Whether the request was successful")
    streak: Streak = Field(..., description="Current streak state")


class StreakUpdateResponse(BaseModel):
    """Schema for recording a review day."""

    success: bool = Field(..., description="Whether the update was successful")
    streak: int = Field(..., description="Streak after the review was recorded")
