"""
Daily review streak for a learner.
"""

from dataclasses import dataclass
from datetime import date, datetime

from kanjiten.domain.common.entity import Entity
from kanjiten.domain.common.exceptions import InvariantViolationError
from kanjiten.domain.common.value_objects import UserId


@dataclass
class StreakState(Entity[UserId]):
    """
    Count of consecutive calendar days with at least one recorded review.

    Business Rules:
    - daily_streak is never negative
    - daily_streak == 0 exactly when last_review_date is unset
    - last_review_date is the day the streak was last started or extended
    """

    id: UserId
    daily_streak: int = 0
    last_review_date: date | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.daily_streak < 0:
            raise InvariantViolationError("StreakState", "daily_streak cannot be negative")
        if (self.daily_streak == 0) != (self.last_review_date is None):
            raise InvariantViolationError(
                "StreakState", "last_review_date must be set exactly when daily_streak > 0"
            )

    @property
    def user_id(self) -> UserId:
        return self.id

    @classmethod
    def empty(cls, user_id: UserId) -> "StreakState":
        """State of a user who has never recorded a review."""
        return cls(id=user_id)

    @property
    def is_empty(self) -> bool:
        return self.daily_streak == 0
