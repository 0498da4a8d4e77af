"""Mapper for StreakState ORM ↔ Domain conversion."""

from kanjiten.domain.common.value_objects import UserId
from kanjiten.domain.learning.entities.streak import StreakState
from kanjiten.infrastructure.learning.mappers.progress_mapper import as_utc
from kanjiten.models import UserStreak as UserStreakORM


class StreakMapper:
    """Mapper for StreakState ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserStreakORM) -> StreakState:
        """Convert ORM model to domain entity."""
        return StreakState(
            id=UserId(orm_model.user_id),
            daily_streak=orm_model.daily_streak,
            last_review_date=orm_model.last_review_date,
            updated_at=as_utc(orm_model.updated_at),
        )
