"""Repository for StreakState domain entities."""

from sqlalchemy import func, select, update
from sqlalchemy.orm import Session

from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.learning.entities.streak import StreakState
from kanjiten.infrastructure.common.dialects import dialect_insert
from kanjiten.infrastructure.learning.mappers.streak_mapper import StreakMapper
from kanjiten.models import UserStreak as UserStreakORM


class StreakRepository:
    """Repository for StreakState domain entities with conditional writes."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = StreakMapper()

    def find_by_user(self, user_id: UserId) -> StreakState | None:
        """
        Get the stored streak of a user.

        Always reloads from the store so a retry sees a concurrent writer's row.
        """
        stmt = (
            select(UserStreakORM)
            .where(UserStreakORM.user_id == user_id.value)
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def compare_and_set(self, expected: StreakState, new_state: StreakState) -> bool:
        """
        Write ``new_state`` only if the stored row still matches ``expected``.

        An empty ``expected`` inserts the row with ON CONFLICT DO NOTHING, and
        also claims a pre-existing zero row. Otherwise a single UPDATE guarded
        by the expected (daily_streak, last_review_date) pair is issued.

        Returns:
            True if exactly one row was written
        """
        user_id = expected.user_id.value

        if expected.is_empty:
            insert = dialect_insert(self.db)
            stmt = (
                insert(UserStreakORM)
                .values(
                    user_id=user_id,
                    daily_streak=new_state.daily_streak,
                    last_review_date=new_state.last_review_date,
                )
                .on_conflict_do_nothing(index_elements=["user_id"])
            )
            if self.db.execute(stmt).rowcount == 1:
                return True
            guard = (
                UserStreakORM.daily_streak == 0,
                UserStreakORM.last_review_date.is_(None),
            )
        else:
            guard = (
                UserStreakORM.daily_streak == expected.daily_streak,
                UserStreakORM.last_review_date == expected.last_review_date,
            )

        stmt = (
            update(UserStreakORM)
            .where(UserStreakORM.user_id == user_id, *guard)
            .values(
                daily_streak=new_state.daily_streak,
                last_review_date=new_state.last_review_date,
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        return self.db.execute(stmt).rowcount == 1
