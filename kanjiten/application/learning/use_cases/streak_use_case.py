"""Use case for reading and advancing the daily review streak."""

from datetime import date

import structlog

from kanjiten.application.common.unit_of_work import UnitOfWork
from kanjiten.application.learning.protocols.streak_repository import StreakRepositoryProtocol
from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.learning.entities.streak import StreakState
from kanjiten.domain.learning.services.streak_calculator import StreakCalculator
from kanjiten.exceptions import ConflictError

logger = structlog.get_logger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


class StreakUseCase:
    """
    Use case for the streak continuity calculator.

    Recording a review is a read-compute-conditional-write cycle. When a
    concurrent request changes the stored state between the read and the
    write, the cycle is retried against the fresh state, so two requests for
    the same day never count twice.
    """

    def __init__(
        self,
        streak_repository: StreakRepositoryProtocol,
        uow: UnitOfWork,
        streak_calculator: StreakCalculator,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        """Initialize use case with repository protocol, unit of work and calculator."""
        self.streak_repository = streak_repository
        self.uow = uow
        self.streak_calculator = streak_calculator
        self.max_attempts = max_attempts

    def get_streak(self, user_id: str) -> StreakState:
        """
        Get the stored streak of a user.

        Returns:
            The stored state, or an empty state (streak 0, no date) if the
            user never recorded a review
        """
        user_id_vo = UserId(user_id)
        state = self.streak_repository.find_by_user(user_id_vo)
        return state if state is not None else StreakState.empty(user_id_vo)

    def record_review(self, user_id: str, today: date) -> int:
        """
        Record that the user reviewed on ``today`` and return the new streak.

        Args:
            user_id: ID of the user
            today: Current calendar date in the streak time zone

        Returns:
            The streak count after applying the review

        Raises:
            ConflictError: If every attempt lost a race with a concurrent writer
            StorageError: If the store fails
        """
        user_id_vo = UserId(user_id)

        for attempt in range(1, self.max_attempts + 1):
            with self.uow:
                stored = self.streak_repository.find_by_user(user_id_vo)
                current = stored if stored is not None else StreakState.empty(user_id_vo)
                decision = self.streak_calculator.advance(current, today)

                if not decision.changed:
                    return current.daily_streak

                if self.streak_repository.compare_and_set(current, decision.state):
                    self.uow.commit()
                    logger.info(
                        "streak_updated",
                        transition=decision.transition.value,
                        daily_streak=decision.state.daily_streak,
                        attempt=attempt,
                    )
                    return decision.state.daily_streak

                self.uow.rollback()

            logger.warning("streak_write_conflict", attempt=attempt)

        raise ConflictError("Streak was modified concurrently, please retry")
