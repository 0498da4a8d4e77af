"""Tests for StreakUseCase, including lost races with a concurrent writer."""

from datetime import date

import pytest
from fakes import FakeUnitOfWork, InMemoryStreakRepository

from kanjiten.application.learning.use_cases.streak_use_case import StreakUseCase
from kanjiten.domain.common.value_objects import UserId
from kanjiten.domain.learning.entities.streak import StreakState
from kanjiten.domain.learning.services.streak_calculator import StreakCalculator
from kanjiten.exceptions import ConflictError

USER = "8f14e45f-ceea-467f-a0e6-1b5e8e3f0c11"
TODAY = date(2024, 3, 11)
YESTERDAY = date(2024, 3, 10)


def _make_use_case(
    repository: InMemoryStreakRepository, max_attempts: int = 3
) -> tuple[StreakUseCase, FakeUnitOfWork]:
    # The unit of work tracks no stores: a rollback must not undo the
    # concurrent writer's change.
    uow = FakeUnitOfWork()
    return StreakUseCase(repository, uow, StreakCalculator(), max_attempts=max_attempts), uow


def _store(repository: InMemoryStreakRepository, streak: int, last: date) -> None:
    repository.rows[USER] = StreakState(
        id=UserId(USER), daily_streak=streak, last_review_date=last
    )


class TestGetStreak:
    def test_empty_when_never_reviewed(self) -> None:
        use_case, _ = _make_use_case(InMemoryStreakRepository())

        state = use_case.get_streak(USER)

        assert state.daily_streak == 0
        assert state.last_review_date is None

    def test_stored_state(self) -> None:
        repository = InMemoryStreakRepository()
        _store(repository, 4, YESTERDAY)
        use_case, _ = _make_use_case(repository)

        assert use_case.get_streak(USER).daily_streak == 4


class TestRecordReview:
    def test_first_review(self) -> None:
        repository = InMemoryStreakRepository()
        use_case, uow = _make_use_case(repository)

        assert use_case.record_review(USER, TODAY) == 1
        assert repository.rows[USER].last_review_date == TODAY
        assert uow.commits == 1

    def test_consecutive_day(self) -> None:
        repository = InMemoryStreakRepository()
        _store(repository, 3, YESTERDAY)
        use_case, _ = _make_use_case(repository)

        assert use_case.record_review(USER, TODAY) == 4

    def test_same_day_does_not_write(self) -> None:
        repository = InMemoryStreakRepository()
        _store(repository, 3, TODAY)
        use_case, uow = _make_use_case(repository)

        assert use_case.record_review(USER, TODAY) == 3
        assert repository.write_attempts == 0
        assert uow.commits == 0

    def test_lost_race_same_day_counts_once(self) -> None:
        """Two requests on the same day: the loser re-reads and sees the day counted."""
        repository = InMemoryStreakRepository()
        _store(repository, 3, YESTERDAY)
        use_case, uow = _make_use_case(repository)
        repository.before_write.append(lambda: _store(repository, 4, TODAY))

        assert use_case.record_review(USER, TODAY) == 4
        assert repository.rows[USER].daily_streak == 4
        assert repository.write_attempts == 1
        assert uow.rollbacks == 1

    def test_lost_race_on_first_review(self) -> None:
        repository = InMemoryStreakRepository()
        use_case, _ = _make_use_case(repository)
        repository.before_write.append(lambda: _store(repository, 1, TODAY))

        assert use_case.record_review(USER, TODAY) == 1
        assert repository.rows[USER].daily_streak == 1

    def test_retry_applies_to_fresh_state(self) -> None:
        repository = InMemoryStreakRepository()
        _store(repository, 3, date(2024, 3, 9))
        use_case, _ = _make_use_case(repository)
        repository.before_write.append(lambda: _store(repository, 7, YESTERDAY))

        assert use_case.record_review(USER, TODAY) == 8
        assert repository.write_attempts == 2

    def test_gives_up_after_max_attempts(self) -> None:
        repository = InMemoryStreakRepository()
        _store(repository, 1, date(2024, 3, 1))
        use_case, uow = _make_use_case(repository, max_attempts=2)
        repository.before_write.extend(
            [
                lambda: _store(repository, 2, date(2024, 3, 2)),
                lambda: _store(repository, 3, date(2024, 3, 3)),
            ]
        )

        with pytest.raises(ConflictError, match="modified concurrently"):
            use_case.record_review(USER, TODAY)

        assert repository.write_attempts == 2
        assert uow.commits == 0
