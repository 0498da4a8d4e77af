"""
Domain service deciding how a review on a given day affects a streak.

Pure logic, no persistence. Days are plain calendar dates; the caller is
responsible for deriving "today" in one fixed time zone.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import StrEnum

from kanjiten.domain.learning.entities.streak import StreakState


class StreakTransition(StrEnum):
    UNCHANGED = "unchanged"
    EXTENDED = "extended"
    STARTED = "started"
    RESET = "reset"


@dataclass(frozen=True)
class StreakDecision:
    """Outcome of applying a review day to the current state."""

    state: StreakState
    transition: StreakTransition

    @property
    def changed(self) -> bool:
        return self.transition is not StreakTransition.UNCHANGED


class StreakCalculator:
    """
    Computes the next streak state.

    Rules:
      1) A second review on the same day leaves the streak as it is.
      2) A review on the day after last_review_date extends the streak by one.
      3) Anything else (first review, gap of two or more days, or a
         last_review_date after today) starts over at 1.
    """

    def advance(self, current: StreakState, today: date) -> StreakDecision:
        last = current.last_review_date

        if last == today:
            return StreakDecision(state=current, transition=StreakTransition.UNCHANGED)

        if last is not None and last == today - timedelta(days=1):
            next_state = StreakState(
                id=current.id,
                daily_streak=current.daily_streak + 1,
                last_review_date=today,
            )
            return StreakDecision(state=next_state, transition=StreakTransition.EXTENDED)

        transition = StreakTransition.STARTED if last is None else StreakTransition.RESET
        return StreakDecision(
            state=StreakState(id=current.id, daily_streak=1, last_review_date=today),
            transition=transition,
        )
