"""Protocol for StreakState repository in learning context."""

from typing import Protocol

from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.learning.entities.streak import StreakState


class StreakRepositoryProtocol(Protocol):
    """Protocol for streak persistence with conditional writes."""

    def find_by_user(self, user_id: UserId) -> StreakState | None:
        """Get the stored streak of a user, or None if no review was ever recorded."""
        ...

    def compare_and_set(self, expected: StreakState, new_state: StreakState) -> bool:
        """
        Replace the stored state only if it still equals ``expected``.

        An empty ``expected`` state means "no row exists yet", in which case
        the row is inserted unless a concurrent writer created it first.

        Returns:
            True if the write was applied, False if another writer got there first
        """
        ...
