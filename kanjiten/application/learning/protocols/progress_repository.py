"""Protocol for KanjiProgress repository in learning context."""

from collections.abc import Sequence
from typing import Protocol

from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.learning.entities.kanji_progress import KanjiProgress


class ProgressRepositoryProtocol(Protocol):
    """Protocol for progress record store operations."""

    def find_all_by_user(self, user_id: UserId) -> list[KanjiProgress]:
        """
        Get every progress record of a user.

        Args:
            user_id: The user ID

        Returns:
            List of records ordered by kanji id, empty if the user has none
        """
        ...

    def upsert(self, record: KanjiProgress) -> None:
        """
        Insert or overwrite the record for (user_id, kanji_id).

        Every field of the record replaces the stored value and the
        modification time is stamped by the store. Does not commit.
        """
        ...

    def upsert_many(self, records: Sequence[KanjiProgress]) -> None:
        """
        Upsert several records in submission order.

        When the same key appears more than once the last record wins.
        Does not commit; the caller's unit of work decides atomicity.
        """
        ...
