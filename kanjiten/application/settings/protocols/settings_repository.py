"""Protocol for UserSettings repository in settings context."""

from collections.abc import Mapping
from typing import Protocol

from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.settings.entities.user_settings import UserSettings


class SettingsRepositoryProtocol(Protocol):
    """Protocol for sparse settings persistence."""

    def find_by_user(self, user_id: UserId) -> UserSettings | None:
        """
        Get the persisted overrides of a user.

        Returns:
            UserSettings with None for every field never set, or None if no row exists
        """
        ...

    def merge(self, user_id: UserId, changes: Mapping[str, object]) -> None:
        """
        Upsert only the supplied fields.

        Fields not present in ``changes`` keep their stored value (or stay
        unset on insert). Does not commit.
        """
        ...
