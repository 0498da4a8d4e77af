"""Use case for resolving and saving user settings."""

from collections.abc import Mapping

import structlog

from kanjiten.application.common.unit_of_work import UnitOfWork
from kanjiten.application.settings.protocols.settings_repository import (
    SettingsRepositoryProtocol,
)
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.settings.entities.user_settings import (
    ResolvedSettings,
    UserSettings,
    validate_language,
)
from kanjiten.domain.settings.services.settings_resolver import SettingsResolver
from kanjiten.exceptions import ValidationError

logger = structlog.get_logger(__name__)


class SettingsUseCase:
    """Use case for the settings resolver."""

    def __init__(
        self,
        settings_repository: SettingsRepositoryProtocol,
        uow: UnitOfWork,
        settings_resolver: SettingsResolver,
    ) -> None:
        """Initialize use case with repository protocol, unit of work and resolver."""
        self.settings_repository = settings_repository
        self.uow = uow
        self.settings_resolver = settings_resolver

    def get_settings(
        self, user_id: str, display_name_fallback: str | None = None
    ) -> ResolvedSettings:
        """
        Get the effective settings of a user.

        Args:
            user_id: ID of the user
            display_name_fallback: Name used when no display name is stored,
                typically the account username

        Returns:
            Settings with every field populated from overrides or defaults
        """
        persisted = self.settings_repository.find_by_user(UserId(user_id))
        return self.settings_resolver.resolve(persisted, display_name_fallback)

    def save_settings(self, user_id: str, changes: Mapping[str, object]) -> None:
        """
        Save a partial settings update.

        Only the supplied fields are written; everything else keeps its stored
        value. All values are validated before anything is written.

        Raises:
            ValidationError: If a field is unknown or a value is invalid
        """
        try:
            validated = UserSettings.validate_changes(changes)
        except DomainError as e:
            raise ValidationError(e.message) from e

        if not validated:
            return

        with self.uow:
            self.settings_repository.merge(UserId(user_id), validated)
            self.uow.commit()

        logger.info("settings_saved", fields=sorted(validated))

    def get_language(self, user_id: str) -> str:
        """Get the effective interface language of a user."""
        return self.get_settings(user_id).language

    def update_language(self, user_id: str, language: object) -> str:
        """
        Set the interface language of a user.

        Raises:
            ValidationError: If the language is not supported
        """
        try:
            code = validate_language(language)
        except DomainError as e:
            raise ValidationError(e.message) from e

        with self.uow:
            self.settings_repository.merge(UserId(user_id), {"language": code})
            self.uow.commit()

        logger.info("language_updated", language=code)
        return code
