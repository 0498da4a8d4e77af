"""Settings context schemas."""

from kanjiten.infrastructure.settings.schemas.settings_schemas import (
    LanguageResponse,
    LanguageUpdateRequest,
    UserSettings,
    UserSettingsResponse,
    UserSettingsUpdateRequest,
)

__all__ = [
    "LanguageResponse",
    "LanguageUpdateRequest",
    "UserSettings",
    "UserSettingsResponse",
    "UserSettingsUpdateRequest",
]
