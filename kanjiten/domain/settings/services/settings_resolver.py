"""Domain service for resolving sparse user settings against the default table."""

from types import MappingProxyType

from kanjiten.domain.settings.entities.user_settings import (
    SETTING_NAMES,
    ResolvedSettings,
    UserSettings,
)

DEFAULT_DISPLAY_NAME = "User"

DEFAULT_SETTINGS = MappingProxyType(
    {
        "display_name": DEFAULT_DISPLAY_NAME,
        "max_level": 10,
        "level_filter": "all",
        "max_interval": 180,
        "show_progress": True,
        "show_drawing": True,
        "show_study_progress": True,
        "question_mode": "meaning-first",
        "dark_mode": False,
        "language": "en",
    }
)


class SettingsResolver:
    """
    Resolves the effective settings for a user, field by field.

    Priority per field:
      1. Persisted override (a blank display name counts as absent)
      2. Display-name fallback (display_name only, e.g. the account username)
      3. Default table
    """

    def resolve(
        self, persisted: UserSettings | None, display_name_fallback: str | None = None
    ) -> ResolvedSettings:
        defaults = dict(DEFAULT_SETTINGS)
        if display_name_fallback and display_name_fallback.strip():
            defaults["display_name"] = display_name_fallback

        values: dict[str, object] = {}
        for name in SETTING_NAMES:
            value = getattr(persisted, name) if persisted is not None else None
            if name == "display_name" and isinstance(value, str) and not value.strip():
                value = None
            values[name] = defaults[name] if value is None else value

        return ResolvedSettings(**values)  # type: ignore[arg-type]
