"""Settings context domain services."""

from .settings_resolver import DEFAULT_SETTINGS, SettingsResolver

__all__ = ["DEFAULT_SETTINGS", "SettingsResolver"]
