"""Settings context entities."""

from .user_settings import (
    QUESTION_MODES,
    SUPPORTED_LANGUAGES,
    ResolvedSettings,
    UserSettings,
    validate_language,
)

__all__ = [
    "QUESTION_MODES",
    "SUPPORTED_LANGUAGES",
    "ResolvedSettings",
    "UserSettings",
    "validate_language",
]
