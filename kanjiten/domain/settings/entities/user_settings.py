"""
Sparse per-user settings and their fully resolved counterpart.
"""

from collections.abc import Mapping
from dataclasses import dataclass, fields
from datetime import datetime
from typing import Literal, get_args

from kanjiten.domain.common.entity import Entity
from kanjiten.domain.common.exceptions import ValidationError
from kanjiten.domain.common.value_objects import UserId
from kanjiten.domain.common.value_objects.ids import MAX_INTEGER

Language = Literal["en", "ja"]
QuestionMode = Literal["meaning-first", "reading-first", "mixed"]

SUPPORTED_LANGUAGES: tuple[str, ...] = get_args(Language)
QUESTION_MODES: tuple[str, ...] = get_args(QuestionMode)

MAX_DISPLAY_NAME_LENGTH = 50
MAX_LEVEL_FILTER_LENGTH = 20

BOOLEAN_FIELDS = frozenset({"show_progress", "show_drawing", "show_study_progress", "dark_mode"})
POSITIVE_INT_FIELDS = frozenset({"max_level", "max_interval"})


def validate_language(language: object) -> str:
    """Return the language code if it is one of the supported ones."""
    if language not in SUPPORTED_LANGUAGES:
        raise ValidationError(
            'Invalid language. Must be "en" or "ja"', field="language", value=language
        )
    return language  # type: ignore[return-value]


def validate_setting(name: str, value: object) -> object:
    """
    Validate a single non-null setting value.

    Raises:
        ValidationError: If the field is unknown or the value is out of range
    """
    if name == "language":
        return validate_language(value)
    if name == "question_mode":
        if value not in QUESTION_MODES:
            raise ValidationError(
                f"Invalid question mode. Must be one of: {', '.join(QUESTION_MODES)}",
                field=name,
                value=value,
            )
        return value
    if name in BOOLEAN_FIELDS:
        if not isinstance(value, bool):
            raise ValidationError(f"{name} must be a boolean", field=name, value=value)
        return value
    if name in POSITIVE_INT_FIELDS:
        if isinstance(value, bool) or not isinstance(value, int) or not 1 <= value <= MAX_INTEGER:
            raise ValidationError(
                f"{name} must be an integer between 1 and {MAX_INTEGER}", field=name, value=value
            )
        return value
    if name == "display_name":
        if not isinstance(value, str) or len(value) > MAX_DISPLAY_NAME_LENGTH:
            raise ValidationError(
                f"Display name must be text of at most {MAX_DISPLAY_NAME_LENGTH} characters",
                field=name,
            )
        return value
    if name == "level_filter":
        if not isinstance(value, str) or not value.strip() or len(value) > MAX_LEVEL_FILTER_LENGTH:
            raise ValidationError("Invalid level filter", field=name, value=value)
        return value
    raise ValidationError(f"Unknown setting: {name}", field=name)


@dataclass
class UserSettings(Entity[UserId]):
    """
    Persisted settings overrides for a user.

    Every field is optional; None means "use the default". Callers never see
    this sparse form directly, they get ResolvedSettings from SettingsResolver.
    """

    id: UserId
    display_name: str | None = None
    max_level: int | None = None
    level_filter: str | None = None
    max_interval: int | None = None
    show_progress: bool | None = None
    show_drawing: bool | None = None
    show_study_progress: bool | None = None
    question_mode: str | None = None
    dark_mode: bool | None = None
    language: str | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate every present value."""
        for name in SETTING_NAMES:
            value = getattr(self, name)
            if value is not None:
                validate_setting(name, value)

    @property
    def user_id(self) -> UserId:
        return self.id

    @staticmethod
    def validate_changes(changes: Mapping[str, object]) -> dict[str, object]:
        """
        Validate a partial update.

        Only supplied keys are checked; a None value clears the override.

        Returns:
            A plain dict of the validated changes

        Raises:
            ValidationError: If any key is unknown or any value is invalid
        """
        validated: dict[str, object] = {}
        for name, value in changes.items():
            if name not in SETTING_NAMES:
                raise ValidationError(f"Unknown setting: {name}", field=name)
            validated[name] = None if value is None else validate_setting(name, value)
        return validated


@dataclass(frozen=True)
class ResolvedSettings:
    """Settings with every field populated."""

    display_name: str
    max_level: int
    level_filter: str
    max_interval: int
    show_progress: bool
    show_drawing: bool
    show_study_progress: bool
    question_mode: str
    dark_mode: bool
    language: str


SETTING_NAMES: tuple[str, ...] = tuple(f.name for f in fields(ResolvedSettings))
