"""Mapper for UserSettings ORM ↔ Domain conversion."""

from collections.abc import Mapping
from typing import Any

from kanjiten.domain.common.value_objects import UserId
from kanjiten.domain.settings.entities.user_settings import SETTING_NAMES, UserSettings
from kanjiten.infrastructure.learning.mappers.progress_mapper import as_utc
from kanjiten.models import UserSettings as UserSettingsORM

# Domain field name -> column name
COLUMN_BY_FIELD = {
    "display_name": "profile_name",
    "max_level": "max_level",
    "level_filter": "jlpt_level",
    "max_interval": "max_interval",
    "show_progress": "show_progress",
    "show_drawing": "show_drawing",
    "show_study_progress": "show_study_progress",
    "question_mode": "default_question_mode",
    "dark_mode": "dark_mode",
    "language": "language",
}


class SettingsMapper:
    """Mapper for UserSettings ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserSettingsORM) -> UserSettings:
        """Convert ORM model to domain entity."""
        values = {name: getattr(orm_model, COLUMN_BY_FIELD[name]) for name in SETTING_NAMES}
        return UserSettings(
            id=UserId(orm_model.user_id),
            updated_at=as_utc(orm_model.updated_at),
            **values,
        )

    def to_columns(self, changes: Mapping[str, object]) -> dict[str, Any]:
        """Rename domain field names to column names."""
        return {COLUMN_BY_FIELD[name]: value for name, value in changes.items()}
