"""Repository for UserSettings domain entities."""

from collections.abc import Mapping

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.settings.entities.user_settings import UserSettings
from kanjiten.infrastructure.common.dialects import dialect_insert
from kanjiten.infrastructure.settings.mappers.settings_mapper import SettingsMapper
from kanjiten.models import UserSettings as UserSettingsORM


class SettingsRepository:
    """Repository for sparse per-user settings."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = SettingsMapper()

    def find_by_user(self, user_id: UserId) -> UserSettings | None:
        """Get the persisted overrides of a user, or None if no row exists."""
        stmt = (
            select(UserSettingsORM)
            .where(UserSettingsORM.user_id == user_id.value)
            .execution_options(populate_existing=True)
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def merge(self, user_id: UserId, changes: Mapping[str, object]) -> None:
        """
        Upsert only the supplied fields. Does not commit.

        Args:
            user_id: The user ID
            changes: Validated values keyed by domain field name
        """
        columns = self.mapper.to_columns(changes)
        insert = dialect_insert(self.db)
        stmt = insert(UserSettingsORM).values(user_id=user_id.value, **columns)
        update_columns = {column: stmt.excluded[column] for column in columns}
        update_columns["updated_at"] = func.now()
        stmt = stmt.on_conflict_do_update(index_elements=["user_id"], set_=update_columns)
        self.db.execute(stmt)
