"""Repository for CustomWord domain entities."""

from sqlalchemy import func, select, text
from sqlalchemy.orm import Session

from kanjiten.domain.common.value_objects.ids import CustomWordId, KanjiId, UserId
from kanjiten.domain.learning.entities.custom_word import CustomWord
from kanjiten.infrastructure.learning.mappers.custom_word_mapper import CustomWordMapper
from kanjiten.models import CustomWord as CustomWordORM


class CustomWordRepository:
    """Repository for CustomWord domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CustomWordMapper()

    def find_by_kanji(self, kanji_id: KanjiId, user_id: UserId) -> list[CustomWord]:
        """
        Get all custom words of a user for a kanji.

        Returns:
            List of custom word entities ordered by created_at ASC
        """
        stmt = (
            select(CustomWordORM)
            .where(
                CustomWordORM.kanji_id == kanji_id.value,
                CustomWordORM.user_id == user_id.value,
            )
            .order_by(CustomWordORM.created_at.asc(), CustomWordORM.id.asc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def lock_kanji(self, kanji_id: KanjiId, user_id: UserId) -> None:
        """
        Serialize writers of one user's words for a kanji until the transaction ends.

        PostgreSQL takes a transaction-scoped advisory lock keyed on the pair.
        SQLite allows a single writer per database, so nothing is taken there.
        """
        if self.db.bind is None or self.db.bind.dialect.name != "postgresql":
            return
        self.db.execute(
            text("SELECT pg_advisory_xact_lock(hashtext(:user_id), :kanji_id)"),
            {"user_id": user_id.value, "kanji_id": kanji_id.value},
        )

    def count_by_kanji(self, kanji_id: KanjiId, user_id: UserId) -> int:
        """Count custom words of a user for a kanji."""
        stmt = select(func.count(CustomWordORM.id)).where(
            CustomWordORM.kanji_id == kanji_id.value,
            CustomWordORM.user_id == user_id.value,
        )
        return self.db.execute(stmt).scalar() or 0

    def add(self, word: CustomWord) -> CustomWord:
        """
        Insert a new custom word. Does not commit.

        Returns:
            Custom word entity with database-generated values
        """
        orm_model = self.mapper.to_orm(word)
        self.db.add(orm_model)
        self.db.flush()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, word_id: CustomWordId, user_id: UserId) -> bool:
        """
        Delete a custom word owned by the user. Does not commit.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(CustomWordORM).where(
            CustomWordORM.id == word_id.value,
            CustomWordORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.flush()
        return True
