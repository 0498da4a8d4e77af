"""Repository for KanjiProgress domain entities."""

import logging
from collections.abc import Sequence
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from kanjiten.domain.common.value_objects.ids import UserId
from kanjiten.domain.learning.entities.kanji_progress import KanjiProgress
from kanjiten.infrastructure.common.dialects import dialect_insert
from kanjiten.infrastructure.learning.mappers.progress_mapper import (
    COLUMN_BY_FIELD,
    ProgressMapper,
)
from kanjiten.models import KanjiProgress as KanjiProgressORM

logger = logging.getLogger(__name__)

# Rows per INSERT statement; keeps bound parameters under the SQLite/PostgreSQL limits
UPSERT_CHUNK_SIZE = 500


class ProgressRepository:
    """Repository for KanjiProgress domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ProgressMapper()

    def find_all_by_user(self, user_id: UserId) -> list[KanjiProgress]:
        """
        Get every progress record of a user.

        Args:
            user_id: The user ID

        Returns:
            List of records ordered by kanji id
        """
        stmt = (
            select(KanjiProgressORM)
            .where(KanjiProgressORM.user_id == user_id.value)
            .order_by(KanjiProgressORM.kanji_id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def upsert(self, record: KanjiProgress) -> None:
        """Insert or overwrite a single record. Does not commit."""
        self.upsert_many([record])

    def upsert_many(self, records: Sequence[KanjiProgress]) -> None:
        """
        Insert or overwrite several records with native ON CONFLICT upserts.

        Records sharing a key are collapsed first (the last one wins), since a
        single statement may not touch the same row twice. Does not commit.

        Args:
            records: Normalized records in submission order
        """
        rows_by_key: dict[tuple[str, int], dict[str, Any]] = {}
        for record in records:
            key = (record.user_id.value, record.kanji_id.value)
            rows_by_key.pop(key, None)
            rows_by_key[key] = self.mapper.to_row(record)

        rows = list(rows_by_key.values())
        if not rows:
            return

        insert = dialect_insert(self.db)
        for start in range(0, len(rows), UPSERT_CHUNK_SIZE):
            stmt = insert(KanjiProgressORM).values(rows[start : start + UPSERT_CHUNK_SIZE])
            update_columns = {
                column: stmt.excluded[column] for column in COLUMN_BY_FIELD.values()
            }
            update_columns["updated_at"] = func.now()
            stmt = stmt.on_conflict_do_update(
                index_elements=["user_id", "kanji_id"], set_=update_columns
            )
            self.db.execute(stmt)

        logger.debug(f"Upserted {len(rows)} progress rows")
