"""Mapper for KanjiProgress ORM ↔ Domain conversion."""

from datetime import UTC, datetime
from typing import Any

from kanjiten.domain.common.value_objects import KanjiId, ProgressKey, UserId
from kanjiten.domain.learning.entities.kanji_progress import KanjiProgress
from kanjiten.models import KanjiProgress as KanjiProgressORM

# Domain field name -> column name
COLUMN_BY_FIELD = {
    "learned": "learned",
    "in_review": "in_review",
    "interval": "srs_interval",
    "ease": "ease_factor",
    "consecutive_correct": "consecutive_correct",
    "total_reviews": "total_reviews",
    "correct_reviews": "correct_reviews",
    "last_reviewed_at": "last_review",
    "next_review_at": "next_review",
    "note": "mnemonic",
}


def as_utc(value: datetime | None) -> datetime | None:
    """SQLite hands back naive datetimes; every stored timestamp is UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class ProgressMapper:
    """Mapper for KanjiProgress ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: KanjiProgressORM) -> KanjiProgress:
        """Convert ORM model to domain entity."""
        return KanjiProgress(
            id=ProgressKey(
                user_id=UserId(orm_model.user_id), kanji_id=KanjiId(orm_model.kanji_id)
            ),
            learned=orm_model.learned,
            in_review=orm_model.in_review,
            interval=orm_model.srs_interval,
            ease=orm_model.ease_factor,
            consecutive_correct=orm_model.consecutive_correct,
            total_reviews=orm_model.total_reviews,
            correct_reviews=orm_model.correct_reviews,
            last_reviewed_at=as_utc(orm_model.last_review),
            next_review_at=as_utc(orm_model.next_review),
            note=orm_model.mnemonic,
            updated_at=as_utc(orm_model.updated_at),
        )

    def to_row(self, domain_entity: KanjiProgress) -> dict[str, Any]:
        """Convert domain entity to a column dict for a bulk upsert statement."""
        row: dict[str, Any] = {
            "user_id": domain_entity.user_id.value,
            "kanji_id": domain_entity.kanji_id.value,
        }
        for field_name, column in COLUMN_BY_FIELD.items():
            row[column] = getattr(domain_entity, field_name)
        return row
