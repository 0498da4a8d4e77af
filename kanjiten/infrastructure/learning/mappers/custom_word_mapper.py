"""Mapper for CustomWord ORM ↔ Domain conversion."""

from kanjiten.domain.common.value_objects import CustomWordId, KanjiId, UserId
from kanjiten.domain.learning.entities.custom_word import CustomWord
from kanjiten.infrastructure.learning.mappers.progress_mapper import as_utc
from kanjiten.models import CustomWord as CustomWordORM


class CustomWordMapper:
    """Mapper for CustomWord ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CustomWordORM) -> CustomWord:
        """Convert ORM model to domain entity."""
        return CustomWord.create_with_id(
            id=CustomWordId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            kanji_id=KanjiId(orm_model.kanji_id),
            word=orm_model.word,
            reading=orm_model.reading,
            meaning=orm_model.meaning,
            word_type=orm_model.word_type,
            jlpt_level=orm_model.jlpt_level,
            created_at=as_utc(orm_model.created_at),  # type: ignore[arg-type]
        )

    def to_orm(self, domain_entity: CustomWord) -> CustomWordORM:
        """Convert a new domain entity to an ORM model."""
        return CustomWordORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            kanji_id=domain_entity.kanji_id.value,
            word=domain_entity.word,
            reading=domain_entity.reading,
            meaning=domain_entity.meaning,
            word_type=domain_entity.word_type,
            jlpt_level=domain_entity.jlpt_level,
        )
