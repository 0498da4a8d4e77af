"""
Learner-authored vocabulary word attached to a kanji.
"""

from dataclasses import dataclass
from datetime import datetime

from kanjiten.domain.common.entity import Entity
from kanjiten.domain.common.exceptions import ValidationError
from kanjiten.domain.common.value_objects import CustomWordId, KanjiId, UserId

MAX_WORD_LENGTH = 100
MAX_FIELD_LENGTH = 500


@dataclass
class CustomWord(Entity[CustomWordId]):
    """
    Custom example word for a kanji.

    Business Rules:
    - Word cannot be empty
    - A kanji holds a limited number of custom words per user (enforced by the use case)
    """

    id: CustomWordId
    user_id: UserId
    kanji_id: KanjiId
    word: str
    reading: str | None = None
    meaning: str | None = None
    word_type: str | None = None
    jlpt_level: str | None = None
    created_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.word or not self.word.strip():
            raise ValidationError("Word cannot be empty", field="word")
        if len(self.word) > MAX_WORD_LENGTH:
            raise ValidationError(
                f"Word cannot exceed {MAX_WORD_LENGTH} characters", field="word"
            )
        for name in ("reading", "meaning"):
            value = getattr(self, name)
            if value is not None and len(value) > MAX_FIELD_LENGTH:
                raise ValidationError(
                    f"{name} cannot exceed {MAX_FIELD_LENGTH} characters", field=name
                )

    @classmethod
    def create(
        cls,
        user_id: UserId,
        kanji_id: KanjiId,
        word: str,
        reading: str | None = None,
        meaning: str | None = None,
        word_type: str | None = None,
        jlpt_level: str | None = None,
    ) -> "CustomWord":
        """Create a new custom word (ID will be 0 until persisted)."""
        return cls(
            id=CustomWordId.generate(),
            user_id=user_id,
            kanji_id=kanji_id,
            word=word.strip(),
            reading=reading.strip() if reading else None,
            meaning=meaning.strip() if meaning else None,
            word_type=word_type,
            jlpt_level=jlpt_level,
        )

    @classmethod
    def create_with_id(
        cls,
        id: CustomWordId,
        user_id: UserId,
        kanji_id: KanjiId,
        word: str,
        reading: str | None,
        meaning: str | None,
        word_type: str | None,
        jlpt_level: str | None,
        created_at: datetime,
    ) -> "CustomWord":
        """Reconstitute a custom word from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            kanji_id=kanji_id,
            word=word,
            reading=reading,
            meaning=meaning,
            word_type=word_type,
            jlpt_level=jlpt_level,
            created_at=created_at,
        )
