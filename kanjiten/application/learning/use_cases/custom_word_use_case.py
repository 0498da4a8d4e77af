"""Use case for custom vocabulary words attached to kanji."""

import structlog

from kanjiten.application.common.unit_of_work import UnitOfWork
from kanjiten.application.learning.protocols.custom_word_repository import (
    CustomWordRepositoryProtocol,
)
from kanjiten.domain.common.value_objects.ids import CustomWordId, KanjiId, UserId
from kanjiten.domain.learning.entities.custom_word import CustomWord
from kanjiten.exceptions import CustomWordNotFoundError, ValidationError

logger = structlog.get_logger(__name__)

DEFAULT_MAX_WORDS_PER_KANJI = 3


class CustomWordUseCase:
    """Use case for custom word CRUD operations."""

    def __init__(
        self,
        custom_word_repository: CustomWordRepositoryProtocol,
        uow: UnitOfWork,
        max_words_per_kanji: int = DEFAULT_MAX_WORDS_PER_KANJI,
    ) -> None:
        """Initialize use case with repository protocol and unit of work."""
        self.custom_word_repository = custom_word_repository
        self.uow = uow
        self.max_words_per_kanji = max_words_per_kanji

    def list_words(self, user_id: str, kanji_id: int) -> list[CustomWord]:
        """Get the user's custom words for a kanji, oldest first."""
        return self.custom_word_repository.find_by_kanji(_kanji_id(kanji_id), UserId(user_id))

    def add_word(
        self,
        user_id: str,
        kanji_id: int,
        word: str,
        reading: str | None = None,
        meaning: str | None = None,
        word_type: str | None = None,
        jlpt_level: str | None = None,
    ) -> CustomWord:
        """
        Add a custom word to a kanji.

        Args:
            user_id: ID of the user
            kanji_id: ID of the kanji
            word: The word itself
            reading: Optional reading
            meaning: Optional meaning
            word_type: Optional part of speech
            jlpt_level: Optional JLPT level label

        Returns:
            Created custom word with its database ID

        Raises:
            ValidationError: If the word is invalid or the kanji already holds
                the maximum number of custom words
        """
        user_id_vo = UserId(user_id)
        kanji_id_vo = _kanji_id(kanji_id)

        word_entity = CustomWord.create(
            user_id=user_id_vo,
            kanji_id=kanji_id_vo,
            word=word,
            reading=reading,
            meaning=meaning,
            word_type=word_type,
            jlpt_level=jlpt_level,
        )

        with self.uow:
            self.custom_word_repository.lock_kanji(kanji_id_vo, user_id_vo)
            count = self.custom_word_repository.count_by_kanji(kanji_id_vo, user_id_vo)
            if count >= self.max_words_per_kanji:
                raise ValidationError(
                    f"Maximum {self.max_words_per_kanji} custom words per kanji"
                )
            saved = self.custom_word_repository.add(word_entity)
            self.uow.commit()

        logger.info("custom_word_added", kanji_id=kanji_id, word_id=saved.id.value)
        return saved

    def delete_word(self, user_id: str, word_id: int) -> None:
        """
        Delete one of the user's custom words.

        Raises:
            CustomWordNotFoundError: If the word does not exist or belongs to another user
        """
        try:
            word_id_vo = CustomWordId(word_id)
        except ValueError as e:
            raise CustomWordNotFoundError(word_id) from e

        with self.uow:
            deleted = self.custom_word_repository.delete(word_id_vo, UserId(user_id))
            if not deleted:
                raise CustomWordNotFoundError(word_id)
            self.uow.commit()

        logger.info("custom_word_deleted", word_id=word_id)


def _kanji_id(raw: int) -> KanjiId:
    try:
        return KanjiId(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid kanji id: {raw!r}") from e
