"""Protocol for CustomWord repository in learning context."""

from typing import Protocol

from kanjiten.domain.common.value_objects.ids import CustomWordId, KanjiId, UserId
from kanjiten.domain.learning.entities.custom_word import CustomWord


class CustomWordRepositoryProtocol(Protocol):
    def find_by_kanji(self, kanji_id: KanjiId, user_id: UserId) -> list[CustomWord]: ...

    def lock_kanji(self, kanji_id: KanjiId, user_id: UserId) -> None: ...

    def count_by_kanji(self, kanji_id: KanjiId, user_id: UserId) -> int: ...

    def add(self, word: CustomWord) -> CustomWord: ...

    def delete(self, word_id: CustomWordId, user_id: UserId) -> bool: ...
