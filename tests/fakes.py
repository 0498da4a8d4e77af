"""In-memory implementations of the repository and unit-of-work ports."""

import copy
from collections.abc import Callable, Mapping, Sequence
from datetime import UTC, datetime
from typing import Any

from kanjiten.application.common.unit_of_work import UnitOfWork
from kanjiten.domain.common.value_objects import CustomWordId, KanjiId, UserId
from kanjiten.domain.learning.entities.custom_word import CustomWord
from kanjiten.domain.learning.entities.kanji_progress import KanjiProgress
from kanjiten.domain.learning.entities.streak import StreakState
from kanjiten.domain.settings.entities.user_settings import UserSettings
from kanjiten.exceptions import StorageError


class _SnapshotStore:
    rows: dict[Any, Any]

    def snapshot(self) -> dict[Any, Any]:
        return copy.deepcopy(self.rows)

    def restore(self, snapshot: dict[Any, Any]) -> None:
        self.rows = snapshot


class FakeUnitOfWork(UnitOfWork):
    """Transaction over in-memory stores: entering takes a snapshot, rollback restores it."""

    def __init__(self, *stores: _SnapshotStore, fail_on_commit: bool = False) -> None:
        self.stores = stores
        self.fail_on_commit = fail_on_commit
        self.commits = 0
        self.rollbacks = 0
        self._snapshots: list[dict[Any, Any]] = []

    def __enter__(self) -> "FakeUnitOfWork":
        self._snapshots = [store.snapshot() for store in self.stores]
        return self

    def commit(self) -> None:
        if self.fail_on_commit:
            self.rollback()
            raise StorageError
        self.commits += 1
        self._snapshots = [store.snapshot() for store in self.stores]

    def rollback(self) -> None:
        self.rollbacks += 1
        for store, snapshot in zip(self.stores, self._snapshots, strict=True):
            store.restore(copy.deepcopy(snapshot))


class InMemoryProgressRepository(_SnapshotStore):
    def __init__(self, fail_after: int | None = None) -> None:
        self.rows: dict[tuple[str, int], KanjiProgress] = {}
        self.fail_after = fail_after

    def find_all_by_user(self, user_id: UserId) -> list[KanjiProgress]:
        return sorted(
            (r for (uid, _), r in self.rows.items() if uid == user_id.value),
            key=lambda r: r.kanji_id.value,
        )

    def upsert(self, record: KanjiProgress) -> None:
        self.upsert_many([record])

    def upsert_many(self, records: Sequence[KanjiProgress]) -> None:
        for written, record in enumerate(records):
            if self.fail_after is not None and written >= self.fail_after:
                raise StorageError("connection lost")
            stored = copy.deepcopy(record)
            stored.updated_at = datetime.now(UTC)
            self.rows[(record.user_id.value, record.kanji_id.value)] = stored


class InMemoryStreakRepository(_SnapshotStore):
    """
    Streak store with compare-and-set semantics.

    ``before_write`` callbacks run (one per call) right before the
    conditional check, to play the part of a concurrent writer.
    """

    def __init__(self) -> None:
        self.rows: dict[str, StreakState] = {}
        self.before_write: list[Callable[[], None]] = []
        self.write_attempts = 0

    def find_by_user(self, user_id: UserId) -> StreakState | None:
        return copy.deepcopy(self.rows.get(user_id.value))

    def compare_and_set(self, expected: StreakState, new_state: StreakState) -> bool:
        self.write_attempts += 1
        if self.before_write:
            self.before_write.pop(0)()

        stored = self.rows.get(expected.user_id.value)
        stored_key = (stored.daily_streak, stored.last_review_date) if stored else (0, None)
        if stored_key != (expected.daily_streak, expected.last_review_date):
            return False

        self.rows[expected.user_id.value] = new_state
        return True


class InMemorySettingsRepository(_SnapshotStore):
    def __init__(self) -> None:
        self.rows: dict[str, UserSettings] = {}
        self.merge_calls = 0

    def find_by_user(self, user_id: UserId) -> UserSettings | None:
        return copy.deepcopy(self.rows.get(user_id.value))

    def merge(self, user_id: UserId, changes: Mapping[str, object]) -> None:
        self.merge_calls += 1
        record = self.rows.get(user_id.value) or UserSettings(id=user_id)
        for name, value in changes.items():
            setattr(record, name, value)
        record.updated_at = datetime.now(UTC)
        self.rows[user_id.value] = record


class InMemoryCustomWordRepository(_SnapshotStore):
    def __init__(self) -> None:
        self.rows: dict[int, CustomWord] = {}
        self._next_id = 1
        self.calls: list[str] = []

    def lock_kanji(self, kanji_id: KanjiId, user_id: UserId) -> None:
        self.calls.append(f"lock:{user_id.value}:{kanji_id.value}")

    def find_by_kanji(self, kanji_id: KanjiId, user_id: UserId) -> list[CustomWord]:
        return [w for w in self.rows.values() if w.kanji_id == kanji_id and w.user_id == user_id]

    def count_by_kanji(self, kanji_id: KanjiId, user_id: UserId) -> int:
        self.calls.append(f"count:{user_id.value}:{kanji_id.value}")
        return len(self.find_by_kanji(kanji_id, user_id))

    def add(self, word: CustomWord) -> CustomWord:
        stored = copy.deepcopy(word)
        stored.id = CustomWordId(self._next_id)
        stored.created_at = datetime.now(UTC)
        self._next_id += 1
        self.rows[stored.id.value] = stored
        return stored

    def delete(self, word_id: CustomWordId, user_id: UserId) -> bool:
        word = self.rows.get(word_id.value)
        if word is None or word.user_id != user_id:
            return False
        del self.rows[word_id.value]
        return True
