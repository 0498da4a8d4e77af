"""Use case for kanji progress reads, single upserts and bulk reconciliation."""

from collections.abc import Mapping, Sequence
from datetime import UTC, datetime

import structlog

from kanjiten.application.common.unit_of_work import UnitOfWork
from kanjiten.application.learning.protocols.progress_repository import (
    ProgressRepositoryProtocol,
)
from kanjiten.domain.common.exceptions import DomainError
from kanjiten.domain.common.value_objects.ids import KanjiId, UserId
from kanjiten.domain.learning.entities.kanji_progress import KanjiProgress
from kanjiten.exceptions import ValidationError

logger = structlog.get_logger(__name__)

DEFAULT_MAX_BATCH_SIZE = 5000


class ProgressUseCase:
    """
    Use case for the progress record store.

    Bulk reconciliation is a last-write-wins sync protocol for an
    offline-capable client: every item in a batch fully replaces the stored
    record, items left out of the batch are not touched.
    """

    def __init__(
        self,
        progress_repository: ProgressRepositoryProtocol,
        uow: UnitOfWork,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
    ) -> None:
        """Initialize use case with repository protocol and unit of work."""
        self.progress_repository = progress_repository
        self.uow = uow
        self.max_batch_size = max_batch_size

    def get_progress(self, user_id: str) -> list[KanjiProgress]:
        """
        Get all progress records of a user.

        Args:
            user_id: ID of the user

        Returns:
            List of records, empty if the user has none
        """
        return self.progress_repository.find_all_by_user(UserId(user_id))

    def update_progress(
        self,
        user_id: str,
        kanji_id: object,
        fields: Mapping[str, object],
        reviewed_at: datetime | None = None,
    ) -> KanjiProgress:
        """
        Upsert a single progress record.

        Missing fields take their defaults. When the client does not send a
        review timestamp, ``reviewed_at`` (or the current UTC time) is stored.

        Args:
            user_id: ID of the user
            kanji_id: ID of the kanji
            fields: Progress fields keyed by their domain names
            reviewed_at: Review time used when fields has no last_reviewed_at

        Returns:
            The normalized record that was written

        Raises:
            ValidationError: If the kanji id or any field is invalid
            StorageError: If the write fails
        """
        user_id_vo = UserId(user_id)
        snapshot = dict(fields)
        if snapshot.get("last_reviewed_at") is None:
            snapshot["last_reviewed_at"] = reviewed_at or datetime.now(UTC)

        record = self._normalize(user_id_vo, kanji_id, snapshot)

        with self.uow:
            self.progress_repository.upsert(record)
            self.uow.commit()

        logger.info("progress_updated", kanji_id=record.kanji_id.value)
        return record

    def reconcile(self, user_id: str, batch: object) -> int:
        """
        Merge a client batch of progress snapshots into the store.

        This method:
        1. Checks the batch is a sequence of (kanji_id, fields) pairs
        2. Normalizes and validates every entry before touching the store
        3. Upserts all entries in submission order inside one unit of work
           (a later entry for the same kanji overwrites an earlier one)
        4. Commits once; any failure rolls back the whole batch

        Args:
            user_id: ID of the user
            batch: Sequence of (kanji_id, fields) pairs

        Returns:
            Number of entries processed, duplicates included

        Raises:
            ValidationError: If the batch or any entry is malformed
            StorageError: If the write fails (nothing is applied)
        """
        if batch is None or isinstance(batch, str | bytes) or not isinstance(batch, Sequence):
            raise ValidationError("Invalid kanji progress data")
        if len(batch) > self.max_batch_size:
            raise ValidationError(
                f"Too many progress entries: {len(batch)} (maximum {self.max_batch_size})"
            )

        user_id_vo = UserId(user_id)
        records: list[KanjiProgress] = []
        for index, entry in enumerate(batch):
            if (
                isinstance(entry, str | bytes)
                or not isinstance(entry, Sequence)
                or len(entry) != 2  # noqa: PLR2004
            ):
                raise ValidationError(f"Entry {index} must be a [kanjiId, progress] pair")
            kanji_id, fields = entry
            if not isinstance(fields, Mapping):
                raise ValidationError(f"Entry {index} progress must be an object")
            try:
                records.append(self._normalize(user_id_vo, kanji_id, fields))
            except ValidationError as e:
                raise ValidationError(f"Entry {index}: {e.message}") from e

        logger.info("reconciling_progress_batch", entry_count=len(records))

        with self.uow:
            self.progress_repository.upsert_many(records)
            self.uow.commit()

        logger.info(
            "bulk_progress_reconciled",
            entry_count=len(records),
            distinct_kanji=len({r.kanji_id for r in records}),
        )
        return len(records)

    def _normalize(
        self, user_id: UserId, kanji_id: object, fields: Mapping[str, object]
    ) -> KanjiProgress:
        """Build a full record from a snapshot, translating domain errors."""
        try:
            return KanjiProgress.from_snapshot(user_id, _parse_kanji_id(kanji_id), fields)
        except DomainError as e:
            raise ValidationError(e.message) from e


def _parse_kanji_id(raw: object) -> KanjiId:
    """Accept integer ids and their decimal string form."""
    if isinstance(raw, str) and raw.strip().isdigit():
        raw = int(raw)
    try:
        return KanjiId(raw)  # type: ignore[arg-type]
    except ValueError as e:
        raise ValidationError(f"Invalid kanji id: {raw!r}") from e
