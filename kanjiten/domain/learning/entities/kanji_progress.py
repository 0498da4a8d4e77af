"""
Per-kanji spaced-repetition state for a single learner.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime

from kanjiten.domain.common.entity import Entity
from kanjiten.domain.common.exceptions import InvariantViolationError, ValidationError
from kanjiten.domain.common.value_objects import KanjiId, ProgressKey, UserId
from kanjiten.domain.common.value_objects.ids import MAX_INTEGER

# Defaults applied to fields a client snapshot leaves out
DEFAULT_INTERVAL = 1
DEFAULT_EASE = 2.5
MIN_EASE = 1.0

# Snapshot keys understood by from_snapshot
SNAPSHOT_FIELDS = frozenset(
    {
        "learned",
        "in_review",
        "interval",
        "ease",
        "consecutive_correct",
        "total_reviews",
        "correct_reviews",
        "last_reviewed_at",
        "next_review_at",
        "note",
    }
)


@dataclass
class KanjiProgress(Entity[ProgressKey]):
    """
    Learning state for one (user, kanji) pair.

    Business Rules:
    - Exactly one record exists per (user, kanji); the pair is the identity
    - interval is at least one day
    - ease is at least 1.0
    - counters are non-negative and correct_reviews never exceeds total_reviews
    - interval and ease are supplied by the client, never computed here
    """

    id: ProgressKey
    learned: bool = False
    in_review: bool = False
    interval: int = DEFAULT_INTERVAL
    ease: float = DEFAULT_EASE
    consecutive_correct: int = 0
    total_reviews: int = 0
    correct_reviews: int = 0
    last_reviewed_at: datetime | None = None
    next_review_at: datetime | None = None
    note: str | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.interval < 1:
            raise InvariantViolationError("KanjiProgress", "interval must be at least 1 day")
        if not math.isfinite(self.ease) or self.ease < MIN_EASE:
            raise InvariantViolationError("KanjiProgress", f"ease must be at least {MIN_EASE}")
        for name in ("consecutive_correct", "total_reviews", "correct_reviews"):
            if getattr(self, name) < 0:
                raise InvariantViolationError("KanjiProgress", f"{name} cannot be negative")
        if self.correct_reviews > self.total_reviews:
            raise InvariantViolationError(
                "KanjiProgress", "correct_reviews cannot exceed total_reviews"
            )

    @property
    def user_id(self) -> UserId:
        return self.id.user_id

    @property
    def kanji_id(self) -> KanjiId:
        return self.id.kanji_id

    @classmethod
    def from_snapshot(
        cls, user_id: UserId, kanji_id: KanjiId, fields: Mapping[str, object]
    ) -> "KanjiProgress":
        """
        Normalize a client snapshot into a full record.

        Missing or null fields take their defaults (interval=1, ease=2.5,
        counters=0, optional fields null). Supplied values are type-checked
        and must satisfy the entity invariants.

        Raises:
            ValidationError: If a field has the wrong type or an unknown key is present
            InvariantViolationError: If the normalized record breaks an invariant
        """
        unknown = set(fields) - SNAPSHOT_FIELDS
        if unknown:
            raise ValidationError(
                f"Unknown progress fields: {', '.join(sorted(unknown))}", field="fields"
            )

        def pick(name: str, default: object) -> object:
            value = fields.get(name)
            return default if value is None else value

        return cls(
            id=ProgressKey(user_id=user_id, kanji_id=kanji_id),
            learned=_as_bool("learned", pick("learned", False)),
            in_review=_as_bool("in_review", pick("in_review", False)),
            interval=_as_int("interval", pick("interval", DEFAULT_INTERVAL)),
            ease=_as_float("ease", pick("ease", DEFAULT_EASE)),
            consecutive_correct=_as_int("consecutive_correct", pick("consecutive_correct", 0)),
            total_reviews=_as_int("total_reviews", pick("total_reviews", 0)),
            correct_reviews=_as_int("correct_reviews", pick("correct_reviews", 0)),
            last_reviewed_at=_as_datetime("last_reviewed_at", fields.get("last_reviewed_at")),
            next_review_at=_as_datetime("next_review_at", fields.get("next_review_at")),
            note=_as_text("note", fields.get("note")),
        )


def _as_bool(name: str, value: object) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{name} must be a boolean", field=name, value=value)
    return value


def _as_int(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{name} must be an integer", field=name, value=value)
    if value > MAX_INTEGER:
        raise ValidationError(f"{name} cannot exceed {MAX_INTEGER}", field=name, value=value)
    return value


def _as_float(name: str, value: object) -> float:
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise ValidationError(f"{name} must be a number", field=name, value=value)
    try:
        number = float(value)
    except OverflowError as e:
        raise ValidationError(f"{name} is out of range", field=name, value=value) from e
    if not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number", field=name, value=value)
    return number


def _as_datetime(name: str, value: object) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    raise ValidationError(f"{name} must be a timestamp", field=name, value=value)


def _as_text(name: str, value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{name} must be text", field=name, value=value)
    return value
