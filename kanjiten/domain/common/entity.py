"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass
    class StreakState(Entity[UserId]):
        id: UserId
        daily_streak: int
        last_review_date: date | None
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Entity IDs are value objects that wrap an integer or an opaque string
    (identity-provider user ids are UUID strings).

    Example:
        @dataclass(frozen=True)
        class KanjiId(EntityId):
            value: int

        kanji_id = KanjiId(42)
        word_id = CustomWordId(42)
        # These are different types, preventing accidental mixing
    """

    value: int | str

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and self.value <= 0:
            raise ValueError(f"{self.__class__.__name__} must be positive")

    def __int__(self) -> int:
        if isinstance(self.value, int):
            return self.value
        raise TypeError(f"Cannot convert string-based {self.__class__.__name__} to int")

    def __str__(self) -> str:
        return str(self.value)

    def to_primitive(self) -> int | str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=ValueObject)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Mutable (state can change over time)
    - Have lifecycle (created, modified)

    Subclasses must have an 'id' attribute of type IdType. The identity may
    be a composite value object (e.g. a (user, kanji) key).
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
