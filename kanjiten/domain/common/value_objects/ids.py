from dataclasses import dataclass

from ..entity import EntityId
from ..value_object import ValueObject

# Identity-provider user ids are UUID strings
MAX_USER_ID_LENGTH = 64

# Integer ids and counters are stored in 32-bit signed columns
MAX_INTEGER = 2**31 - 1


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier issued by the identity provider."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value.strip():
            raise ValueError("UserId must be a non-empty string")
        if len(self.value) > MAX_USER_ID_LENGTH:
            raise ValueError(f"UserId cannot exceed {MAX_USER_ID_LENGTH} characters")


@dataclass(frozen=True)
class KanjiId(EntityId):
    """Strongly-typed kanji (learning item) identifier."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("KanjiId must be an integer")
        if self.value <= 0:
            raise ValueError("KanjiId must be positive")
        if self.value > MAX_INTEGER:
            raise ValueError(f"KanjiId cannot exceed {MAX_INTEGER}")


@dataclass(frozen=True)
class CustomWordId(EntityId):
    """Strongly-typed custom word identifier."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("CustomWordId must be an integer")
        if not 0 <= self.value <= MAX_INTEGER:
            raise ValueError(f"CustomWordId must be between 0 and {MAX_INTEGER}")

    @classmethod
    def generate(cls) -> "CustomWordId":
        return cls(0)  # Database assigns real ID


@dataclass(frozen=True)
class ProgressKey(ValueObject):
    """Natural key of a progress record: one record per (user, kanji)."""

    user_id: UserId
    kanji_id: KanjiId
