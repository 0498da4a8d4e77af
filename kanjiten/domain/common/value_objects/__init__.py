"""Common value objects shared across all domain modules."""

from .ids import CustomWordId, KanjiId, ProgressKey, UserId

__all__ = [
    "CustomWordId",
    "KanjiId",
    "ProgressKey",
    "UserId",
]
