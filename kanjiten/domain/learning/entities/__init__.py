"""Learning context entities."""

from .custom_word import CustomWord
from .kanji_progress import KanjiProgress
from .streak import StreakState

__all__ = [
    "CustomWord",
    "KanjiProgress",
    "StreakState",
]
