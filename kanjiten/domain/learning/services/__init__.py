"""Learning context domain services."""

from .streak_calculator import StreakCalculator, StreakDecision, StreakTransition

__all__ = [
    "StreakCalculator",
    "StreakDecision",
    "StreakTransition",
]
