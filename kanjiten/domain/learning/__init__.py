"""
Learning bounded context - Domain layer.

This context handles a learner's study state:
- Per-kanji spaced-repetition progress
- Daily review streaks
- Custom example words per kanji

Entities:
- KanjiProgress: one record per (user, kanji)
- StreakState: one per user
- CustomWord: learner-authored vocabulary
"""
