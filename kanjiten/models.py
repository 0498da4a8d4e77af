"""Database models."""

from datetime import date, datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Float,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column

from kanjiten.database import Base

USER_ID_LENGTH = 64


class KanjiProgress(Base):
    """Spaced-repetition state of one kanji for one user."""

    __tablename__ = "user_kanji_progress"
    __table_args__ = (
        CheckConstraint("srs_interval >= 1", name="ck_progress_interval_positive"),
        CheckConstraint("ease_factor >= 1.0", name="ck_progress_ease_min"),
        CheckConstraint("consecutive_correct >= 0", name="ck_progress_consecutive_non_negative"),
        CheckConstraint("total_reviews >= 0", name="ck_progress_total_non_negative"),
        CheckConstraint(
            "correct_reviews >= 0 AND correct_reviews <= total_reviews",
            name="ck_progress_correct_within_total",
        ),
    )

    user_id: Mapped[str] = mapped_column(String(USER_ID_LENGTH), primary_key=True)
    kanji_id: Mapped[int] = mapped_column(Integer, primary_key=True)
    learned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    in_review: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    srs_interval: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    ease_factor: Mapped[float] = mapped_column(Float, nullable=False, default=2.5)
    consecutive_correct: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    correct_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_review: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    next_review: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    mnemonic: Mapped[str | None] = mapped_column(Text, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of KanjiProgress."""
        return f"<KanjiProgress(user_id='{self.user_id}', kanji_id={self.kanji_id})>"


class UserStreak(Base):
    """Daily review streak of a user."""

    __tablename__ = "user_streaks"
    __table_args__ = (
        CheckConstraint("daily_streak >= 0", name="ck_streak_non_negative"),
    )

    user_id: Mapped[str] = mapped_column(String(USER_ID_LENGTH), primary_key=True)
    daily_streak: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_review_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of UserStreak."""
        return f"<UserStreak(user_id='{self.user_id}', daily_streak={self.daily_streak})>"


class UserSettings(Base):
    """Sparse settings overrides of a user; NULL means "use the default"."""

    __tablename__ = "user_settings"

    user_id: Mapped[str] = mapped_column(String(USER_ID_LENGTH), primary_key=True)
    profile_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    max_level: Mapped[int | None] = mapped_column(Integer, nullable=True)
    jlpt_level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    max_interval: Mapped[int | None] = mapped_column(Integer, nullable=True)
    show_progress: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_drawing: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    show_study_progress: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    default_question_mode: Mapped[str | None] = mapped_column(String(20), nullable=True)
    dark_mode: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    language: Mapped[str | None] = mapped_column(String(5), nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        """String representation of UserSettings."""
        return f"<UserSettings(user_id='{self.user_id}')>"


class CustomWord(Base):
    """Vocabulary word a user attached to a kanji."""

    __tablename__ = "user_custom_words"
    __table_args__ = (Index("ix_user_custom_words_user_kanji", "user_id", "kanji_id"),)

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    user_id: Mapped[str] = mapped_column(String(USER_ID_LENGTH), nullable=False)
    kanji_id: Mapped[int] = mapped_column(Integer, nullable=False)
    word: Mapped[str] = mapped_column(String(100), nullable=False)
    reading: Mapped[str | None] = mapped_column(Text, nullable=True)
    meaning: Mapped[str | None] = mapped_column(Text, nullable=True)
    word_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    jlpt_level: Mapped[str | None] = mapped_column(String(20), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    def __repr__(self) -> str:
        """String representation of CustomWord."""
        return f"<CustomWord(id={self.id}, word='{self.word}')>"
