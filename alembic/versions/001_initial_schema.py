"""Create progress, streak, settings and custom word tables.

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create all tables."""
    op.create_table(
        "user_kanji_progress",
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("kanji_id", sa.Integer(), nullable=False),
        sa.Column("learned", sa.Boolean(), nullable=False),
        sa.Column("in_review", sa.Boolean(), nullable=False),
        sa.Column("srs_interval", sa.Integer(), nullable=False),
        sa.Column("ease_factor", sa.Float(), nullable=False),
        sa.Column("consecutive_correct", sa.Integer(), nullable=False),
        sa.Column("total_reviews", sa.Integer(), nullable=False),
        sa.Column("correct_reviews", sa.Integer(), nullable=False),
        sa.Column("last_review", sa.DateTime(timezone=True), nullable=True),
        sa.Column("next_review", sa.DateTime(timezone=True), nullable=True),
        sa.Column("mnemonic", sa.Text(), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("user_id", "kanji_id"),
        sa.CheckConstraint("srs_interval >= 1", name="ck_progress_interval_positive"),
        sa.CheckConstraint("ease_factor >= 1.0", name="ck_progress_ease_min"),
        sa.CheckConstraint(
            "consecutive_correct >= 0", name="ck_progress_consecutive_non_negative"
        ),
        sa.CheckConstraint("total_reviews >= 0", name="ck_progress_total_non_negative"),
        sa.CheckConstraint(
            "correct_reviews >= 0 AND correct_reviews <= total_reviews",
            name="ck_progress_correct_within_total",
        ),
    )

    op.create_table(
        "user_streaks",
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("daily_streak", sa.Integer(), nullable=False),
        sa.Column("last_review_date", sa.Date(), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("user_id"),
        sa.CheckConstraint("daily_streak >= 0", name="ck_streak_non_negative"),
    )

    op.create_table(
        "user_settings",
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("profile_name", sa.String(50), nullable=True),
        sa.Column("max_level", sa.Integer(), nullable=True),
        sa.Column("jlpt_level", sa.String(20), nullable=True),
        sa.Column("max_interval", sa.Integer(), nullable=True),
        sa.Column("show_progress", sa.Boolean(), nullable=True),
        sa.Column("show_drawing", sa.Boolean(), nullable=True),
        sa.Column("show_study_progress", sa.Boolean(), nullable=True),
        sa.Column("default_question_mode", sa.String(20), nullable=True),
        sa.Column("dark_mode", sa.Boolean(), nullable=True),
        sa.Column("language", sa.String(5), nullable=True),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("user_id"),
    )

    op.create_table(
        "user_custom_words",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("kanji_id", sa.Integer(), nullable=False),
        sa.Column("word", sa.String(100), nullable=False),
        sa.Column("reading", sa.Text(), nullable=True),
        sa.Column("meaning", sa.Text(), nullable=True),
        sa.Column("word_type", sa.String(50), nullable=True),
        sa.Column("jlpt_level", sa.String(20), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_user_custom_words_id"), "user_custom_words", ["id"], unique=False)
    op.create_index(
        "ix_user_custom_words_user_kanji",
        "user_custom_words",
        ["user_id", "kanji_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_index("ix_user_custom_words_user_kanji", table_name="user_custom_words")
    op.drop_index(op.f("ix_user_custom_words_id"), table_name="user_custom_words")
    op.drop_table("user_custom_words")
    op.drop_table("user_settings")
    op.drop_table("user_streaks")
    op.drop_table("user_kanji_progress")
