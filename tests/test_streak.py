"""Tests for streak API endpoints."""

from collections.abc import Callable
from datetime import date, timedelta

from fastapi import status
from fastapi.testclient import TestClient
from helpers import TEST_USER_ID
from sqlalchemy.orm import Session

from kanjiten import models

TODAY = date(2026, 3, 10)


def _seed_streak(db_session: Session, daily_streak: int, last_review_date: date) -> None:
    db_session.add(
        models.UserStreak(
            user_id=TEST_USER_ID, daily_streak=daily_streak, last_review_date=last_review_date
        )
    )
    db_session.commit()


def _record_review(client: TestClient, headers: dict[str, str]) -> int:
    response = client.post("/api/streak/update", headers=headers)
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["success"] is True
    return response.json()["streak"]


class TestGetStreak:
    """Test suite for GET /streak endpoint."""

    def test_no_prior_state(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get("/api/streak", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "success": True,
            "streak": {"dailyStreak": 0, "lastReviewDate": None},
        }

    def test_returns_stored_state(
        self, client: TestClient, auth_headers: dict[str, str], db_session: Session
    ) -> None:
        _seed_streak(db_session, 6, date(2026, 3, 9))

        response = client.get("/api/streak", headers=auth_headers)

        assert response.json()["streak"] == {"dailyStreak": 6, "lastReviewDate": "2026-03-09"}

    def test_requires_token(self, client: TestClient) -> None:
        response = client.get("/api/streak")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestUpdateStreak:
    """Test suite for POST /streak/update endpoint."""

    def test_first_review_starts_at_one(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        set_today: Callable[[date], None],
    ) -> None:
        set_today(TODAY)

        assert _record_review(client, auth_headers) == 1

        response = client.get("/api/streak", headers=auth_headers)
        assert response.json()["streak"] == {"dailyStreak": 1, "lastReviewDate": "2026-03-10"}

    def test_same_day_is_idempotent(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        set_today: Callable[[date], None],
        db_session: Session,
    ) -> None:
        set_today(TODAY)

        assert _record_review(client, auth_headers) == 1
        assert _record_review(client, auth_headers) == 1
        assert _record_review(client, auth_headers) == 1

        rows = db_session.query(models.UserStreak).all()
        assert len(rows) == 1

    def test_consecutive_day_increments(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        set_today: Callable[[date], None],
        db_session: Session,
    ) -> None:
        _seed_streak(db_session, 3, TODAY - timedelta(days=1))
        set_today(TODAY)

        assert _record_review(client, auth_headers) == 4

    def test_gap_resets_to_one(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        set_today: Callable[[date], None],
        db_session: Session,
    ) -> None:
        _seed_streak(db_session, 5, TODAY - timedelta(days=3))
        set_today(TODAY)

        assert _record_review(client, auth_headers) == 1

        response = client.get("/api/streak", headers=auth_headers)
        assert response.json()["streak"]["lastReviewDate"] == "2026-03-10"

    def test_future_review_date_resets(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        set_today: Callable[[date], None],
        db_session: Session,
    ) -> None:
        _seed_streak(db_session, 8, TODAY + timedelta(days=2))
        set_today(TODAY)

        assert _record_review(client, auth_headers) == 1

    def test_streak_over_several_days(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        set_today: Callable[[date], None],
    ) -> None:
        results = []
        for offset in (0, 1, 1, 2, 4, 5):
            set_today(TODAY + timedelta(days=offset))
            results.append(_record_review(client, auth_headers))

        assert results == [1, 2, 2, 3, 1, 2]

    def test_users_do_not_share_streaks(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_user_headers: dict[str, str],
        set_today: Callable[[date], None],
    ) -> None:
        set_today(TODAY)
        _record_review(client, auth_headers)
        set_today(TODAY + timedelta(days=1))
        _record_review(client, auth_headers)

        assert _record_review(client, other_user_headers) == 1
        assert _record_review(client, auth_headers) == 2
