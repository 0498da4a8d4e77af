"""Pytest configuration and fixtures."""

import os

from helpers import OTHER_USER_ID, TEST_SECRET_KEY, bearer, make_token

# Settings are read once and cached, so the environment must be in place
# before the application is imported.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SECRET_KEY"] = TEST_SECRET_KEY
os.environ["JWT_AUDIENCE"] = "authenticated"
os.environ["ENVIRONMENT"] = "test"
os.environ["STREAK_TIMEZONE"] = "UTC"

from collections.abc import Callable, Generator  # noqa: E402
from datetime import date  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from kanjiten import models  # noqa: E402, F401
from kanjiten.database import Base, get_db  # noqa: E402
from kanjiten.infrastructure.common.rate_limit import limiter  # noqa: E402
from kanjiten.infrastructure.learning.dependencies import get_review_date  # noqa: E402
from kanjiten.main import app  # noqa: E402

# Test database (in-memory SQLite shared by every connection)
test_engine = create_engine(
    "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    limiter.reset()

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header for the default test user."""
    return bearer(make_token())


@pytest.fixture
def other_user_headers() -> dict[str, str]:
    """Authorization header for a second user."""
    return bearer(make_token(user_id=OTHER_USER_ID, username="taro"))


@pytest.fixture
def set_today(client: TestClient) -> Callable[[date], None]:
    """Pin the date the streak endpoints consider "today"."""

    def _set(day: date) -> None:
        app.dependency_overrides[get_review_date] = lambda: day

    return _set
