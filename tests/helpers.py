"""Helpers shared by the API tests."""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt

TEST_SECRET_KEY = "test-secret-key-with-at-least-32-bytes!"
TEST_USER_ID = "8f14e45f-ceea-467f-a0e6-1b5e8e3f0c11"
OTHER_USER_ID = "c9f0f895-fb98-4b91-9a3e-2d4f6b1a7e22"
TEST_USERNAME = "hanako"


def make_token(
    user_id: str = TEST_USER_ID,
    username: str | None = TEST_USERNAME,
    secret: str = TEST_SECRET_KEY,
    expires_in: timedelta = timedelta(hours=1),
    metadata: bool = True,
    **claims: Any,
) -> str:
    """Mint an access token the way the identity provider does."""
    payload: dict[str, Any] = {
        "sub": user_id,
        "aud": "authenticated",
        "exp": datetime.now(UTC) + expires_in,
        "email": f"{username or 'anon'}@example.com",
    }
    if username is not None and metadata:
        payload["user_metadata"] = {"username": username}
    elif username is not None:
        payload["username"] = username
    payload.update(claims)
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
