"""Tests for application-level endpoints and error envelopes."""

from fastapi import status
from fastapi.testclient import TestClient
from helpers import TEST_USER_ID, bearer, make_token


class TestRoot:
    def test_root(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["message"].startswith("Welcome to ")


class TestHealth:
    """Test suite for GET /health endpoint."""

    def test_health_reports_database(self, client: TestClient) -> None:
        response = client.get("/api/health")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["status"] == "ok"
        assert data["database"] == "connected"
        assert data["environment"] == "test"
        assert "timestamp" in data

    def test_health_is_public(self, client: TestClient) -> None:
        assert client.get("/api/health").status_code == status.HTTP_200_OK


class TestVerifyToken:
    """Test suite for GET /auth/verify endpoint."""

    def test_valid_token(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.get("/api/auth/verify", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["success"] is True
        assert data["valid"] is True
        assert data["user"]["id"] == TEST_USER_ID
        assert data["user"]["username"] == "hanako"
        assert data["user"]["email"] == "hanako@example.com"
        assert data["user"]["isAnonymous"] is False

    def test_guest_user_is_anonymous(self, client: TestClient) -> None:
        headers = bearer(make_token(username="guest_4821"))

        response = client.get("/api/auth/verify", headers=headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["user"]["isAnonymous"] is True

    def test_missing_token(self, client: TestClient) -> None:
        response = client.get("/api/auth/verify")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"success": False, "error": "No token provided"}

    def test_malformed_token(self, client: TestClient) -> None:
        response = client.get("/api/auth/verify", headers=bearer("not-a-jwt"))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["success"] is False

    def test_overlong_user_id_rejected(self, client: TestClient) -> None:
        response = client.get("/api/auth/verify", headers=bearer(make_token(user_id="u" * 65)))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestErrorEnvelope:
    def test_unknown_route(self, client: TestClient) -> None:
        response = client.get("/api/does-not-exist")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"success": False, "error": "Not Found"}

    def test_malformed_json_is_client_error(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/progress/update",
            content=b"{not json",
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"].startswith("Invalid request")
