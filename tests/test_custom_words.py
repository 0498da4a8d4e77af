"""Tests for custom word API endpoints."""

from fastapi import status
from fastapi.testclient import TestClient


def _add_word(
    client: TestClient, headers: dict[str, str], kanji_id: int = 7, word: str = "日本"
) -> dict:
    response = client.post(
        "/api/custom-words",
        json={
            "kanjiId": kanji_id,
            "word": word,
            "reading": "にほん",
            "meaning": "Japan",
            "wordType": "noun",
            "jlptLevel": "N5",
        },
        headers=headers,
    )
    assert response.status_code == status.HTTP_200_OK, response.text
    return response.json()["word"]


class TestAddCustomWord:
    """Test suite for POST /custom-words endpoint."""

    def test_add_and_list(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        created = _add_word(client, auth_headers)

        assert created["id"] > 0
        assert created["kanjiId"] == 7
        assert created["word"] == "日本"
        assert created["wordType"] == "noun"
        assert created["jlptLevel"] == "N5"
        assert created["createdAt"] is not None

        response = client.get("/api/custom-words/7", headers=auth_headers)
        assert response.status_code == status.HTTP_200_OK
        words = response.json()["words"]
        assert [w["id"] for w in words] == [created["id"]]

    def test_list_keeps_insertion_order(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        ids = [_add_word(client, auth_headers, word=w)["id"] for w in ("一", "二", "三")]

        words = client.get("/api/custom-words/7", headers=auth_headers).json()["words"]
        assert [w["id"] for w in words] == ids

    def test_limit_per_kanji(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        for word in ("一", "二", "三"):
            _add_word(client, auth_headers, word=word)

        response = client.post(
            "/api/custom-words", json={"kanjiId": 7, "word": "四"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "success": False,
            "error": "Maximum 3 custom words per kanji",
        }
        assert len(client.get("/api/custom-words/7", headers=auth_headers).json()["words"]) == 3

    def test_limit_is_per_kanji(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        for word in ("一", "二", "三"):
            _add_word(client, auth_headers, word=word)

        created = _add_word(client, auth_headers, kanji_id=8, word="四")

        assert created["kanjiId"] == 8

    def test_limit_is_per_user(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_user_headers: dict[str, str],
    ) -> None:
        for word in ("一", "二", "三"):
            _add_word(client, auth_headers, word=word)

        _add_word(client, other_user_headers, word="四")

        assert client.get("/api/custom-words/7", headers=other_user_headers).json()["words"][0][
            "word"
        ] == "四"

    def test_empty_word_rejected(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        response = client.post(
            "/api/custom-words", json={"kanjiId": 7, "word": ""}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["success"] is False

    def test_requires_authentication(self, client: TestClient) -> None:
        response = client.post("/api/custom-words", json={"kanjiId": 7, "word": "日"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class TestDeleteCustomWord:
    """Test suite for DELETE /custom-words/{word_id} endpoint."""

    def test_delete_own_word(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        created = _add_word(client, auth_headers)

        response = client.delete(f"/api/custom-words/{created['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["success"] is True
        assert client.get("/api/custom-words/7", headers=auth_headers).json()["words"] == []

    def test_delete_twice_is_not_found(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        created = _add_word(client, auth_headers)
        client.delete(f"/api/custom-words/{created['id']}", headers=auth_headers)

        response = client.delete(f"/api/custom-words/{created['id']}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["success"] is False

    def test_cannot_delete_other_users_word(
        self,
        client: TestClient,
        auth_headers: dict[str, str],
        other_user_headers: dict[str, str],
    ) -> None:
        created = _add_word(client, auth_headers)

        response = client.delete(f"/api/custom-words/{created['id']}", headers=other_user_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        words = client.get("/api/custom-words/7", headers=auth_headers).json()["words"]
        assert len(words) == 1

    def test_delete_frees_a_slot(self, client: TestClient, auth_headers: dict[str, str]) -> None:
        first = _add_word(client, auth_headers, word="一")
        for word in ("二", "三"):
            _add_word(client, auth_headers, word=word)

        client.delete(f"/api/custom-words/{first['id']}", headers=auth_headers)

        assert _add_word(client, auth_headers, word="四")["word"] == "四"

    def test_delete_id_beyond_column_range(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.delete(f"/api/custom-words/{2**40}", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestKanjiIdRange:
    def test_list_rejects_kanji_id_beyond_column_range(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.get(f"/api/custom-words/{2**40}", headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_add_rejects_kanji_id_beyond_column_range(
        self, client: TestClient, auth_headers: dict[str, str]
    ) -> None:
        response = client.post(
            "/api/custom-words", json={"kanjiId": 2**40, "word": "日"}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
