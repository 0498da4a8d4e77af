"""Tests for identifier value objects."""

import pytest

from kanjiten.domain.common.value_objects import CustomWordId, KanjiId, UserId
from kanjiten.domain.common.value_objects.ids import MAX_INTEGER, MAX_USER_ID_LENGTH


class TestUserId:
    def test_accepts_uuid(self) -> None:
        assert UserId("8f14e45f-ceea-467f-a0e6-1b5e8e3f0c11").value.startswith("8f14")

    @pytest.mark.parametrize("value", ["", "   ", "u" * (MAX_USER_ID_LENGTH + 1)])
    def test_rejects_invalid(self, value: str) -> None:
        with pytest.raises(ValueError):
            UserId(value)


class TestKanjiId:
    @pytest.mark.parametrize("value", [0, -3, True, "12", MAX_INTEGER + 1, 2**70])
    def test_rejects_invalid(self, value: object) -> None:
        with pytest.raises(ValueError):
            KanjiId(value)  # type: ignore[arg-type]

    def test_equality_by_value(self) -> None:
        assert KanjiId(7) == KanjiId(7)
        assert hash(KanjiId(7)) == hash(KanjiId(7))


class TestCustomWordId:
    @pytest.mark.parametrize("value", [-1, MAX_INTEGER + 1, 2**64])
    def test_rejects_out_of_range(self, value: int) -> None:
        with pytest.raises(ValueError):
            CustomWordId(value)

    def test_unsaved_id(self) -> None:
        assert CustomWordId.generate().value == 0
