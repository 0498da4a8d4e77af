"""Tests for SettingsUseCase against in-memory ports."""

import pytest
from fakes import FakeUnitOfWork, InMemorySettingsRepository

from kanjiten.application.settings.use_cases.settings_use_case import SettingsUseCase
from kanjiten.domain.settings.services.settings_resolver import SettingsResolver
from kanjiten.exceptions import ValidationError

USER = "8f14e45f-ceea-467f-a0e6-1b5e8e3f0c11"


def _make_use_case() -> tuple[SettingsUseCase, InMemorySettingsRepository, FakeUnitOfWork]:
    repository = InMemorySettingsRepository()
    uow = FakeUnitOfWork(repository)
    return SettingsUseCase(repository, uow, SettingsResolver()), repository, uow


class TestSettingsUseCase:
    def test_save_merges_partial_update(self) -> None:
        use_case, repository, uow = _make_use_case()

        use_case.save_settings(USER, {"dark_mode": True})
        use_case.save_settings(USER, {"max_level": 30})

        resolved = use_case.get_settings(USER)
        assert resolved.dark_mode is True
        assert resolved.max_level == 30
        assert repository.rows[USER].language is None
        assert uow.commits == 2

    def test_invalid_value_writes_nothing(self) -> None:
        use_case, repository, uow = _make_use_case()

        with pytest.raises(ValidationError, match='Invalid language. Must be "en" or "ja"'):
            use_case.save_settings(USER, {"dark_mode": True, "language": "fr"})

        assert repository.merge_calls == 0
        assert uow.commits == 0

    def test_empty_update_is_a_no_op(self) -> None:
        use_case, repository, _ = _make_use_case()

        use_case.save_settings(USER, {})

        assert repository.merge_calls == 0

    def test_display_name_fallback(self) -> None:
        use_case, _, _ = _make_use_case()

        assert use_case.get_settings(USER, display_name_fallback="hanako").display_name == "hanako"

    def test_language_round_trip(self) -> None:
        use_case, _, _ = _make_use_case()

        assert use_case.get_language(USER) == "en"
        assert use_case.update_language(USER, "ja") == "ja"
        assert use_case.get_language(USER) == "ja"

    @pytest.mark.parametrize("language", ["fr", None, "", 3])
    def test_update_language_rejects_unsupported(self, language: object) -> None:
        use_case, repository, _ = _make_use_case()

        with pytest.raises(ValidationError):
            use_case.update_language(USER, language)

        assert repository.merge_calls == 0
