"""Testes para config/settings (base e calendário escolar)."""

import pytest

from app.bootstrap import validate_runtime_settings
from config.settings import (
    DEFAULT_SCHOOL_SCHEDULE_URL,
    SchoolCalendarSettings,
    get_base_settings,
    get_school_calendar_settings,
)


class TestSchoolCalendarSettings:
    """Testes para SchoolCalendarSettings."""

    def test_default_values(self) -> None:
        """Valida valores padrão do crawler."""
        settings = SchoolCalendarSettings()

        assert settings.schedule_url == DEFAULT_SCHOOL_SCHEDULE_URL
        assert settings.request_method == "POST"
        assert settings.request_timeout_seconds == 15.0
        assert settings.cache_ttl_seconds == 21600
        assert settings.coalesce_inflight is True
        assert settings.port == 4100
        assert settings.validate() == []

    def test_immutable(self) -> None:
        settings = SchoolCalendarSettings()

        with pytest.raises(AttributeError):
            settings.port = 8080  # type: ignore[misc]

    @pytest.mark.parametrize(
        "url",
        ["", "   ", "https://<학교도메인>/schdulmanage/yearSchdul.do"],
    )
    def test_placeholder_or_empty_url_is_not_configured(self, url: str) -> None:
        settings = SchoolCalendarSettings(schedule_url=url)

        assert settings.is_configured is False
        assert "SCHOOL_SCHEDULE_URL nao configurado" in settings.validate()

    def test_invalid_numbers_are_reported(self) -> None:
        settings = SchoolCalendarSettings(request_timeout_seconds=0, cache_ttl_seconds=-1)

        errors = settings.validate()

        assert len(errors) == 2

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCHOOL_SCHEDULE_URL", "https://example.ac.kr/yearSchdul.do")
        monkeypatch.setenv("SCHOOL_SCHEDULE_METHOD", "get")
        monkeypatch.setenv("SCHOOL_SCHEDULE_TIMEOUT_SECONDS", "2.5")
        monkeypatch.setenv("SCHOOL_EVENTS_CACHE_TTL_SECONDS", "60")
        monkeypatch.setenv("SCHOOL_EVENTS_COALESCE_INFLIGHT", "false")
        monkeypatch.setenv("PORT", "9000")

        settings = get_school_calendar_settings()

        assert settings.schedule_url == "https://example.ac.kr/yearSchdul.do"
        assert settings.request_method == "GET"
        assert settings.request_timeout_seconds == 2.5
        assert settings.cache_ttl_seconds == 60
        assert settings.coalesce_inflight is False
        assert settings.port == 9000

    def test_unknown_method_falls_back_to_post(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SCHOOL_SCHEDULE_METHOD", "PUT")

        assert get_school_calendar_settings().request_method == "POST"


class TestBaseSettings:
    """Testes para BaseSettings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("stage", "staging"), ("qualquer", "development")],
    )
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert get_base_settings().environment == expected


class TestValidateRuntimeSettings:
    """Validação de startup."""

    def test_development_only_warns(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("SCHOOL_SCHEDULE_URL", "")

        validate_runtime_settings()

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("SCHOOL_SCHEDULE_URL", "https://<학교도메인>/yearSchdul.do")

        with pytest.raises(RuntimeError, match="school_calendar"):
            validate_runtime_settings()

    def test_production_with_valid_settings_boots(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")

        validate_runtime_settings()
