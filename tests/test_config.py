"""Tests for forecast_table.core.config — environment overrides."""

from __future__ import annotations

import logging

from forecast_table.core.config import DEFAULT_BACKEND_API_URL, Settings
from forecast_table.i18n import DEFAULT_LOCALE, translate


class TestSettings:
    def test_defaults(self, monkeypatch) -> None:
        for key in Settings.__dataclass_fields__:
            monkeypatch.delenv(key, raising=False)
        s = Settings()
        assert s.BACKEND_API_URL == DEFAULT_BACKEND_API_URL
        assert s.LOCALE == "uk"
        assert s.ICON_BASE == "img"
        assert s.REQUEST_TIMEOUT == 30.0
        assert s.CORS_ORIGINS == ["*"]

    def test_env_overrides_with_coercion(self, monkeypatch) -> None:
        monkeypatch.setenv("BACKEND_API_URL", "http://localhost:5001/api/weather")
        monkeypatch.setenv("REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("PORT", "9000")
        monkeypatch.setenv("DEBUG", "yes")
        monkeypatch.setenv("CORS_ORIGINS", "http://a.test,http://b.test")
        s = Settings()
        assert s.BACKEND_API_URL == "http://localhost:5001/api/weather"
        assert s.REQUEST_TIMEOUT == 2.5
        assert s.PORT == 9000
        assert s.DEBUG is True
        assert s.CORS_ORIGINS == ["http://a.test", "http://b.test"]

    def test_false_values(self, monkeypatch) -> None:
        monkeypatch.setenv("DEBUG", "off")
        assert Settings().DEBUG is False

    def test_known_locale_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("LOCALE", "en")
        assert Settings().LOCALE == "en"

    def test_unknown_locale_falls_back_to_default(self, monkeypatch, caplog) -> None:
        monkeypatch.setenv("LOCALE", "fr")
        with caplog.at_level(logging.WARNING, logger="forecast_table.core.config"):
            s = Settings()
        assert s.LOCALE == DEFAULT_LOCALE
        assert "Unknown LOCALE 'fr'" in caplog.text
        assert translate("errors.empty_city", s.LOCALE) == (
            "Назва міста не може бути порожньою"
        )
