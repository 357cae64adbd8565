"""Testes das settings carregadas de ambiente."""

from __future__ import annotations

import pytest

from config.settings.ai.openai import OpenAISettings, _load_openai_from_env
from config.settings.alerts import AlertSettings, _load_alert_settings_from_env


class TestOpenAISettings:
    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
        monkeypatch.setenv("OPENAI_MODEL", "gpt-test")
        monkeypatch.setenv("OPENAI_HEALTH_MODEL", "gpt-cheap")
        monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "12")

        settings = _load_openai_from_env()

        assert settings.api_key == "sk-test"
        assert settings.model == "gpt-test"
        assert settings.health_model == "gpt-cheap"
        assert settings.timeout_seconds == 12.0

    def test_defaults_when_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("OPENAI_API_KEY", "OPENAI_MODEL", "OPENAI_MAX_TOKENS"):
            monkeypatch.delenv(name, raising=False)

        settings = _load_openai_from_env()

        assert settings.api_key == ""
        assert settings.max_tokens == 2048
        assert settings.api_key_env_name == "OPENAI_API_KEY"

    def test_missing_key_is_a_warning_not_an_error(self) -> None:
        settings = OpenAISettings(api_key="")

        assert settings.validate() == []
        assert any("OPENAI_API_KEY" in warning for warning in settings.warnings())

    def test_validate_ok(self) -> None:
        settings = OpenAISettings(api_key="sk-test")
        assert settings.validate() == []
        assert settings.warnings() == []

    def test_validate_rejects_bad_timeout(self) -> None:
        errors = OpenAISettings(api_key="sk", timeout_seconds=0).validate()
        assert errors == ["OPENAI_TIMEOUT_SECONDS deve ser > 0"]


class TestAlertSettings:
    def test_load_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALERT_EMAIL_ENDPOINT", "https://alerts.example.com/hook")
        monkeypatch.setenv("APP_URL", "https://sigblock.example.com")

        settings = _load_alert_settings_from_env()

        assert settings.enabled is True
        assert settings.endpoint == "https://alerts.example.com/hook"
        assert settings.app_url == "https://sigblock.example.com"
        assert settings.app_name == "SigBlock Parser"

    def test_disabled_without_endpoint(self) -> None:
        settings = AlertSettings()
        assert settings.enabled is False
        assert settings.validate() == []
        assert len(settings.warnings()) == 1

    def test_validate_rejects_non_http_endpoint(self) -> None:
        errors = AlertSettings(endpoint="mailto:ops@example.com").validate()
        assert errors == ["ALERT_EMAIL_ENDPOINT deve ser URL http(s)"]
