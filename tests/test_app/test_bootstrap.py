"""Testes do composition root (factories e validação de settings)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from ai.services.signature_extractor import SignatureExtractorService
from app.bootstrap import (
    create_health_monitor,
    create_signature_extractor_service,
    validate_runtime_settings,
)
from app.services.health_monitor import HealthMonitor
from config.settings import get_alert_settings, get_openai_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_openai_settings.cache_clear()
    get_alert_settings.cache_clear()
    yield
    get_openai_settings.cache_clear()
    get_alert_settings.cache_clear()


def test_factories_build_services(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")

    assert isinstance(create_signature_extractor_service(), SignatureExtractorService)
    assert isinstance(create_health_monitor(), HealthMonitor)


@pytest.mark.asyncio
async def test_health_monitor_reads_missing_key_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("ALERT_EMAIL_ENDPOINT", raising=False)

    outcome = await create_health_monitor().check()

    assert outcome.status_code == 503
    assert outcome.report.checks.error == "OPENAI_API_KEY not configured"


def test_validation_is_lenient_in_development(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "development")
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "0")

    with caplog.at_level(logging.WARNING):
        validate_runtime_settings()

    assert "settings_validation_failed" in caplog.text


def test_validation_is_strict_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("OPENAI_TIMEOUT_SECONDS", "0")

    with pytest.raises(RuntimeError, match="OPENAI_TIMEOUT_SECONDS"):
        validate_runtime_settings()


def test_validation_passes_with_full_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("ALERT_EMAIL_ENDPOINT", "https://alerts.example.com/hook")

    validate_runtime_settings()


def test_missing_key_and_endpoint_only_warn_in_production(
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("ALERT_EMAIL_ENDPOINT", raising=False)

    with caplog.at_level(logging.WARNING):
        validate_runtime_settings()

    assert "settings_incomplete" in caplog.text
    assert "settings_validation_failed" not in caplog.text


def test_non_http_alert_endpoint_fails_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("ALERT_EMAIL_ENDPOINT", "mailto:ops@example.com")

    with pytest.raises(RuntimeError, match="ALERT_EMAIL_ENDPOINT"):
        validate_runtime_settings()
