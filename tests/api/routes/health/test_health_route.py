"""Testes dos endpoints de health."""

from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from app.app import create_app
from app.domain.alert_event import AlertEvent
from app.services.health_monitor import HealthMonitor, HealthMonitorSettings
from config.settings import get_alert_settings, get_openai_settings


class FakeProbe:
    def __init__(self, reply: str = "ok", error: Exception | None = None) -> None:
        self._reply = reply
        self._error = error

    async def ping(self) -> str:
        if self._error is not None:
            raise self._error
        return self._reply


class FakeAlertSink:
    def __init__(self) -> None:
        self.events: list[AlertEvent] = []

    async def send(self, event: AlertEvent) -> None:
        self.events.append(event)


class OverloadedError(Exception):
    status_code = 529


def _client(probe: FakeProbe, sink: FakeAlertSink, *, api_configured: bool = True) -> TestClient:
    app = create_app()
    app.state.health_monitor = HealthMonitor(
        settings=HealthMonitorSettings(api_configured=api_configured),
        probe=probe,
        alert_sink=sink,
    )
    return TestClient(app)


def test_liveness_does_not_need_monitor() -> None:
    response = TestClient(create_app()).get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["service"] == "sigblock-parser"


def test_api_health_healthy() -> None:
    sink = FakeAlertSink()

    response = _client(FakeProbe(), sink).get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"] == {"api_configured": True, "api_accessible": True}
    assert "response_time_ms" in body
    assert response.headers["X-Response-Time"].endswith("ms")
    assert response.headers["Cache-Control"] == "no-store, no-cache, must-revalidate"
    assert sink.events == []


def test_api_health_not_configured() -> None:
    sink = FakeAlertSink()

    response = _client(FakeProbe(), sink, api_configured=False).get("/api/health")

    assert response.status_code == 503
    assert response.json()["checks"]["error"] == "OPENAI_API_KEY not configured"
    assert len(sink.events) == 1


def test_api_health_overloaded_does_not_alert() -> None:
    sink = FakeAlertSink()

    response = _client(FakeProbe(error=OverloadedError("Overloaded")), sink).get("/api/health")

    assert response.status_code == 503
    assert response.json()["checks"]["error"] == "API temporarily overloaded"
    assert response.json()["checks"]["api_accessible"] is False
    assert sink.events == []


def test_correlation_id_is_echoed() -> None:
    response = TestClient(create_app()).get("/health", headers={"X-Correlation-ID": "corr-1"})
    assert response.headers["X-Correlation-ID"] == "corr-1"


def test_correlation_id_is_generated_when_missing() -> None:
    response = TestClient(create_app()).get("/health")
    assert response.headers["X-Correlation-ID"]


@pytest.fixture
def production_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[pytest.MonkeyPatch]:
    monkeypatch.setenv("ENVIRONMENT", "production")
    get_openai_settings.cache_clear()
    get_alert_settings.cache_clear()
    yield monkeypatch
    get_openai_settings.cache_clear()
    get_alert_settings.cache_clear()


def test_production_boot_without_key_reports_and_alerts(
    production_env: pytest.MonkeyPatch,
) -> None:
    production_env.delenv("OPENAI_API_KEY", raising=False)
    production_env.setenv("ALERT_EMAIL_ENDPOINT", "https://alerts.example.com/hook")
    send = AsyncMock()
    production_env.setattr("app.infra.alerts.http_alert_sink.HttpAlertSink.send", send)

    with TestClient(create_app()) as client:
        response = client.get("/api/health")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"
    assert response.json()["checks"]["error"] == "OPENAI_API_KEY not configured"
    send.assert_awaited_once()
    assert send.await_args.args[0].error == "OPENAI_API_KEY not configured"


def test_production_boot_without_alert_endpoint_serves_liveness(
    production_env: pytest.MonkeyPatch,
) -> None:
    production_env.setenv("OPENAI_API_KEY", "sk-test")
    production_env.delenv("ALERT_EMAIL_ENDPOINT", raising=False)

    with TestClient(create_app()) as client:
        response = client.get("/health")

    assert response.status_code == 200
