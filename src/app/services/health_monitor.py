"""HealthMonitor - probe da capacidade de extração com alerta condicional.

Cada chamada a `check()` é independente: constrói um HealthReport novo,
faz no máximo uma chamada à LLM e no máximo um alerta. Sem histórico.

Regras:
- Sem API key: unhealthy, alerta sempre, nenhuma chamada à LLM.
- Resposta não vazia: healthy.
- Resposta vazia ou exceção: unhealthy com motivo classificado.
- Alerta em todo unhealthy, exceto falhas transitórias (`is_transient`).
- Falha ao alertar é logada e engolida; nunca muda o status.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel

from app.domain.alert_event import AlertEvent

if TYPE_CHECKING:
    from app.protocols.alert_sink import AlertSinkProtocol, CapabilityProbeProtocol
    from config.settings.ai.openai import OpenAISettings
    from config.settings.alerts import AlertSettings

logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_SERVICE_UNAVAILABLE = 503

# 529 = "overloaded" dos provedores de LLM; 503 = indisponível
OVERLOAD_STATUS_CODES = frozenset({503, 529})
RATE_LIMIT_STATUS_CODE = 429

INVALID_API_KEY_REASON = "Invalid API key"
RATE_LIMIT_REASON = "API rate limit exceeded"
OVERLOADED_REASON = "API temporarily overloaded"
QUOTA_REASON = "API quota or balance issue"
EMPTY_RESPONSE_REASON = "Empty response from API"
UNKNOWN_REASON = "Unknown error"


class HealthChecks(BaseModel):
    api_configured: bool = False
    api_accessible: bool | None = None
    error: str | None = None


class HealthReport(BaseModel):
    """Resposta do health check da capacidade de extração."""

    status: Literal["healthy", "unhealthy"]
    timestamp: str
    checks: HealthChecks
    app: str
    version: str
    response_time_ms: float

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True, slots=True)
class ProbeFailure:
    """Falha do probe já classificada.

    Attributes:
        reason: Motivo exibido no report e no alerta.
        message: Mensagem original da falha (vai em `details` do alerta).
        status_code: Status HTTP do upstream, quando houver.
    """

    reason: str
    message: str
    status_code: int | None = None


@dataclass(frozen=True, slots=True)
class HealthOutcome:
    report: HealthReport
    status_code: int

    @property
    def healthy(self) -> bool:
        return self.report.status == "healthy"

    @property
    def duration_ms(self) -> float:
        return self.report.response_time_ms


@dataclass(frozen=True)
class HealthMonitorSettings:
    """Configuração injetada no HealthMonitor (sem leitura de env)."""

    api_configured: bool
    api_key_env_name: str = "OPENAI_API_KEY"
    app_name: str = "SigBlock Parser"
    app_url: str = ""
    app_version: str = "1.0.0"

    @classmethod
    def from_settings(
        cls,
        openai_settings: OpenAISettings,
        alert_settings: AlertSettings,
    ) -> HealthMonitorSettings:
        return cls(
            api_configured=bool(openai_settings.api_key),
            api_key_env_name=openai_settings.api_key_env_name,
            app_name=alert_settings.app_name,
            app_url=alert_settings.app_url,
            app_version=alert_settings.app_version,
        )


def _status_code_of(exc: BaseException) -> int | None:
    for attr in ("status_code", "status"):
        value = getattr(exc, attr, None)
        if isinstance(value, int):
            return value
    return None


def classify_probe_failure(exc: BaseException) -> ProbeFailure:
    """Traduz exceção do probe em motivo legível.

    Ordem: API key > rate limit (429) > sobrecarga (503/529) >
    quota/saldo > mensagem original.
    """
    message = getattr(exc, "message", None) or str(exc) or UNKNOWN_REASON
    status_code = _status_code_of(exc)

    if "API key" in message:
        reason = INVALID_API_KEY_REASON
    elif status_code == RATE_LIMIT_STATUS_CODE:
        reason = RATE_LIMIT_REASON
    elif status_code in OVERLOAD_STATUS_CODES:
        reason = OVERLOADED_REASON
    elif "quota" in message or "balance" in message:
        reason = QUOTA_REASON
    else:
        reason = message
    return ProbeFailure(reason=reason, message=message, status_code=status_code)


def is_transient_overload(failure: ProbeFailure) -> bool:
    """Predicado padrão de supressão: apenas 503/529 não disparam alerta."""
    return failure.status_code in OVERLOAD_STATUS_CODES


class HealthMonitor:
    """Executa o probe e decide sobre o alerta."""

    def __init__(
        self,
        *,
        settings: HealthMonitorSettings,
        probe: CapabilityProbeProtocol,
        alert_sink: AlertSinkProtocol,
        is_transient: Callable[[ProbeFailure], bool] = is_transient_overload,
    ) -> None:
        self._settings = settings
        self._probe = probe
        self._alert_sink = alert_sink
        self._is_transient = is_transient

    async def check(self) -> HealthOutcome:
        started_at = time.perf_counter()
        timestamp = _utcnow_iso()

        if not self._settings.api_configured:
            error = f"{self._settings.api_key_env_name} not configured"
            logger.error("health_api_not_configured", extra={"component": "health_monitor"})
            await self._dispatch_alert(error)
            checks = HealthChecks(api_configured=False, error=error)
            return self._finish("unhealthy", timestamp, checks, started_at)

        failure = await self._probe_once()
        if failure is None:
            checks = HealthChecks(api_configured=True, api_accessible=True)
            return self._finish("healthy", timestamp, checks, started_at)

        logger.warning(
            "health_probe_failed",
            extra={
                "component": "health_monitor",
                "reason": failure.reason,
                "status_code": failure.status_code,
            },
        )
        if self._is_transient(failure):
            logger.info(
                "health_alert_suppressed",
                extra={"component": "health_monitor", "status_code": failure.status_code},
            )
        else:
            await self._dispatch_alert(failure.reason, details=failure.message)

        checks = HealthChecks(api_configured=True, api_accessible=False, error=failure.reason)
        return self._finish("unhealthy", timestamp, checks, started_at)

    async def _probe_once(self) -> ProbeFailure | None:
        try:
            reply = await self._probe.ping()
        except Exception as exc:
            return classify_probe_failure(exc)
        if not reply:
            return ProbeFailure(reason=EMPTY_RESPONSE_REASON, message=EMPTY_RESPONSE_REASON)
        return None

    async def _dispatch_alert(self, error: str, details: str | None = None) -> None:
        event = AlertEvent(
            app=self._settings.app_name,
            url=self._settings.app_url,
            error=error,
            timestamp=_utcnow_iso(),
            details=details,
        )
        try:
            await self._alert_sink.send(event)
        except Exception as exc:
            logger.error(
                "alert_dispatch_failed",
                extra={"component": "health_monitor", "error_type": type(exc).__name__},
            )

    def _finish(
        self,
        status: Literal["healthy", "unhealthy"],
        timestamp: str,
        checks: HealthChecks,
        started_at: float,
    ) -> HealthOutcome:
        duration_ms = round((time.perf_counter() - started_at) * 1000, 2)
        report = HealthReport(
            status=status,
            timestamp=timestamp,
            checks=checks,
            app=self._settings.app_name,
            version=self._settings.app_version,
            response_time_ms=duration_ms,
        )
        status_code = HTTP_OK if status == "healthy" else HTTP_SERVICE_UNAVAILABLE
        return HealthOutcome(report=report, status_code=status_code)


def _utcnow_iso() -> str:
    return datetime.now(UTC).isoformat()
