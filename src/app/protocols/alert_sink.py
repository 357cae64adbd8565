"""Protocolos do health check: probe da LLM e destino de alertas."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.alert_event import AlertEvent


class AlertSinkProtocol(Protocol):
    """Contrato mínimo para despachar um alerta operacional."""

    async def send(self, event: AlertEvent) -> None: ...


class CapabilityProbeProtocol(Protocol):
    """Chamada mínima à capacidade de extração; levanta em caso de falha."""

    async def ping(self) -> str: ...
