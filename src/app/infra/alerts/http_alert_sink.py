"""Envio de alertas via HTTP POST (ALERT_EMAIL_ENDPOINT).

Best-effort: endpoint ausente, erro HTTP ou falha de rede são logados
e engolidos. Nunca levanta para o chamador.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from app.domain.alert_event import AlertEvent
    from config.settings.alerts import AlertSettings

logger = logging.getLogger(__name__)


class HttpAlertSink:
    """Implementa AlertSinkProtocol com httpx."""

    __slots__ = ("_endpoint", "_http_client", "_timeout_seconds")

    def __init__(
        self,
        *,
        settings: AlertSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._endpoint = settings.endpoint
        self._timeout_seconds = settings.timeout_seconds
        self._http_client = http_client

    async def send(self, event: AlertEvent) -> None:
        if not self._endpoint:
            logger.error(
                "alert_endpoint_not_configured",
                extra={"component": "alert_sink", "result": "skipped", "alert_error": event.error},
            )
            return

        try:
            response = await self._post(event.model_dump(exclude_none=True))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.error(
                "alert_dispatch_failed",
                extra={"component": "alert_sink", "error_type": type(exc).__name__},
            )
            return

        if response.is_error:
            logger.error(
                "alert_dispatch_rejected",
                extra={
                    "component": "alert_sink",
                    "status_code": response.status_code,
                    "reason": response.reason_phrase,
                },
            )
            return

        logger.info(
            "alert_dispatched",
            extra={"component": "alert_sink", "status_code": response.status_code},
        )

    async def _post(self, payload: dict[str, str]) -> httpx.Response:
        if self._http_client is not None:
            return await self._http_client.post(
                self._endpoint, json=payload, timeout=self._timeout_seconds
            )
        async with httpx.AsyncClient(timeout=self._timeout_seconds) as client:
            return await client.post(self._endpoint, json=payload)
