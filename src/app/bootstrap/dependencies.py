"""Factories de serviços - conecta settings e clientes concretos.

Único ponto que lê as settings cacheadas de ambiente; os serviços
recebem tudo por construtor.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.settings import get_alert_settings, get_openai_settings

if TYPE_CHECKING:
    from ai.services.signature_extractor import SignatureExtractorService
    from app.services.health_monitor import HealthMonitor

logger = logging.getLogger(__name__)


def create_signature_extractor_service() -> SignatureExtractorService:
    """Cria SignatureExtractorService com client OpenAI."""
    from ai.services.signature_extractor import SignatureExtractorService
    from app.infra.ai.signature_extractor_client import SignatureExtractorClient

    client = SignatureExtractorClient(settings=get_openai_settings())
    service = SignatureExtractorService(client=client)
    logger.info("signature_extractor_service_created")
    return service


def create_health_monitor() -> HealthMonitor:
    """Cria HealthMonitor com probe OpenAI e alertas via HTTP."""
    from app.infra.ai.health_probe_client import OpenAIHealthProbe
    from app.infra.alerts import HttpAlertSink
    from app.services.health_monitor import HealthMonitor, HealthMonitorSettings

    openai_settings = get_openai_settings()
    alert_settings = get_alert_settings()
    monitor = HealthMonitor(
        settings=HealthMonitorSettings.from_settings(openai_settings, alert_settings),
        probe=OpenAIHealthProbe(settings=openai_settings),
        alert_sink=HttpAlertSink(settings=alert_settings),
    )
    logger.info(
        "health_monitor_created",
        extra={"alerts_enabled": alert_settings.enabled},
    )
    return monitor
