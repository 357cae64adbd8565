"""Bootstrap da aplicação - inicialização e wiring.

Composition root: configura logging, valida settings e conecta
implementações concretas (OpenAI, httpx) aos serviços.

Uso:
    from app.bootstrap import initialize_app

    initialize_app()
"""

from __future__ import annotations

import logging
import os

from app.bootstrap.dependencies import (
    create_health_monitor,
    create_signature_extractor_service,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_alert_settings, get_openai_settings

SERVICE_NAME = "sigblock_parser"

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Valores inválidos: em `staging`/`production` falha rápido; em
    `development`/`test` apenas loga. Ausências (API key, endpoint de
    alerta) só geram warning: o app sobe e o health check reporta.
    """
    environment = os.getenv("ENVIRONMENT", "development").lower()
    strict_mode = environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"openai: {error}" for error in get_openai_settings().validate())
    errors.extend(f"alerts: {error}" for error in get_alert_settings().validate())

    warnings = [f"openai: {warning}" for warning in get_openai_settings().warnings()]
    warnings.extend(f"alerts: {warning}" for warning in get_alert_settings().warnings())
    if warnings:
        logger.warning(
            "settings_incomplete",
            extra={"component": "bootstrap", "environment": environment, "warnings": warnings},
        )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "SERVICE_NAME",
    "create_health_monitor",
    "create_signature_extractor_service",
    "initialize_app",
    "validate_runtime_settings",
]
