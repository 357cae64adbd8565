"""Settings de alertas operacionais e identificação da aplicação.

O health check dispara alertas para um endpoint HTTP externo
(ex: webhook que encaminha e-mail ao operador).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class AlertSettings:
    """Configurações de alertas.

    Attributes:
        endpoint: URL que recebe o payload de alerta (ALERT_EMAIL_ENDPOINT)
        timeout_seconds: Timeout do POST de alerta
        app_name: Nome da aplicação exibido no alerta
        app_url: URL pública da aplicação (origem do alerta)
        app_version: Versão reportada no health check
    """

    endpoint: str = ""
    timeout_seconds: float = 10.0
    app_name: str = "SigBlock Parser"
    app_url: str = "http://localhost:8080"
    app_version: str = "1.0.0"

    @property
    def enabled(self) -> bool:
        return bool(self.endpoint)

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.endpoint and not self.endpoint.startswith(("http://", "https://")):
            errors.append("ALERT_EMAIL_ENDPOINT deve ser URL http(s)")

        if self.timeout_seconds <= 0:
            errors.append("ALERT_TIMEOUT_SECONDS deve ser > 0")

        return errors

    def warnings(self) -> list[str]:
        if not self.endpoint:
            return ["ALERT_EMAIL_ENDPOINT não configurado (alertas serão apenas logados)"]
        return []


def _load_alert_settings_from_env() -> AlertSettings:
    return AlertSettings(
        endpoint=os.getenv("ALERT_EMAIL_ENDPOINT", ""),
        timeout_seconds=float(os.getenv("ALERT_TIMEOUT_SECONDS", "10")),
        app_name=os.getenv("APP_NAME", "SigBlock Parser"),
        app_url=os.getenv("APP_URL", "http://localhost:8080"),
        app_version=os.getenv("APP_VERSION", "1.0.0"),
    )


@lru_cache(maxsize=1)
def get_alert_settings() -> AlertSettings:
    """Retorna instância cacheada de AlertSettings."""
    return _load_alert_settings_from_env()
