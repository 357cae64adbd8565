"""Formatter JSON para logs estruturados.

Todo record sai com: asctime, level, logger, message, correlation_id,
service, mais os campos passados via `extra`.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Ordem estável facilita leitura no console local
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {"asctime": "2026-10-19 10:30:00,123", "level": "INFO",
         "logger": "app.services.health_monitor", "message": "health_probe_ok",
         "correlation_id": "abc-123", "service": "sigblock_parser"}
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)
    return JsonFormatter(format_string, rename_fields=FIELD_RENAME_MAP)
