"""Configuração centralizada de logging.

Logging estruturado JSON para o SigBlock Parser. Campos fixos em todo
record: correlation_id, service, level, logger, message, asctime.

Uso:
    from config.logging import configure_logging, get_logger

    # No composition root (app/bootstrap/)
    configure_logging(level="INFO", service_name="sigblock_parser")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("signature_extracted", extra={"fields_count": 4})

Nunca logar o texto da assinatura nem valores de campos do contato.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

DEFAULT_SERVICE_NAME = "sigblock_parser"

# Bibliotecas HTTP logam cada request em INFO; reduzir ruído
NOISY_LOGGERS = ("httpx", "httpcore", "openai")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            da requisição atual (ContextVar de app/observability).

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    if level_upper != "DEBUG":
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (service e correlation_id vêm do filter)."""
    return logging.getLogger(name)
