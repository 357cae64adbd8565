"""Filter de logging que injeta contexto da requisição.

Campos injetados em todo record:
- correlation_id: ID de rastreamento da requisição HTTP
- service: nome do serviço (ex: sigblock_parser)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable


class CorrelationIdFilter(logging.Filter):
    """Enriquece records com correlation_id e service.

    Args:
        service_name: Nome do serviço.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Sem getter, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        # correlation_id explícito via `extra` tem precedência
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True
