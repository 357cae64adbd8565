"""Correlation_id por requisição, propagado para os logs.

Usa ContextVar: cada request (e cada probe de saúde) tem seu próprio valor,
sem estado compartilhado entre invocações concorrentes.

Uso:
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-ID"

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual ("" se não definido)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id; gera UUID v4 quando não informado.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = correlation_id or str(uuid.uuid4())
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)
