"""Exceções de fronteira para falhas do serviço externo de extração."""

from __future__ import annotations


class UpstreamError(RuntimeError):
    """Base para falhas ao falar com a capacidade de extração (LLM).

    Args:
        message: Descrição legível da falha (sem PII).
        status_code: Status HTTP devolvido pelo upstream, quando houver.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamUnavailableError(UpstreamError):
    """Rede, timeout ou 5xx do upstream."""


class UpstreamRejectedError(UpstreamError):
    """Upstream recusou a chamada (autenticação, quota, rate limit, 4xx)."""


class MalformedResponseError(UpstreamError):
    """Resposta do upstream não decodifica como objeto JSON."""
