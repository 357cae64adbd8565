"""Protocolo para cliente da capacidade de extração (LLM)."""

from __future__ import annotations

from typing import Protocol


class SignatureExtractorClientProtocol(Protocol):
    """Contrato para clientes LLM de extração de assinaturas.

    Implementações devolvem o texto bruto da resposta e sinalizam falhas
    com UpstreamUnavailableError ou UpstreamRejectedError (utils.errors).
    Sem retry: uma falha vira erro classificado imediatamente.
    """

    async def complete(self, *, prompt: str) -> str:
        """Envia o prompt e retorna o texto da resposta (pode vir cercado)."""
        ...
