"""Cliente OpenAI para extração de assinaturas.

Implementação de IO da capacidade de extração. Traduz exceções do SDK
para a taxonomia de utils.errors; não faz retry.
"""

from __future__ import annotations

import logging

import openai
from openai import AsyncOpenAI

from config.settings.ai.openai import OpenAISettings
from utils.errors import UpstreamRejectedError, UpstreamUnavailableError

logger = logging.getLogger(__name__)


def create_async_openai(settings: OpenAISettings) -> AsyncOpenAI:
    """Cria AsyncOpenAI sem retries internos do SDK."""
    return AsyncOpenAI(
        api_key=settings.api_key,
        timeout=settings.timeout_seconds,
        max_retries=0,
    )


class SignatureExtractorClient:
    """Cliente LLM que devolve o texto bruto da extração."""

    __slots__ = ("_client", "_max_tokens", "_model")

    def __init__(
        self,
        *,
        settings: OpenAISettings,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._model = settings.model
        self._max_tokens = settings.max_tokens
        self._client = client or create_async_openai(settings)

    async def complete(self, *, prompt: str) -> str:
        """Executa chamada OpenAI e retorna o conteúdo textual da resposta.

        Raises:
            UpstreamUnavailableError: rede, timeout ou 5xx.
            UpstreamRejectedError: autenticação, quota, rate limit ou outro 4xx.
        """
        try:
            response = await self._client.chat.completions.create(
                model=self._model,
                max_tokens=self._max_tokens,
                messages=[{"role": "user", "content": prompt}],
            )
        except openai.APIConnectionError as exc:
            logger.warning(
                "signature_extractor_openai_unreachable",
                extra={"error_type": type(exc).__name__},
            )
            raise UpstreamUnavailableError(str(exc)) from exc
        except openai.APIStatusError as exc:
            logger.warning(
                "signature_extractor_openai_error",
                extra={"error_type": type(exc).__name__, "status_code": exc.status_code},
            )
            if exc.status_code >= 500:
                raise UpstreamUnavailableError(exc.message, status_code=exc.status_code) from exc
            raise UpstreamRejectedError(exc.message, status_code=exc.status_code) from exc

        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
