"""Probe mínimo da OpenAI para o health check.

Chamada mais barata possível (modelo leve, max_tokens=10). Exceções do
SDK sobem intactas: a classificação é do HealthMonitor.
"""

from __future__ import annotations

from openai import AsyncOpenAI

from app.infra.ai.signature_extractor_client import create_async_openai
from config.settings.ai.openai import OpenAISettings

PROBE_PROMPT = "ok"
PROBE_MAX_TOKENS = 10


class OpenAIHealthProbe:
    """Implementa CapabilityProbe sobre o SDK OpenAI."""

    __slots__ = ("_client", "_model")

    def __init__(
        self,
        *,
        settings: OpenAISettings,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._model = settings.health_model
        self._client = client or create_async_openai(settings)

    async def ping(self) -> str:
        """Retorna o texto da resposta ("" quando a API responde vazio)."""
        response = await self._client.chat.completions.create(
            model=self._model,
            max_tokens=PROBE_MAX_TOKENS,
            messages=[{"role": "user", "content": PROBE_PROMPT}],
        )
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
