"""Settings de OpenAI.

Configurações para integração com OpenAI API (extração de assinaturas
e probe de saúde).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

API_KEY_ENV_NAME = "OPENAI_API_KEY"


@dataclass(frozen=True)
class OpenAISettings:
    """Configurações do OpenAI.

    Attributes:
        api_key: Chave da API OpenAI
        model: Modelo usado na extração de assinaturas
        health_model: Modelo mais barato usado no probe de saúde
        timeout_seconds: Timeout para chamadas à API
        max_tokens: Limite de tokens da resposta de extração
    """

    api_key: str = ""
    model: str = "gpt-4o"
    health_model: str = "gpt-4o-mini"
    timeout_seconds: float = 30.0
    max_tokens: int = 2048

    @property
    def api_key_env_name(self) -> str:
        return API_KEY_ENV_NAME

    def validate(self) -> list[str]:
        """Valida configurações do OpenAI.

        Returns:
            Lista de erros de validação (valores inválidos).
        """
        errors: list[str] = []

        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")

        if self.max_tokens <= 0:
            errors.append("OPENAI_MAX_TOKENS deve ser > 0")

        return errors

    def warnings(self) -> list[str]:
        """Ausências toleradas no boot; o health check reporta e alerta."""
        if not self.api_key:
            return [f"{API_KEY_ENV_NAME} não configurado (health check reportará unhealthy)"]
        return []


def _load_openai_from_env() -> OpenAISettings:
    """Carrega OpenAISettings de variáveis de ambiente."""
    return OpenAISettings(
        api_key=os.getenv(API_KEY_ENV_NAME, ""),
        model=os.getenv("OPENAI_MODEL", "gpt-4o"),
        health_model=os.getenv("OPENAI_HEALTH_MODEL", "gpt-4o-mini"),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        max_tokens=int(os.getenv("OPENAI_MAX_TOKENS", "2048")),
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
