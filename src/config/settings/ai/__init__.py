"""Agregador de settings de AI/LLM.

Re-exporta todas as settings de IA para uso externo.
"""

from __future__ import annotations

from config.settings.ai.openai import (
    API_KEY_ENV_NAME,
    OpenAISettings,
    get_openai_settings,
)

__all__ = [
    "API_KEY_ENV_NAME",
    "OpenAISettings",
    "get_openai_settings",
]
