"""Agregador de settings do SigBlock Parser.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    API_KEY_ENV_NAME,
    OpenAISettings,
    get_openai_settings,
)

# Alertas operacionais
from config.settings.alerts import (
    AlertSettings,
    get_alert_settings,
)

__all__ = [
    "API_KEY_ENV_NAME",
    "AlertSettings",
    "OpenAISettings",
    "get_alert_settings",
    "get_openai_settings",
]
