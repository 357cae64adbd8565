"""Decodificação de respostas JSON de LLM.

A LLM pode cercar o JSON com markdown (```json ... ```). A resposta é
tratada como dado não confiável: remove a cerca e decodifica, sem
tentar recuperar JSON parcial.
"""

from __future__ import annotations

import json
from typing import Any

from utils.errors import MalformedResponseError

FENCE_MARKER = "```"


def strip_markdown_fence(response: str) -> str:
    """Remove cerca markdown da resposta.

    Se a resposta começa com a marca de cerca, descarta exatamente a
    primeira e a última linha, independente do conteúdo entre elas.
    Caso contrário devolve o texto intacto.
    """
    if not response.startswith(FENCE_MARKER):
        return response
    lines = response.split("\n")
    return "\n".join(lines[1:-1])


def decode_json_object(response: str) -> dict[str, Any]:
    """Remove cerca e decodifica a resposta como objeto JSON.

    Raises:
        MalformedResponseError: JSON inválido ou valor raiz que não é objeto.
    """
    text = strip_markdown_fence(response)
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedResponseError(f"Invalid JSON in model response: {exc.msg}") from exc
    if not isinstance(data, dict):
        raise MalformedResponseError(
            f"Expected JSON object in model response, got {type(data).__name__}"
        )
    return data
