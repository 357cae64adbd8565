"""Utilitários de IA: decodificação de respostas da LLM."""

from ai.utils._json_extractor import decode_json_object, strip_markdown_fence

__all__ = [
    "decode_json_object",
    "strip_markdown_fence",
]
