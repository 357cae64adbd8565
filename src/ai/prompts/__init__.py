"""Prompts do módulo AI.

Arquivos:
- signature_extractor_prompt.py: instrução de extração de assinatura
"""

from ai.prompts.signature_extractor_prompt import format_signature_extractor_prompt

__all__ = ["format_signature_extractor_prompt"]
