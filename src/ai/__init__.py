"""Módulo AI do SigBlock Parser.

Fronteira com a LLM de extração: prompt, contrato do client, modelos
do contato normalizado e o serviço de extração (gateway).

ai/ não faz IO direto; o client concreto fica em app/infra/ai/.
"""

from ai.core import SignatureExtractorClientProtocol
from ai.models import (
    ExtractionErrorKind,
    NormalizedContact,
    SignatureExtractionResult,
)
from ai.services import SignatureExtractorService

__all__ = [
    "ExtractionErrorKind",
    "NormalizedContact",
    "SignatureExtractionResult",
    "SignatureExtractorClientProtocol",
    "SignatureExtractorService",
]
