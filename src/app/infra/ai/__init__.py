"""Implementações concretas de IO para IA (OpenAI).

ai/ não faz IO direto; os clients ficam aqui.
"""

from app.infra.ai.health_probe_client import OpenAIHealthProbe
from app.infra.ai.signature_extractor_client import SignatureExtractorClient

__all__ = [
    "OpenAIHealthProbe",
    "SignatureExtractorClient",
]
