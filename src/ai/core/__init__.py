"""Core do módulo AI.

Exporta o protocolo do client de extração.
A implementação OpenAI está em app/infra/ai/ (IO).
"""

from ai.core.signature_extractor_client import SignatureExtractorClientProtocol

__all__ = ["SignatureExtractorClientProtocol"]
