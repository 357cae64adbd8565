"""Serviços do módulo AI."""

from ai.services.signature_extractor import SignatureExtractorService

__all__ = ["SignatureExtractorService"]
