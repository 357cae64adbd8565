"""Modelos/DTOs da extração de assinaturas."""

from ai.models.signature_extraction import (
    ExtractionErrorKind,
    NormalizedContact,
    SignatureExtractionResult,
)

__all__ = [
    "ExtractionErrorKind",
    "NormalizedContact",
    "SignatureExtractionResult",
]
