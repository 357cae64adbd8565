"""Servico do extrator de assinaturas (gateway para a LLM).

Monta prompt, chama client via protocolo, remove cerca markdown,
decodifica e valida o contato. Toda falha vira um erro classificado
no resultado; nada é relançado para o chamador.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ai.models.signature_extraction import (
    ExtractionErrorKind,
    NormalizedContact,
    SignatureExtractionResult,
)
from ai.prompts.signature_extractor_prompt import format_signature_extractor_prompt
from ai.utils._json_extractor import decode_json_object
from utils.errors import (
    MalformedResponseError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ai.core.signature_extractor_client import SignatureExtractorClientProtocol

INVALID_INPUT_DETAIL = "Invalid input: text is required"
UNKNOWN_ERROR_DETAIL = "Unknown error"


class SignatureExtractorService:
    """Gateway de extração: texto bruto -> NormalizedContact ou erro."""

    def __init__(self, client: SignatureExtractorClientProtocol) -> None:
        self._client = client

    async def extract(self, raw_text: Any) -> SignatureExtractionResult:
        """Executa extração e retorna contato validado ou erro classificado."""
        if not isinstance(raw_text, str) or not raw_text.strip():
            self._log_failure(ExtractionErrorKind.INVALID_INPUT)
            return SignatureExtractionResult.failure(
                ExtractionErrorKind.INVALID_INPUT, INVALID_INPUT_DETAIL
            )

        try:
            response = await self._client.complete(
                prompt=format_signature_extractor_prompt(raw_text),
            )
            contact = self._decode_contact(response)
        except UpstreamUnavailableError as exc:
            return self._failure(ExtractionErrorKind.UPSTREAM_UNAVAILABLE, exc)
        except UpstreamRejectedError as exc:
            return self._failure(ExtractionErrorKind.UPSTREAM_REJECTED, exc)
        except MalformedResponseError as exc:
            return self._failure(ExtractionErrorKind.MALFORMED_RESPONSE, exc)
        except Exception as exc:
            logger.exception(
                "signature_extraction_unexpected_error",
                extra={"component": "signature_extractor", "error_type": type(exc).__name__},
            )
            return SignatureExtractionResult.failure(
                ExtractionErrorKind.UNKNOWN, UNKNOWN_ERROR_DETAIL
            )

        logger.info(
            "signature_extracted",
            extra={
                "component": "signature_extractor",
                "action": "extract",
                "result": "ok",
                "extracted_fields": contact.present_fields(),
            },
        )
        return SignatureExtractionResult.success(contact)

    @staticmethod
    def _decode_contact(response: str) -> NormalizedContact:
        data = decode_json_object(response)
        try:
            return NormalizedContact.model_validate(data)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Model response does not match contact schema ({exc.error_count()} errors)"
            ) from exc

    def _failure(
        self,
        kind: ExtractionErrorKind,
        exc: Exception,
    ) -> SignatureExtractionResult:
        self._log_failure(kind, status_code=getattr(exc, "status_code", None))
        return SignatureExtractionResult.failure(kind, str(exc))

    @staticmethod
    def _log_failure(kind: ExtractionErrorKind, status_code: int | None = None) -> None:
        logger.warning(
            "signature_extraction_failed",
            extra={
                "component": "signature_extractor",
                "action": "extract",
                "result": kind.value,
                "status_code": status_code,
            },
        )
