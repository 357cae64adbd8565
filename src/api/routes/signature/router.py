"""Endpoints de parsing de assinatura e exportação vCard.

Camada fina: lê o body, delega ao SignatureExtractorService (em
app.state) ou ao serializador vCard e traduz o resultado em HTTP.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any
from urllib.parse import quote

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ai.models.signature_extraction import ExtractionErrorKind, NormalizedContact
from app.domain.contact_vcard import build_vcard, vcard_filename

logger = logging.getLogger(__name__)

router = APIRouter()

PARSE_FAILED_ERROR = "Failed to parse signature"
INVALID_EXPORT_ERROR = "Invalid input: contact and originalText are required"
VCARD_MEDIA_TYPE = "text/vcard; charset=utf-8"


class VCardExportRequest(BaseModel):
    """Body do export: contato já extraído + assinatura original."""

    model_config = ConfigDict(populate_by_name=True)

    contact: NormalizedContact
    original_text: str = Field(alias="originalText")


async def _read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        return None


@router.post("/parse")
async def parse_signature(request: Request) -> JSONResponse:
    """Extrai contato de um bloco de assinatura (`{"text": "..."}`)."""
    body = await _read_json_body(request)
    text = body.get("text") if isinstance(body, dict) else None

    result = await request.app.state.signature_extractor.extract(text)

    if result.ok:
        return JSONResponse(
            content={
                "success": True,
                "contact": result.contact.to_payload(),
                "originalText": text,
            },
        )
    if result.error is ExtractionErrorKind.INVALID_INPUT:
        return JSONResponse(content={"error": result.detail}, status_code=400)
    return JSONResponse(
        content={"error": PARSE_FAILED_ERROR, "details": result.detail},
        status_code=500,
    )


@router.post("/vcard")
async def export_vcard(request: Request) -> Response:
    """Gera o arquivo .vcf do contato para download/compartilhamento."""
    body = await _read_json_body(request)
    try:
        payload = VCardExportRequest.model_validate(body)
    except ValidationError:
        return JSONResponse(content={"error": INVALID_EXPORT_ERROR}, status_code=400)

    vcard = build_vcard(payload.contact, payload.original_text, datetime.now(UTC).date())
    filename = quote(vcard_filename(payload.contact), safe="")
    logger.info(
        "vcard_exported",
        extra={"component": "vcard_export", "fields": payload.contact.present_fields()},
    )
    return Response(
        content=vcard,
        media_type=VCARD_MEDIA_TYPE,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{filename}"},
    )
