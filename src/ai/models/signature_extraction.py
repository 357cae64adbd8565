"""Models para extração de assinaturas de e-mail.

Define o contato normalizado devolvido pela LLM e o resultado
(sucesso ou erro classificado) da extração.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

CONTACT_STRING_FIELDS = (
    "name",
    "first_name",
    "last_name",
    "email",
    "phone",
    "mobile",
    "company",
    "title",
    "department",
    "street_address",
    "city",
    "state",
    "postal_code",
    "country",
    "website",
    "linkedin",
)


class NormalizedContact(BaseModel):
    """Contato extraído de uma assinatura.

    Todos os campos são opcionais: ausente (None) ou string não vazia.
    Nenhum formato é validado (e-mail, telefone); apenas ruído estrutural
    é removido. Aliases em camelCase seguem o contrato JSON do prompt.
    """

    model_config = ConfigDict(
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    mobile: str | None = None
    company: str | None = None
    title: str | None = None
    department: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    postal_code: str | None = None
    country: str | None = None
    website: str | None = None
    linkedin: str | None = None
    extra_info: list[str] | None = None

    @field_validator(*CONTACT_STRING_FIELDS, mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, bool):
            raise ValueError("expected string, got bool")
        if isinstance(value, int | float):
            value = str(value)
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("extra_info", mode="before")
    @classmethod
    def _normalize_extra_info(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, list):
            return value
        items = [str(item) for item in value if item is not None and str(item).strip()]
        return items or None

    def to_payload(self) -> dict[str, Any]:
        """Serializa no formato do contrato JSON (camelCase, sem ausentes)."""
        return self.model_dump(by_alias=True, exclude_none=True)

    def present_fields(self) -> list[str]:
        """Nomes (camelCase) dos campos preenchidos - seguro para logs."""
        return list(self.to_payload().keys())


class ExtractionErrorKind(str, Enum):
    """Classificação única de cada falha de extração."""

    INVALID_INPUT = "invalid_input"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    UPSTREAM_REJECTED = "upstream_rejected"
    MALFORMED_RESPONSE = "malformed_response"
    UNKNOWN = "unknown"


class SignatureExtractionResult(BaseModel):
    """Resultado da extração: contato OU erro classificado."""

    model_config = ConfigDict(extra="ignore")

    contact: NormalizedContact | None = None
    error: ExtractionErrorKind | None = None
    detail: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.contact is not None

    @classmethod
    def success(cls, contact: NormalizedContact) -> SignatureExtractionResult:
        return cls(contact=contact)

    @classmethod
    def failure(
        cls,
        error: ExtractionErrorKind,
        detail: str | None = None,
    ) -> SignatureExtractionResult:
        return cls(error=error, detail=detail)
