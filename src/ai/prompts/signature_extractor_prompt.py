"""Prompt do extrator de assinaturas.

Pede um único objeto JSON com os campos fixos do contato e uma lista
`extraInfo` para tudo que não se encaixa neles.
"""

from __future__ import annotations

SIGNATURE_EXTRACTOR_FIELDS = (
    ("name", "full name"),
    ("firstName", "given name"),
    ("lastName", "family name"),
    ("email", "email address"),
    ("phone", "work phone"),
    ("mobile", "mobile phone"),
    ("company", "organization/company name"),
    ("title", "job title/position"),
    ("department", ""),
    ("streetAddress", "street number and name"),
    ("city", "suburb/city"),
    ("state", "state/province"),
    ("postalCode", "postcode/zip"),
    ("country", ""),
    ("website", "company website"),
    ("linkedin", "LinkedIn profile URL"),
)

SIGNATURE_EXTRACTOR_TEMPLATE = """Extract contact information from this signature block and return a JSON object.

Include these standard fields if found:
{fields}

Also include an "extraInfo" field as an array of strings for ANY information that doesn't fit the above categories (e.g., pronouns, personal notes, social media handles, nicknames, etc.)

Return ONLY valid JSON with no markdown formatting or explanation.

Signature block:
{signature}"""


def _format_fields() -> str:
    lines = []
    for field, description in SIGNATURE_EXTRACTOR_FIELDS:
        lines.append(f"- {field} ({description})" if description else f"- {field}")
    return "\n".join(lines)


def format_signature_extractor_prompt(signature: str) -> str:
    """Formata prompt de extração.

    Args:
        signature: Bloco de assinatura bruto, enviado sem truncar.
    """
    return SIGNATURE_EXTRACTOR_TEMPLATE.format(fields=_format_fields(), signature=signature)
