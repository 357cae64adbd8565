"""Serialização de NormalizedContact para vCard 3.0.

Função pura: mesmo (contato, texto original, data) produz sempre o mesmo
texto. Campos ausentes são omitidos; não há caminho de erro.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ai.models.signature_extraction import NormalizedContact

VCARD_HEADER = ("BEGIN:VCARD", "VERSION:3.0")
VCARD_FOOTER = "END:VCARD"
CATEGORIES_LINE = "CATEGORIES:SigBlockParser"
NOTE_DIVIDER = "-" * 40
NOTE_ATTRIBUTION = "Parsed by SigBlock Parser"
DEFAULT_SCHEME = "https://"
DEFAULT_FILENAME = "contact"

_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


def split_full_name(name: str) -> tuple[str, str]:
    """Divide nome completo em (sobrenome, prenome).

    Último token separado por espaço em branco é o sobrenome; os anteriores,
    unidos por um espaço, são o prenome. Um único token vira só sobrenome.
    """
    parts = name.split()
    if not parts:
        return "", ""
    return parts[-1], " ".join(parts[:-1])


def ensure_scheme(url: str) -> str:
    return url if _SCHEME_RE.match(url) else f"{DEFAULT_SCHEME}{url}"


def escape_note(text: str) -> str:
    """Escapa vírgula, ponto e vírgula e quebras de linha do NOTE."""
    escaped = text.replace(",", "\\,").replace(";", "\\;")
    return _LINE_BREAK_RE.sub("\\\\n", escaped)


def _name_lines(contact: NormalizedContact) -> list[str]:
    if not contact.name:
        return []
    if not contact.first_name and not contact.last_name:
        family, given = split_full_name(contact.name)
    else:
        family, given = contact.last_name or "", contact.first_name or ""
    return [f"FN:{contact.name}", f"N:{family};{given};;;"]


def _org_lines(contact: NormalizedContact) -> list[str]:
    if not contact.company:
        return []
    if contact.department:
        return [f"ORG:{contact.company};{contact.department}"]
    return [f"ORG:{contact.company}"]


def _address_lines(contact: NormalizedContact) -> list[str]:
    parts = [
        "",
        "",
        contact.street_address or "",
        contact.city or "",
        contact.state or "",
        contact.postal_code or "",
        contact.country or "",
    ]
    if not any(parts):
        return []
    return [f"ADR;TYPE=WORK:{';'.join(parts)}"]


def _note_line(contact: NormalizedContact, original_text: str, generated_on: date) -> str:
    notes: list[str] = []
    if contact.extra_info:
        notes.append("ADDITIONAL INFORMATION:")
        notes.extend(f"• {info}" for info in contact.extra_info)
        notes.append("")
    notes.extend(
        [
            "ORIGINAL SIGNATURE:",
            NOTE_DIVIDER,
            original_text,
            NOTE_DIVIDER,
            "",
            NOTE_ATTRIBUTION,
            f"Date: {generated_on.isoformat()}",
        ]
    )
    # Escape aplicado ao bloco montado, não campo a campo
    return "NOTE:" + escape_note("\n".join(notes))


def build_vcard(
    contact: NormalizedContact,
    original_text: str,
    generated_on: date | datetime,
) -> str:
    """Gera o texto vCard do contato.

    Args:
        contact: Contato normalizado (campos ausentes são omitidos).
        original_text: Assinatura original, copiada verbatim no NOTE.
        generated_on: Data de geração; só a parte de data é usada.
    """
    if isinstance(generated_on, datetime):
        generated_on = generated_on.date()

    lines = list(VCARD_HEADER)
    lines.extend(_name_lines(contact))
    lines.extend(_org_lines(contact))

    if contact.title:
        lines.append(f"TITLE:{contact.title}")
    if contact.email:
        lines.append(f"EMAIL;TYPE=INTERNET,WORK:{contact.email}")
    if contact.phone:
        lines.append(f"TEL;TYPE=WORK,VOICE:{contact.phone}")
    if contact.mobile:
        lines.append(f"TEL;TYPE=CELL,VOICE:{contact.mobile}")

    lines.extend(_address_lines(contact))

    if contact.website:
        lines.append(f"URL;TYPE=WORK:{ensure_scheme(contact.website)}")
    if contact.linkedin:
        lines.append(f"URL;TYPE=LinkedIn:{ensure_scheme(contact.linkedin)}")

    lines.append(CATEGORIES_LINE)
    lines.append(_note_line(contact, original_text, generated_on))
    lines.append(VCARD_FOOTER)
    return "\n".join(lines)


def vcard_filename(contact: NormalizedContact) -> str:
    """Nome do arquivo .vcf para download."""
    return f"{contact.name or DEFAULT_FILENAME}.vcf"
