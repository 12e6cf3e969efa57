"""
===============================================================================
DocumentType – closed set of document types handled by the tracking engine
-------------------------------------------------------------------------------
Types:
  Official Letter, Circular Official Letter, Media, Technical Report,
  Intelligence Report, Circumstantial Record, Judicial Decision

Host records still carry the legacy Portuguese labels ("Ofício",
"Autos Circunstanciados", ...). ``DocumentType.from_label`` accepts both.
===============================================================================
"""
from __future__ import annotations
from enum import Enum
from typing import Optional


def normalize_label(text: str | None) -> str:
    """Casefold and collapse whitespace so labels compare loosely."""
    if not text:
        return ""
    return " ".join(str(text).split()).casefold()


class DocumentType(str, Enum):
    OFFICIAL_LETTER = "Official Letter"
    CIRCULAR_LETTER = "Circular Official Letter"
    MEDIA = "Media"
    TECHNICAL_REPORT = "Technical Report"
    INTELLIGENCE_REPORT = "Intelligence Report"
    CIRCUMSTANTIAL_RECORD = "Circumstantial Record"
    JUDICIAL_DECISION = "Judicial Decision"

    @property
    def is_letter(self) -> bool:
        return self in LETTER_TYPES

    @property
    def is_production(self) -> bool:
        """Reports and records: documents produced in-house and finalized."""
        return self in PRODUCTION_TYPES

    @classmethod
    def from_label(cls, text: str | None) -> Optional["DocumentType"]:
        """
        Map an English or legacy Portuguese label to a DocumentType.

        Rules:
          - Enum values and member names match case-insensitively
          - Legacy labels ("Ofício", "Mídia", ...) via _LEGACY_LABELS
          - else None
        """
        key = normalize_label(text)
        if not key:
            return None
        for member in cls:
            if key in (normalize_label(member.value), member.name.casefold()):
                return member
        return _LEGACY_LABELS.get(key)


LETTER_TYPES = frozenset({DocumentType.OFFICIAL_LETTER, DocumentType.CIRCULAR_LETTER})

PRODUCTION_TYPES = frozenset({
    DocumentType.TECHNICAL_REPORT,
    DocumentType.INTELLIGENCE_REPORT,
    DocumentType.CIRCUMSTANTIAL_RECORD,
})

_LEGACY_LABELS = {
    normalize_label("Ofício"): DocumentType.OFFICIAL_LETTER,
    normalize_label("Oficio"): DocumentType.OFFICIAL_LETTER,
    normalize_label("Ofício Circular"): DocumentType.CIRCULAR_LETTER,
    normalize_label("Oficio Circular"): DocumentType.CIRCULAR_LETTER,
    normalize_label("Mídia"): DocumentType.MEDIA,
    normalize_label("Midia"): DocumentType.MEDIA,
    normalize_label("Relatório Técnico"): DocumentType.TECHNICAL_REPORT,
    normalize_label("Relatorio Tecnico"): DocumentType.TECHNICAL_REPORT,
    normalize_label("Relatório de Inteligência"): DocumentType.INTELLIGENCE_REPORT,
    normalize_label("Relatorio de Inteligencia"): DocumentType.INTELLIGENCE_REPORT,
    normalize_label("Autos Circunstanciados"): DocumentType.CIRCUMSTANTIAL_RECORD,
    normalize_label("Decisão Judicial"): DocumentType.JUDICIAL_DECISION,
    normalize_label("Decisao Judicial"): DocumentType.JUDICIAL_DECISION,
}
