"""
===============================================================================
Document subjects – one closed vocabulary per document type
-------------------------------------------------------------------------------
Official Letter            -> LetterSubject
Circular Official Letter   -> CircularLetterSubject
Technical/Intelligence Rep -> ReportSubject
Circumstantial Record      -> RecordSubject
Media, Judicial Decision   -> no subject

A subject enum member can only be attached to the types whose vocabulary
contains it; ``subjects_for`` is the single source of that mapping.
===============================================================================
"""
from __future__ import annotations
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple, Type, Union

from .document_type import DocumentType, normalize_label

OTHER_LABEL = "Other"


class LetterSubject(str, Enum):
    NON_COMPLIANCE_NOTICE = "Non-Compliance Notice"
    FORWARDING_RECORDS = "Forwarding of Circumstantial Records"
    FORWARDING_JUDICIAL_DECISION = "Forwarding of Judicial Decision"
    FORWARDING_MEDIA = "Forwarding of Media"
    FORWARDING_INTELLIGENCE_REPORT = "Forwarding of Intelligence Report"
    FORWARDING_TECHNICAL_REPORT = "Forwarding of Technical Report"
    FORWARDING_TECHNICAL_REPORT_AND_MEDIA = "Forwarding of Technical Report and Media"
    REQUEST_REGISTRATION_DATA = "Request for Registration Data"
    REQUEST_REGISTRATION_DATA_AND_PRESERVATION = "Request for Registration Data and Data Preservation"
    SOLICITATION_REGISTRATION_DATA = "Solicitation of Registration Data"
    OTHER = OTHER_LABEL


class CircularLetterSubject(str, Enum):
    FORWARDING_JUDICIAL_DECISION = "Forwarding of Judicial Decision"
    REQUEST_REGISTRATION_DATA = "Request for Registration Data"
    REQUEST_REGISTRATION_DATA_AND_PRESERVATION = "Request for Registration Data and Data Preservation"
    SOLICITATION_REGISTRATION_DATA = "Solicitation of Registration Data"
    OTHER = OTHER_LABEL


class ReportSubject(str, Enum):
    EVIDENCE_ANALYSIS = "Evidence Analysis"
    VULNERABILITY_ANALYSIS = "Vulnerability Analysis"
    EVIDENCE_COMPILATION = "Evidence Compilation"
    EVIDENCE_COMPILATION_AND_ANALYSIS = "Evidence Compilation and Analysis"
    CYBER_INVESTIGATION = "Cyber Investigation"
    REGISTRATION_DATA_SURVEY = "Registration Data Survey"
    DATA_PRESERVATION = "Data Preservation"
    OTHER = OTHER_LABEL


class RecordSubject(str, Enum):
    CONTROLLED_VIRTUAL_ACTIONS = "Controlled Virtual Actions"
    OTHER = OTHER_LABEL


Subject = Union[LetterSubject, CircularLetterSubject, ReportSubject, RecordSubject]

_VOCABULARY: Dict[DocumentType, Optional[Type[Enum]]] = {
    DocumentType.OFFICIAL_LETTER: LetterSubject,
    DocumentType.CIRCULAR_LETTER: CircularLetterSubject,
    DocumentType.TECHNICAL_REPORT: ReportSubject,
    DocumentType.INTELLIGENCE_REPORT: ReportSubject,
    DocumentType.CIRCUMSTANTIAL_RECORD: RecordSubject,
    DocumentType.MEDIA: None,
    DocumentType.JUDICIAL_DECISION: None,
}

# Official Letter subjects that only forward material; no answer is expected.
FORWARDING_SUBJECTS: FrozenSet[LetterSubject] = frozenset({
    LetterSubject.FORWARDING_RECORDS,
    LetterSubject.FORWARDING_MEDIA,
    LetterSubject.FORWARDING_INTELLIGENCE_REPORT,
    LetterSubject.FORWARDING_TECHNICAL_REPORT,
    LetterSubject.FORWARDING_TECHNICAL_REPORT_AND_MEDIA,
})

# Subjects asking a provider for registration data (intake "research" section).
REGISTRATION_DATA_LABELS: FrozenSet[str] = frozenset({
    LetterSubject.REQUEST_REGISTRATION_DATA.value,
    LetterSubject.REQUEST_REGISTRATION_DATA_AND_PRESERVATION.value,
    LetterSubject.SOLICITATION_REGISTRATION_DATA.value,
})

_LEGACY_SUBJECT_LABELS: Dict[str, str] = {
    normalize_label(k): v for k, v in {
        "Comunicação de não cumprimento de decisão judicial": LetterSubject.NON_COMPLIANCE_NOTICE.value,
        "Encaminhamento de autos circunstanciados": LetterSubject.FORWARDING_RECORDS.value,
        "Encaminhamento de decisão judicial": LetterSubject.FORWARDING_JUDICIAL_DECISION.value,
        "Encaminhamento de mídia": LetterSubject.FORWARDING_MEDIA.value,
        "Encaminhamento de relatório de inteligência": LetterSubject.FORWARDING_INTELLIGENCE_REPORT.value,
        "Encaminhamento de relatório técnico": LetterSubject.FORWARDING_TECHNICAL_REPORT.value,
        "Encaminhamento de relatório técnico e mídia": LetterSubject.FORWARDING_TECHNICAL_REPORT_AND_MEDIA.value,
        "Requisição de dados cadastrais": LetterSubject.REQUEST_REGISTRATION_DATA.value,
        "Requisição de dados cadastrais e preservação de dados": LetterSubject.REQUEST_REGISTRATION_DATA_AND_PRESERVATION.value,
        "Solicitação de dados cadastrais": LetterSubject.SOLICITATION_REGISTRATION_DATA.value,
        "Análise de evidências": ReportSubject.EVIDENCE_ANALYSIS.value,
        "Análise de vulnerabilidade": ReportSubject.VULNERABILITY_ANALYSIS.value,
        "Compilação de evidências": ReportSubject.EVIDENCE_COMPILATION.value,
        "Compilação e análise de evidências": ReportSubject.EVIDENCE_COMPILATION_AND_ANALYSIS.value,
        "Investigação Cibernética": ReportSubject.CYBER_INVESTIGATION.value,
        "Levantamentos de dados cadastrais": ReportSubject.REGISTRATION_DATA_SURVEY.value,
        "Preservação de dados": ReportSubject.DATA_PRESERVATION.value,
        "Ações Virtuais Controladas": RecordSubject.CONTROLLED_VIRTUAL_ACTIONS.value,
        "Outros": OTHER_LABEL,
    }.items()
}


def subjects_for(doc_type: DocumentType) -> Tuple[Subject, ...]:
    """Vocabulary of valid subjects for *doc_type* (empty for Media/Judicial Decision)."""
    enum_cls = _VOCABULARY.get(doc_type)
    if enum_cls is None:
        return ()
    return tuple(enum_cls)  # type: ignore[return-value]


def is_valid_subject(doc_type: DocumentType, subject: Optional[Subject]) -> bool:
    """
    True if *subject* may be attached to *doc_type*.

    ``None`` (no/unrecognised subject) is always representable; the resolvers
    apply their documented fallbacks to it.
    """
    if subject is None:
        return True
    enum_cls = _VOCABULARY.get(doc_type)
    return enum_cls is not None and isinstance(subject, enum_cls)


def is_other(subject: Optional[Subject]) -> bool:
    return subject is not None and subject.value == OTHER_LABEL


def subject_from_label(doc_type: DocumentType, text: str | None) -> Optional[Subject]:
    """
    Resolve an English or legacy Portuguese subject label within the
    vocabulary of *doc_type*. Unknown labels (or types without subjects)
    return None.
    """
    enum_cls = _VOCABULARY.get(doc_type)
    key = normalize_label(text)
    if enum_cls is None or not key:
        return None
    english = _LEGACY_SUBJECT_LABELS.get(key)
    for member in enum_cls:
        label = normalize_label(member.value)
        if key == label or key == member.name.casefold() or (english and normalize_label(english) == label):
            return member  # type: ignore[return-value]
    return None
