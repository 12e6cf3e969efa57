"""
===============================================================================
Field Visibility Policy – (type, subject) -> relevant data fields
-------------------------------------------------------------------------------
Purpose:
    Decide which fields of a document are relevant, which update form it
    gets and which intake sections apply. All computations are pure.

Rules (first match wins):
    1. Technical/Intelligence Report, Circumstantial Record -> finalization date
    2. Media                                                 -> defect flag
    3. Circular letter with more than one recipient          -> individual recipients
    4. Circular letter, subject "Other"                      -> dispatch date
    5. Letter forwarding media/reports/records               -> matching selections
    6. Letter, non-compliance notice                         -> selected notices
    7. Letter, subject "Other"                               -> dispatch date
    8. Any other recognised letter subject                   -> dispatch, response,
                                                                tracking, status
Beyond the rules:
    - Judicial Decision                                      -> version chain
    - Letter with unrecognised subject (None)                -> dispatch date
===============================================================================
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from demandtracking.models.document import Document
from demandtracking.models.document_subject import (
    REGISTRATION_DATA_LABELS,
    LetterSubject,
    Subject,
    is_other,
)
from demandtracking.models.document_type import DocumentType
from demandtracking.models.field_visibility import (
    FieldVisibilitySet,
    SectionVisibility,
    UpdateKind,
)

logger = logging.getLogger(__name__)


_FIELDS_BY_KIND: Dict[UpdateKind, FieldVisibilitySet] = {
    UpdateKind.FINALIZATION: FieldVisibilitySet(finalization_date=True),
    UpdateKind.MEDIA: FieldVisibilitySet(defect_flag=True),
    UpdateKind.CIRCULAR_LETTER: FieldVisibilitySet(individual_recipients=True),
    UpdateKind.CIRCULAR_LETTER_OTHER: FieldVisibilitySet(dispatch_date=True),
    UpdateKind.LETTER_MEDIA: FieldVisibilitySet(selected_media=True),
    UpdateKind.LETTER_TECHNICAL_REPORT: FieldVisibilitySet(selected_technical_reports=True),
    UpdateKind.LETTER_INTELLIGENCE_REPORT: FieldVisibilitySet(selected_intelligence_reports=True),
    UpdateKind.LETTER_TECHNICAL_REPORT_MEDIA: FieldVisibilitySet(
        selected_technical_reports=True, selected_media=True
    ),
    UpdateKind.LETTER_RECORDS: FieldVisibilitySet(selected_records=True),
    UpdateKind.NON_COMPLIANCE_NOTICE: FieldVisibilitySet(selected_notices=True),
    UpdateKind.LETTER_OTHER: FieldVisibilitySet(dispatch_date=True),
    UpdateKind.LETTER: FieldVisibilitySet(
        dispatch_date=True, response_date=True, tracking_code=True, status=True
    ),
    UpdateKind.JUDICIAL_DECISION: FieldVisibilitySet(version_chain=True),
    UpdateKind.UNRECOGNIZED: FieldVisibilitySet(dispatch_date=True),
}

_FORWARDING_KINDS: Dict[LetterSubject, UpdateKind] = {
    LetterSubject.FORWARDING_MEDIA: UpdateKind.LETTER_MEDIA,
    LetterSubject.FORWARDING_TECHNICAL_REPORT: UpdateKind.LETTER_TECHNICAL_REPORT,
    LetterSubject.FORWARDING_INTELLIGENCE_REPORT: UpdateKind.LETTER_INTELLIGENCE_REPORT,
    LetterSubject.FORWARDING_TECHNICAL_REPORT_AND_MEDIA: UpdateKind.LETTER_TECHNICAL_REPORT_MEDIA,
    LetterSubject.FORWARDING_RECORDS: UpdateKind.LETTER_RECORDS,
}


def classify_update_kind(
    doc_type: DocumentType,
    subject: Optional[Subject],
    *,
    recipient_count: int = 0,
) -> UpdateKind:
    """
    Map (type, subject, number of recipients) to an UpdateKind.
    Rule order is significant; see module docstring.
    """
    if doc_type.is_production:
        return UpdateKind.FINALIZATION
    if doc_type == DocumentType.MEDIA:
        return UpdateKind.MEDIA
    if doc_type == DocumentType.JUDICIAL_DECISION:
        return UpdateKind.JUDICIAL_DECISION

    if doc_type == DocumentType.CIRCULAR_LETTER:
        if recipient_count > 1:
            return UpdateKind.CIRCULAR_LETTER
        if is_other(subject):
            return UpdateKind.CIRCULAR_LETTER_OTHER
        if subject is None:
            return UpdateKind.UNRECOGNIZED
        return UpdateKind.LETTER

    # Official Letter
    if subject is None:
        return UpdateKind.UNRECOGNIZED
    forwarding = _FORWARDING_KINDS.get(subject)  # type: ignore[arg-type]
    if forwarding is not None:
        return forwarding
    if subject == LetterSubject.NON_COMPLIANCE_NOTICE:
        return UpdateKind.NON_COMPLIANCE_NOTICE
    if is_other(subject):
        return UpdateKind.LETTER_OTHER
    return UpdateKind.LETTER


def resolve_update_kind(document: Document) -> UpdateKind:
    """UpdateKind of *document*, counting its parsed recipients."""
    return classify_update_kind(
        document.doc_type,
        document.subject,
        recipient_count=len(document.recipients),
    )


def fields_for_kind(kind: UpdateKind) -> FieldVisibilitySet:
    return _FIELDS_BY_KIND[kind]


def resolve_visible_fields(document: Document) -> FieldVisibilitySet:
    """
    Return the FieldVisibilitySet of *document*.

    Only type, subject and (for circular letters) the number of recipients
    are read; payload values never change the result.
    """
    kind = resolve_update_kind(document)
    if kind == UpdateKind.UNRECOGNIZED:
        logger.debug(
            "Document %s: no rule for (%s, %r); falling back to dispatch date only",
            document.id, document.doc_type.value, document.subject_other,
        )
    return _FIELDS_BY_KIND[kind]


def resolve_sections(doc_type: DocumentType, subject: Optional[Subject]) -> SectionVisibility:
    """
    Intake form sections for a (type, subject) pair.

    Forwarding of Judicial Decision -> decision data + research data
    Registration data subjects      -> research data
    Media                           -> media data
    everything else                 -> none
    """
    if doc_type == DocumentType.MEDIA:
        return SectionVisibility(media=True)
    if not doc_type.is_letter or subject is None:
        return SectionVisibility()
    if subject.value == LetterSubject.FORWARDING_JUDICIAL_DECISION.value:
        return SectionVisibility(judicial_decision=True, research=True)
    if subject.value in REGISTRATION_DATA_LABELS:
        return SectionVisibility(research=True)
    return SectionVisibility()
