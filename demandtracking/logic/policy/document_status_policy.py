"""
===============================================================================
Document Status Policy – envelope status of letters and their recipients
-------------------------------------------------------------------------------
Purpose:
    Classify one recipient, one document, and the richer list-view progress
    status. Statuses are recomputed from dates on every call; nothing is
    stored, so nothing can go stale.

Decisions implemented:
    - Recipient: no dispatch date -> NOT_SENT; dispatch + answer -> ANSWERED;
      dispatch only -> PENDING.
    - Document without a status in its field visibility -> NO_STATUS.
    - Circular letter with several recipients: PENDING beats NOT_SENT beats
      ANSWERED. A single recipient behaves like a plain letter.
===============================================================================
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional, Tuple

from demandtracking.models.document import Document
from demandtracking.models.document_status import DocumentStatus, ProgressStatus
from demandtracking.models.document_subject import FORWARDING_SUBJECTS, LetterSubject, is_other
from demandtracking.models.document_type import DocumentType
from demandtracking.models.recipient import Recipient
from .field_visibility_policy import resolve_visible_fields

logger = logging.getLogger(__name__)


def classify_envelope(dispatched_on: Optional[date], answered_on: Optional[date]) -> DocumentStatus:
    """Three-state classification shared by recipients and plain letters."""
    if dispatched_on is None:
        return DocumentStatus.NOT_SENT
    if answered_on is not None:
        return DocumentStatus.ANSWERED
    return DocumentStatus.PENDING


def resolve_recipient_status(recipient: Recipient) -> DocumentStatus:
    return classify_envelope(recipient.dispatched_on, recipient.answered_on)


def aggregate_recipient_statuses(statuses: Iterable[DocumentStatus]) -> DocumentStatus:
    """
    Any PENDING -> PENDING; else any NOT_SENT -> NOT_SENT; else ANSWERED.
    An empty input is NOT_SENT (nothing went out).
    """
    seen = set(statuses)
    if not seen:
        return DocumentStatus.NOT_SENT
    if DocumentStatus.PENDING in seen:
        return DocumentStatus.PENDING
    if DocumentStatus.NOT_SENT in seen:
        return DocumentStatus.NOT_SENT
    return DocumentStatus.ANSWERED


def resolve_document_status(document: Document) -> DocumentStatus:
    """
    Return the status of *document*.

    NO_STATUS means callers must not render a status indicator.
    """
    visible = resolve_visible_fields(document)
    if not visible.exposes_status:
        return DocumentStatus.NO_STATUS

    if document.has_individual_recipients():
        status = aggregate_recipient_statuses(
            resolve_recipient_status(r) for r in document.recipients
        )
        logger.debug("Document %s: %d recipients -> %s", document.id, len(document.recipients), status.value)
        return status

    return classify_envelope(document.dispatched_on, document.answered_on)


def resolve_recipient_statuses(document: Document) -> List[Tuple[Recipient, DocumentStatus]]:
    """(recipient, status) pairs in recipient order; empty for non-circular documents."""
    if not document.is_circular:
        return []
    return [(r, resolve_recipient_status(r)) for r in document.recipients]


# --------------------------------------------------------------------------- #
#  Progress status (list views / filters)                                     #
# --------------------------------------------------------------------------- #

def is_forwarding_letter(document: Document) -> bool:
    """
    True for letters that only forward material or notices; no answer is
    expected from their recipient.
    """
    if not document.doc_type.is_letter:
        return False
    if is_other(document.subject):
        return True
    if document.doc_type != DocumentType.OFFICIAL_LETTER or document.subject is None:
        return False
    return document.subject in FORWARDING_SUBJECTS or document.subject == LetterSubject.NON_COMPLIANCE_NOTICE


def resolve_progress_status(document: Document) -> ProgressStatus:
    """
    Richer status used by list views.

    Letters:   NOT_SENT without dispatch; FORWARDED for forwarding letters;
               circular letters with recipients ANSWERED only if all answered;
               else the raw 'responded' flag.
    Reports, records: FINALIZED once a finalization date exists, else IN_PRODUCTION.
    Media, judicial decisions: NO_STATUS.
    """
    doc_type = document.doc_type
    if doc_type.is_production:
        return ProgressStatus.FINALIZED if document.is_finalized() else ProgressStatus.IN_PRODUCTION
    if not doc_type.is_letter:
        return ProgressStatus.NO_STATUS

    if document.dispatched_on is None and not any(r.dispatched_on for r in document.recipients):
        return ProgressStatus.NOT_SENT
    if is_forwarding_letter(document):
        return ProgressStatus.FORWARDED
    if document.is_circular and document.recipients:
        if all(r.responded for r in document.recipients):
            return ProgressStatus.ANSWERED
        return ProgressStatus.PENDING
    return ProgressStatus.ANSWERED if document.responded else ProgressStatus.PENDING


_STATUS_COLORS: Dict[ProgressStatus, str] = {
    ProgressStatus.NOT_SENT: "#6C757D",
    ProgressStatus.PENDING: "#FF6B35",
    ProgressStatus.ANSWERED: "#007BFF",
    ProgressStatus.FORWARDED: "#007BFF",
    ProgressStatus.IN_PRODUCTION: "#6C757D",
    ProgressStatus.FINALIZED: "#007BFF",
    ProgressStatus.NO_STATUS: "#6C757D",
}

_DEFAULT_COLOR = "#6C757D"


def status_color(status: ProgressStatus | DocumentStatus | str) -> str:
    """Hex colour of a status indicator; unknown statuses are grey."""
    value = getattr(status, "value", status)
    for progress, color in _STATUS_COLORS.items():
        if progress.value == value:
            return color
    return _DEFAULT_COLOR


_ALL_FILTERABLE: Tuple[ProgressStatus, ...] = (
    ProgressStatus.NOT_SENT,
    ProgressStatus.PENDING,
    ProgressStatus.ANSWERED,
    ProgressStatus.FORWARDED,
    ProgressStatus.IN_PRODUCTION,
    ProgressStatus.FINALIZED,
)


def available_statuses(doc_type: Optional[DocumentType] = None) -> Tuple[ProgressStatus, ...]:
    """Statuses a list filter offers for *doc_type* (all when None)."""
    if doc_type is None:
        return _ALL_FILTERABLE
    if doc_type.is_letter:
        return (
            ProgressStatus.NOT_SENT,
            ProgressStatus.PENDING,
            ProgressStatus.ANSWERED,
            ProgressStatus.FORWARDED,
        )
    if doc_type.is_production:
        return (ProgressStatus.IN_PRODUCTION, ProgressStatus.FINALIZED)
    return ()


def has_status(document: Document) -> bool:
    """False for documents that never show up in status filters."""
    return resolve_progress_status(document) != ProgressStatus.NO_STATUS
