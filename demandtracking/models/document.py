from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional

from core.helpers.date_time_helper import coerce_date
from demandtracking.exceptions.errors import InvalidSubjectError, TrackingConflictError

from .ids import DemandId, DocumentId
from .document_type import DocumentType
from .document_subject import Subject, is_other, is_valid_subject
from .recipient import Recipient
from .rectification import Rectification
from .research_entry import ResearchEntry


@dataclass(slots=True)
class Document:
    """
    A document (letter, decision, media, report) attached to one Demand.

    Notes:
    - 'subject'        member of the vocabulary of 'doc_type', or None when the
                       host data carried an unrecognised subject
    - 'subject_other'  free text, only together with subject "Other" (or the
                       raw legacy text when subject is None)
    - 'recipient'      sender-side addressee string; circular letters may
                       list several names ("A, B e C")
    - 'recipients'     parsed addressees with their own envelope data
    - 'responded'      raw flag kept by the host; the demand roll-up reads it
    - 'selected_*'     ids of the documents a letter forwards or refers to
    """

    # Identity / classification
    id: DocumentId
    demand_id: DemandId
    doc_type: DocumentType
    subject: Optional[Subject] = None
    subject_other: str = ""
    number: str = ""
    year: str = ""

    # Envelope
    recipient: str = ""
    dispatched_on: Optional[date] = None
    answered_on: Optional[date] = None
    tracking_code: str = ""
    no_tracking: bool = False
    responded: bool = False
    recipients: List[Recipient] = field(default_factory=list)

    # Media payload
    media_hash: str = ""
    media_size: str = ""
    media_password: str = ""
    defective: bool = False

    # Judicial decision payload
    authority: str = ""
    court: str = ""
    signed_on: Optional[date] = None
    rectifications: List[Rectification] = field(default_factory=list)

    # Production
    finalized_on: Optional[date] = None
    research: List[ResearchEntry] = field(default_factory=list)

    # Forwarded / referenced documents
    selected_media: List[DocumentId] = field(default_factory=list)
    selected_technical_reports: List[DocumentId] = field(default_factory=list)
    selected_intelligence_reports: List[DocumentId] = field(default_factory=list)
    selected_records: List[DocumentId] = field(default_factory=list)
    selected_notices: List[DocumentId] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not is_valid_subject(self.doc_type, self.subject):
            raise InvalidSubjectError(
                f"Subject {getattr(self.subject, 'value', self.subject)!r} is not valid for {self.doc_type.value!r}"
            )
        if self.subject is not None and not is_other(self.subject) and self.subject_other:
            raise InvalidSubjectError(
                "'subject_other' may only be set when the subject is 'Other'"
            )
        self.tracking_code = (self.tracking_code or "").strip()
        if self.no_tracking and self.tracking_code:
            raise TrackingConflictError(
                f"Document {self.id} has a tracking code but is flagged as untracked"
            )
        self.dispatched_on = coerce_date(self.dispatched_on)
        self.answered_on = coerce_date(self.answered_on)
        self.signed_on = coerce_date(self.signed_on)
        self.finalized_on = coerce_date(self.finalized_on)

    # Convenience flags ------------------------------------------------------
    @property
    def is_circular(self) -> bool:
        return self.doc_type == DocumentType.CIRCULAR_LETTER

    def has_individual_recipients(self) -> bool:
        """True for circular letters addressed to more than one recipient."""
        return self.is_circular and len(self.recipients) > 1

    def is_finalized(self) -> bool:
        return self.finalized_on is not None

    def selected_references(self) -> List[DocumentId]:
        """All referenced document ids, in field order, without duplicates."""
        seen: list[DocumentId] = []
        for ids in (
            self.selected_media,
            self.selected_technical_reports,
            self.selected_intelligence_reports,
            self.selected_records,
            self.selected_notices,
        ):
            for doc_id in ids:
                if doc_id not in seen:
                    seen.append(doc_id)
        return seen
