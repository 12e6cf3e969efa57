"""
===============================================================================
Field Visibility – view-facing flags for one document
-------------------------------------------------------------------------------
Purpose:
    Express which data fields of a document are relevant for its
    (type, subject). Produced by the field visibility policy, consumed by the
    status classifier and by whatever renders or edits the document.

SRP:
    - Plain immutable values; the rules live in
      demandtracking.logic.policy.field_visibility_policy.
===============================================================================
"""
from __future__ import annotations
from dataclasses import dataclass, fields
from enum import Enum
from typing import FrozenSet


@dataclass(frozen=True, slots=True)
class FieldVisibilitySet:
    """
    Fields
    ------
    dispatch_date / response_date / tracking_code : bool
        Envelope data of a letter.
    status : bool
        A Not Sent / Pending / Answered indicator applies.
    finalization_date : bool
        Reports and records are finalized, not sent.
    defect_flag : bool
        Media can be flagged as defective.
    individual_recipients : bool
        Envelope data lives on each recipient of a circular letter.
    selected_media / selected_technical_reports /
    selected_intelligence_reports / selected_records : bool
        References to the documents a letter forwards.
    selected_notices : bool
        References to the letters a non-compliance notice refers to.
    version_chain : bool
        Judicial decision with its amending decisions.
    """
    dispatch_date: bool = False
    response_date: bool = False
    tracking_code: bool = False
    status: bool = False
    finalization_date: bool = False
    defect_flag: bool = False
    individual_recipients: bool = False
    selected_media: bool = False
    selected_technical_reports: bool = False
    selected_intelligence_reports: bool = False
    selected_records: bool = False
    selected_notices: bool = False
    version_chain: bool = False

    def names(self) -> FrozenSet[str]:
        """Names of the enabled flags."""
        return frozenset(f.name for f in fields(self) if getattr(self, f.name))

    @property
    def exposes_status(self) -> bool:
        """Per-recipient status is still a status."""
        return self.status or self.individual_recipients

    def __bool__(self) -> bool:
        return bool(self.names())


@dataclass(frozen=True, slots=True)
class SectionVisibility:
    """Intake form sections that apply to a (type, subject) pair."""
    judicial_decision: bool = False
    media: bool = False
    research: bool = False


class UpdateKind(str, Enum):
    """Which update form a document gets; one per distinct field set."""
    FINALIZATION = "finalization"
    MEDIA = "media"
    LETTER = "letter"
    CIRCULAR_LETTER = "circular_letter"
    CIRCULAR_LETTER_OTHER = "circular_letter_other"
    NON_COMPLIANCE_NOTICE = "non_compliance_notice"
    LETTER_OTHER = "letter_other"
    LETTER_MEDIA = "letter_media"
    LETTER_TECHNICAL_REPORT = "letter_technical_report"
    LETTER_INTELLIGENCE_REPORT = "letter_intelligence_report"
    LETTER_TECHNICAL_REPORT_MEDIA = "letter_technical_report_media"
    LETTER_RECORDS = "letter_records"
    JUDICIAL_DECISION = "judicial_decision"
    UNRECOGNIZED = "unrecognized"
