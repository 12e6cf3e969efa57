"""
===============================================================================
Document Status View – view-facing bundle of resolved values
-------------------------------------------------------------------------------
Purpose:
    One serializable structure with everything a document row or update form
    needs: which fields to show, which sections apply and which status
    indicator to paint. Produced by DocumentStatusService; holds no logic.
===============================================================================
"""
from __future__ import annotations
from dataclasses import dataclass, field

from demandtracking.models.document_status import DocumentStatus, ProgressStatus
from demandtracking.models.field_visibility import (
    FieldVisibilitySet,
    SectionVisibility,
    UpdateKind,
)


@dataclass(slots=True)
class DocumentStatusView:
    """
    Fields
    ------
    update_kind : UpdateKind
        Which update form the document gets.
    visible_fields : FieldVisibilitySet
        Data fields relevant to the document.
    sections : SectionVisibility
        Intake sections that apply to the document's (type, subject).
    status : DocumentStatus
        Envelope status; NO_STATUS means no indicator.
    progress : ProgressStatus
        List-view status.
    color : str
        Hex colour of the progress indicator.
    """
    update_kind: UpdateKind = UpdateKind.UNRECOGNIZED
    visible_fields: FieldVisibilitySet = field(default_factory=FieldVisibilitySet)
    sections: SectionVisibility = field(default_factory=SectionVisibility)
    status: DocumentStatus = DocumentStatus.NO_STATUS
    progress: ProgressStatus = ProgressStatus.NO_STATUS
    color: str = "#6C757D"
