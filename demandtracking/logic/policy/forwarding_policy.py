"""
===============================================================================
Forwarding Policy – a letter may only forward finished work
-------------------------------------------------------------------------------
Every referenced Technical Report, Intelligence Report and Circumstantial
Record needs a finalization date before a letter may forward it. Media and
notices carry no such requirement. Violations are reported, never raised.
===============================================================================
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple

from demandtracking.models.document import Document
from demandtracking.models.ids import DocumentId

logger = logging.getLogger(__name__)

NOT_FINALIZED_ERROR = "Selected document has not been finalized."


@dataclass(frozen=True, slots=True)
class ValidationResult:
    ok: bool
    error: Optional[str] = None
    offending_ids: Tuple[DocumentId, ...] = ()

    def __bool__(self) -> bool:
        return self.ok


def validate_forwarding_selection(
    document: Document,
    selection: Optional[Iterable[DocumentId]],
    get_document: Callable[[DocumentId], Optional[Document]],
) -> ValidationResult:
    """
    Validate the documents *document* is about to forward.

    *selection* defaults to the references stored on *document*. Ids that
    *get_document* cannot resolve are skipped; there is nothing to check.
    """
    ids = list(selection) if selection is not None else document.selected_references()
    offending = []
    for doc_id in ids:
        target = get_document(doc_id)
        if target is None:
            logger.debug("Document %s: selected document %s not found", document.id, doc_id)
            continue
        if target.doc_type.is_production and not target.is_finalized():
            offending.append(target.id)

    if offending:
        logger.debug("Document %s: unfinished selections %s", document.id, offending)
        return ValidationResult(ok=False, error=NOT_FINALIZED_ERROR, offending_ids=tuple(offending))
    return ValidationResult(ok=True)
