"""
===============================================================================
Status Services – compose policies into caller-facing answers
-------------------------------------------------------------------------------
Purpose:
    Look documents and demands up by id and apply the pure policies to the
    snapshot. Nothing is cached; every call re-reads the repositories so the
    answer always reflects the host's current data.

Design:
    - Pure read side: fetch once, then apply policies.
    - A missing id is not an error: the caller gets None or an empty result
      and the lookup is logged at DEBUG.

Inputs:
    - DocumentRepository (read)
    - DemandRepository (read)
===============================================================================
"""
from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from demandtracking.logic.policy.demand_status_policy import demand_status_color, resolve_demand_status
from demandtracking.logic.policy.document_status_policy import (
    resolve_document_status,
    resolve_progress_status,
    resolve_recipient_statuses,
    status_color,
)
from demandtracking.logic.policy.field_visibility_policy import (
    resolve_sections,
    resolve_update_kind,
    resolve_visible_fields,
)
from demandtracking.logic.policy.forwarding_policy import ValidationResult, validate_forwarding_selection
from demandtracking.logic.policy.rectification_policy import resolve_version_chain
from demandtracking.logic.repository.demand_repository import DemandRepository
from demandtracking.logic.repository.document_repository import DocumentRepository
from demandtracking.logic.viewstate.document_status_view import DocumentStatusView
from demandtracking.models.demand import Demand
from demandtracking.models.demand_status import DemandStatus
from demandtracking.models.document import Document
from demandtracking.models.document_status import DocumentStatus
from demandtracking.models.field_visibility import FieldVisibilitySet
from demandtracking.models.ids import DemandId, DocumentId
from demandtracking.models.recipient import Recipient
from demandtracking.models.rectification import VersionEntry

logger = logging.getLogger(__name__)


class DocumentStatusService:
    """
    Per-document answers: visible fields, statuses, version chain and
    forwarding validation.
    """

    def __init__(self, documents: DocumentRepository) -> None:
        self._docs = documents

    def _load(self, doc_id: DocumentId) -> Optional[Document]:
        doc = self._docs.get_by_id(doc_id)
        if doc is None:
            logger.debug("Document %s not found", doc_id)
        return doc

    def visible_fields(self, doc_id: DocumentId) -> Optional[FieldVisibilitySet]:
        doc = self._load(doc_id)
        return resolve_visible_fields(doc) if doc else None

    def status(self, doc_id: DocumentId) -> Optional[DocumentStatus]:
        doc = self._load(doc_id)
        return resolve_document_status(doc) if doc else None

    def recipient_statuses(self, doc_id: DocumentId) -> List[Tuple[Recipient, DocumentStatus]]:
        doc = self._load(doc_id)
        return resolve_recipient_statuses(doc) if doc else []

    def version_chain(self, doc_id: DocumentId) -> Tuple[VersionEntry, ...]:
        doc = self._load(doc_id)
        return resolve_version_chain(doc) if doc else ()

    def validate_forwarding(
        self,
        doc_id: DocumentId,
        selection: Optional[Iterable[DocumentId]] = None,
    ) -> ValidationResult:
        """
        Validate what *doc_id* forwards. An unknown letter has nothing to
        forward and is reported as valid.
        """
        doc = self._load(doc_id)
        if doc is None:
            return ValidationResult(ok=True)
        return validate_forwarding_selection(doc, selection, self._docs.get_by_id)

    def view(self, doc_id: DocumentId) -> Optional[DocumentStatusView]:
        """Everything a row or update form needs, resolved in one go."""
        doc = self._load(doc_id)
        if doc is None:
            return None
        progress = resolve_progress_status(doc)
        return DocumentStatusView(
            update_kind=resolve_update_kind(doc),
            visible_fields=resolve_visible_fields(doc),
            sections=resolve_sections(doc.doc_type, doc.subject),
            status=resolve_document_status(doc),
            progress=progress,
            color=status_color(progress),
        )


class DemandStatusService:
    """Roll-up of demand statuses from the documents currently on record."""

    def __init__(self, demands: DemandRepository, documents: DocumentRepository) -> None:
        self._demands = demands
        self._docs = documents

    def _compute(self, demand: Demand) -> DemandStatus:
        return resolve_demand_status(demand, self._docs.list_by_demand(demand.id))

    def status(self, demand_id: DemandId) -> Optional[DemandStatus]:
        demand = self._demands.get_by_id(demand_id)
        if demand is None:
            logger.debug("Demand %s not found", demand_id)
            return None
        return self._compute(demand)

    def color(self, demand_id: DemandId) -> Optional[str]:
        """Badge colour of the computed status; None for an unknown demand."""
        status = self.status(demand_id)
        return demand_status_color(status) if status else None

    def statuses(self) -> Dict[DemandId, DemandStatus]:
        """Computed status of every demand, keyed by id."""
        return {demand.id: self._compute(demand) for demand in self._demands.list_all()}

    def stale(self) -> List[Tuple[Demand, DemandStatus]]:
        """
        Demands whose stored status differs from the computed one, paired
        with the status they should have.
        """
        result: List[Tuple[Demand, DemandStatus]] = []
        for demand in self._demands.list_all():
            computed = self._compute(demand)
            if demand.status != computed:
                logger.info(
                    "Demand %s stored as %s, computed %s",
                    demand.id,
                    demand.status.value if demand.status else None,
                    computed.value,
                )
                result.append((demand, computed))
        return result
