"""
===============================================================================
Demand Status Policy – roll-up of a demand's status from its documents
-------------------------------------------------------------------------------
Rules (top-down, first match wins):
    1. Opening and closing date present       -> FINALIZED
    2. No opening date                        -> stored status (or WAITING_QUEUE)
    3. No documents of this demand            -> WAITING_QUEUE
    4. Any document not responded             -> AWAITING
    5. Otherwise                              -> IN_PROGRESS

A reopened demand ignores its original closing date: it is FINALIZED as soon
as the new closing date is set, opening date or not; otherwise rules 2-5 apply.

The roll-up reads the raw 'responded' flag of each document and does not use
the document status classifier.
===============================================================================
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List, Optional

from demandtracking.models.demand import Demand
from demandtracking.models.demand_status import DemandStatus
from demandtracking.models.document import Document

logger = logging.getLogger(__name__)


def effective_closing_date(demand: Demand) -> Optional[date]:
    """Closing date that currently counts (the new one after a reopening)."""
    if demand.is_reopened:
        return demand.new_closed_on
    return demand.closed_on


def resolve_demand_status(demand: Demand, documents: Iterable[Document]) -> DemandStatus:
    """Compute the current status of *demand*; documents of other demands are ignored."""
    if demand.is_reopened:
        if demand.new_closed_on is not None:
            return DemandStatus.FINALIZED
    elif demand.opened_on is not None and demand.closed_on is not None:
        return DemandStatus.FINALIZED

    if demand.opened_on is None:
        return demand.status or DemandStatus.WAITING_QUEUE

    own: List[Document] = [d for d in documents if d.demand_id == demand.id]
    if not own:
        return DemandStatus.WAITING_QUEUE

    unanswered = [d.id for d in own if not d.responded]
    if unanswered:
        logger.debug("Demand %s awaiting documents %s", demand.id, unanswered)
        return DemandStatus.AWAITING
    return DemandStatus.IN_PROGRESS


def is_stale(demand: Demand, documents: Iterable[Document]) -> bool:
    """True if the stored status differs from the computed one."""
    return demand.status != resolve_demand_status(demand, documents)


_DEMAND_STATUS_COLORS: Dict[DemandStatus, str] = {
    DemandStatus.IN_PROGRESS: "#FFC107",
    DemandStatus.FINALIZED: "#28A745",
    DemandStatus.WAITING_QUEUE: "#6C757D",
    DemandStatus.AWAITING: "#DC3545",
}

_DEFAULT_DEMAND_COLOR = "#6C757D"


def demand_status_color(status: Optional[DemandStatus | str]) -> str:
    """Hex colour of a demand status badge; unknown statuses are grey."""
    if status is None:
        return _DEFAULT_DEMAND_COLOR
    member = status if isinstance(status, DemandStatus) else DemandStatus.from_label(status)
    return _DEMAND_STATUS_COLORS.get(member, _DEFAULT_DEMAND_COLOR)
