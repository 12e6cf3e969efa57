"""
===============================================================================
Rectification Policy – judicial decision version chain
-------------------------------------------------------------------------------
Index 0 is the original decision (the document's own authority, court and
signature date); index k is the k-th amending decision. Which entry is shown
is up to the caller.
===============================================================================
"""
from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional, Tuple

from core.helpers.date_time_helper import to_display, today as utc_today
from demandtracking.models.document import Document
from demandtracking.models.rectification import VersionEntry

logger = logging.getLogger(__name__)

ORIGINAL_LABEL = "Judicial Decision"
AMENDMENT_LABEL = "Amending Decision"


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 21 -> '21st'."""
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def amendment_label(index: int) -> str:
    return f"{ordinal(index)} {AMENDMENT_LABEL}"


def resolve_version_chain(document: Document) -> Tuple[VersionEntry, ...]:
    """
    Ordered versions of a judicial decision.

    Always at least one entry; non-decision documents simply yield their own
    (usually empty) authority/court/date as the original.
    """
    chain = [
        VersionEntry(
            label=ORIGINAL_LABEL,
            authority=document.authority,
            court=document.court,
            signed_on=document.signed_on,
        )
    ]
    for index, rect in enumerate(document.rectifications, start=1):
        chain.append(
            VersionEntry(
                label=amendment_label(index),
                authority=rect.authority,
                court=rect.court,
                signed_on=rect.signed_on,
            )
        )
    return tuple(chain)


def validate_version_chain(document: Document, today: Optional[date] = None) -> List[str]:
    """
    Check the signature dates of the chain.

    Present dates must not lie in the future and must be strictly later
    than the previous present date. Missing dates are skipped. Returns
    the problems found; an empty list means the chain is consistent.
    """
    reference = today or utc_today()
    problems: List[str] = []
    previous: Optional[VersionEntry] = None

    for entry in resolve_version_chain(document):
        signed_on = entry.signed_on
        if signed_on is None:
            continue
        if signed_on > reference:
            problems.append(f"{entry.label}: signature date {to_display(signed_on)} is in the future.")
        if previous is not None and signed_on <= previous.signed_on:
            problems.append(
                f"{entry.label}: signature date {to_display(signed_on)} must be after "
                f"{previous.label} ({to_display(previous.signed_on)})."
            )
        previous = entry

    if problems:
        logger.debug("Document %s: version chain problems %s", document.id, problems)
    return problems
