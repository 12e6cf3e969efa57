"""
===============================================================================
recipient_parser – split a circular letter's addressee string into names
-------------------------------------------------------------------------------
Accepted shapes:
  - "A, B, C"
  - "A, B e C" / "A, B and C"    (last name joined by a conjunction)
  - "A e B"

Conjunctions come from the [Recipients] config section. Names are trimmed,
empty parts dropped, order preserved.
===============================================================================
"""
from __future__ import annotations
import re
from typing import Iterable, List, Optional, Sequence

from core.config.config_service import config_service
from demandtracking.models.recipient import Recipient


def _conjunction_re(conjunctions: Iterable[str]) -> Optional[re.Pattern[str]]:
    words = [re.escape(c.strip()) for c in conjunctions if c and c.strip()]
    if not words:
        return None
    return re.compile(r"\s+(?:" + "|".join(words) + r")\s+", re.IGNORECASE)


def parse_recipients(text: str | None, conjunctions: Optional[Sequence[str]] = None) -> List[str]:
    """
    Return the individual addressee names encoded in *text*.

    Only the LAST conjunction separates names ("Banco A e B, Provider e C"
    yields ["Banco A e B", "Provider", "C"]), matching how the host joins
    lists for display.
    """
    if not text or not text.strip():
        return []

    pattern = _conjunction_re(conjunctions if conjunctions is not None else config_service.recipients.conjunctions)
    head, last = text, ""
    if pattern is not None:
        matches = list(pattern.finditer(text))
        if matches:
            m = matches[-1]
            head, last = text[: m.start()], text[m.end():]

    names = [part.strip() for part in head.split(",")]
    if last.strip():
        names.append(last.strip())
    return [name for name in names if name]


def format_recipients(names: Sequence[str], conjunction: str = "e") -> str:
    """Inverse of ``parse_recipients``: "A, B e C"."""
    cleaned = [n.strip() for n in names if n and n.strip()]
    if len(cleaned) <= 1:
        return "".join(cleaned)
    return f"{', '.join(cleaned[:-1])} {conjunction} {cleaned[-1]}"


def recipients_from_envelope(
    text: str | None,
    *,
    dispatched_on=None,
    answered_on=None,
    tracking_code: str = "",
    no_tracking: bool = False,
) -> List[Recipient]:
    """
    Build per-recipient records for legacy circular letters that only stored
    one shared envelope: every parsed name inherits the shared dates and
    tracking data.
    """
    return [
        Recipient(
            name=name,
            dispatched_on=dispatched_on,
            answered_on=answered_on,
            tracking_code="" if no_tracking else tracking_code,
            no_tracking=no_tracking,
        )
        for name in parse_recipients(text)
    ]
