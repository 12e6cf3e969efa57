from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.helpers.date_time_helper import coerce_date


@dataclass(frozen=True, slots=True)
class Rectification:
    """
    Amendment of a Judicial Decision's (authority, court, signature date).

    Immutable; a document keeps them in an append-only ordered list.
    """
    authority: str = ""
    court: str = ""
    signed_on: Optional[date] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "signed_on", coerce_date(self.signed_on))


@dataclass(frozen=True, slots=True)
class VersionEntry:
    """One element of a decision's version chain (original or amendment)."""
    label: str
    authority: str
    court: str
    signed_on: Optional[date]
