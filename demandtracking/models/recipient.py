from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.helpers.date_time_helper import coerce_date
from demandtracking.exceptions.errors import TrackingConflictError


@dataclass(slots=True)
class Recipient:
    """
    One addressee of a Circular Official Letter with its own envelope data.

    'responded' is derived from the answer date and never stored.
    """
    name: str
    dispatched_on: Optional[date] = None
    answered_on: Optional[date] = None
    tracking_code: str = ""
    no_tracking: bool = False

    def __post_init__(self) -> None:
        self.dispatched_on = coerce_date(self.dispatched_on)
        self.answered_on = coerce_date(self.answered_on)
        self.tracking_code = (self.tracking_code or "").strip()
        if self.no_tracking and self.tracking_code:
            raise TrackingConflictError(
                f"Recipient {self.name!r} has a tracking code but is flagged as untracked"
            )

    @property
    def responded(self) -> bool:
        return self.answered_on is not None
