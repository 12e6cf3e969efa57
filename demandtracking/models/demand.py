from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional

from core.helpers.date_time_helper import coerce_date

from .ids import DemandId
from .demand_status import DemandStatus


@dataclass(slots=True)
class Demand:
    """
    Case record owning zero or more documents.

    Notes:
    - 'opened_on'     start date; without it no status can be computed
    - 'closed_on'     closing date; both dates present means finalized
    - 'reopened_on'   set when a closed demand was reopened; 'closed_on' is
                      then ignored and 'new_closed_on' decides finalization
    - 'status'        last stored status, possibly stale
    """

    id: DemandId
    sged: str = ""
    demand_type: str = ""
    administrative_case: str = ""
    judicial_case: str = ""
    extrajudicial_case: str = ""
    pic: str = ""
    requesting_authority: str = ""
    analyst: str = ""
    description: str = ""

    opened_on: Optional[date] = None
    closed_on: Optional[date] = None
    reopened_on: Optional[date] = None
    new_closed_on: Optional[date] = None

    status: Optional[DemandStatus] = None

    def __post_init__(self) -> None:
        self.opened_on = coerce_date(self.opened_on)
        self.closed_on = coerce_date(self.closed_on)
        self.reopened_on = coerce_date(self.reopened_on)
        self.new_closed_on = coerce_date(self.new_closed_on)

    @property
    def is_reopened(self) -> bool:
        return self.reopened_on is not None
