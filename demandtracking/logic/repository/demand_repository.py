"""
===============================================================================
Demand Repository Protocol – read access contract
===============================================================================
"""
from __future__ import annotations
from typing import List, Optional, Protocol

from demandtracking.models.demand import Demand
from demandtracking.models.ids import DemandId


class DemandRepository(Protocol):
    """Read contract for demands."""

    def get_by_id(self, demand_id: DemandId) -> Optional[Demand]:
        ...

    def list_all(self) -> List[Demand]:
        ...
