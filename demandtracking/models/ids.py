from __future__ import annotations
from typing import NewType

DemandId = NewType("DemandId", int)
DocumentId = NewType("DocumentId", int)
