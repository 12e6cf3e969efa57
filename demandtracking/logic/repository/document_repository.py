"""
===============================================================================
Document Repository Protocol – read access contract
-------------------------------------------------------------------------------
Purpose:
    Minimal read-only contract for fetching the documents of a demand. The
    host owns storage; implementations wrap whatever it keeps (arrays, SQL,
    HTTP) and hand out snapshots.
===============================================================================
"""
from __future__ import annotations
from typing import List, Optional, Protocol

from demandtracking.models.document import Document
from demandtracking.models.ids import DemandId, DocumentId


class DocumentRepository(Protocol):
    """
    Read contract for documents.

    Methods
    -------
    get_by_id(doc_id) -> Optional[Document]
        Return a single document or None.
    list_by_demand(demand_id) -> list[Document]
        All documents of one demand, in host order.
    """

    def get_by_id(self, doc_id: DocumentId) -> Optional[Document]:
        ...

    def list_by_demand(self, demand_id: DemandId) -> List[Document]:
        ...
