"""
demandtracking/tests/test_status_service.py

Service-level tests with in-memory fake repositories.
"""

from __future__ import annotations

import unittest
from datetime import date
from typing import Dict, List, Optional

from demandtracking.logic.services.status_service import DemandStatusService, DocumentStatusService
from demandtracking.models.demand import Demand
from demandtracking.models.demand_status import DemandStatus
from demandtracking.models.document import Document
from demandtracking.models.document_status import DocumentStatus, ProgressStatus
from demandtracking.models.document_subject import CircularLetterSubject, LetterSubject, ReportSubject
from demandtracking.models.document_type import DocumentType
from demandtracking.models.field_visibility import UpdateKind
from demandtracking.models.ids import DemandId, DocumentId
from demandtracking.models.recipient import Recipient
from demandtracking.models.rectification import Rectification


class FakeDocumentRepository:
    def __init__(self, documents: List[Document]) -> None:
        self._by_id: Dict[DocumentId, Document] = {d.id: d for d in documents}

    def get_by_id(self, doc_id: DocumentId) -> Optional[Document]:
        return self._by_id.get(doc_id)

    def list_by_demand(self, demand_id: DemandId) -> List[Document]:
        return [d for d in self._by_id.values() if d.demand_id == demand_id]


class FakeDemandRepository:
    def __init__(self, demands: List[Demand]) -> None:
        self._demands = list(demands)

    def get_by_id(self, demand_id: DemandId) -> Optional[Demand]:
        return next((d for d in self._demands if d.id == demand_id), None)

    def list_all(self) -> List[Demand]:
        return list(self._demands)


def _documents() -> List[Document]:
    return [
        Document(
            id=DocumentId(1), demand_id=DemandId(1),
            doc_type=DocumentType.CIRCULAR_LETTER,
            subject=CircularLetterSubject.REQUEST_REGISTRATION_DATA,
            recipients=[
                Recipient(name="Claro", dispatched_on=date(2025, 1, 2), answered_on=date(2025, 1, 9)),
                Recipient(name="Vivo", dispatched_on=date(2025, 1, 2)),
            ],
            responded=False,
        ),
        Document(
            id=DocumentId(2), demand_id=DemandId(1),
            doc_type=DocumentType.TECHNICAL_REPORT, subject=ReportSubject.EVIDENCE_ANALYSIS,
            responded=True,
        ),
        Document(
            id=DocumentId(3), demand_id=DemandId(1),
            doc_type=DocumentType.OFFICIAL_LETTER, subject=LetterSubject.FORWARDING_TECHNICAL_REPORT,
            selected_technical_reports=[DocumentId(2)],
            responded=True,
        ),
        Document(
            id=DocumentId(4), demand_id=DemandId(2),
            doc_type=DocumentType.JUDICIAL_DECISION,
            authority="Judge Ana", signed_on=date(2025, 1, 1),
            rectifications=[Rectification(authority="Judge Bia", signed_on=date(2025, 2, 1))],
            responded=True,
        ),
    ]


class TestDocumentStatusService(unittest.TestCase):
    def setUp(self) -> None:
        self.service = DocumentStatusService(FakeDocumentRepository(_documents()))

    def test_visible_fields_and_status(self) -> None:
        self.assertEqual(self.service.visible_fields(DocumentId(1)).names(), {"individual_recipients"})
        self.assertEqual(self.service.status(DocumentId(1)), DocumentStatus.PENDING)
        self.assertEqual(self.service.status(DocumentId(2)), DocumentStatus.NO_STATUS)

    def test_recipient_statuses(self) -> None:
        statuses = [s for _, s in self.service.recipient_statuses(DocumentId(1))]
        self.assertEqual(statuses, [DocumentStatus.ANSWERED, DocumentStatus.PENDING])

    def test_version_chain(self) -> None:
        labels = [e.label for e in self.service.version_chain(DocumentId(4))]
        self.assertEqual(labels, ["Judicial Decision", "1st Amending Decision"])

    def test_validate_forwarding(self) -> None:
        result = self.service.validate_forwarding(DocumentId(3))
        self.assertFalse(result.ok)
        self.assertEqual(result.offending_ids, (DocumentId(2),))

    def test_view(self) -> None:
        view = self.service.view(DocumentId(3))
        self.assertEqual(view.update_kind, UpdateKind.LETTER_TECHNICAL_REPORT)
        self.assertEqual(view.status, DocumentStatus.NO_STATUS)
        self.assertEqual(view.progress, ProgressStatus.NOT_SENT)
        self.assertEqual(view.color, "#6C757D")

    def test_missing_document(self) -> None:
        with self.assertLogs("demandtracking.logic.services.status_service", level="DEBUG"):
            self.assertIsNone(self.service.status(DocumentId(99)))
        self.assertIsNone(self.service.visible_fields(DocumentId(99)))
        self.assertIsNone(self.service.view(DocumentId(99)))
        self.assertEqual(self.service.recipient_statuses(DocumentId(99)), [])
        self.assertEqual(self.service.version_chain(DocumentId(99)), ())
        self.assertTrue(self.service.validate_forwarding(DocumentId(99)).ok)


class TestDemandStatusService(unittest.TestCase):
    def setUp(self) -> None:
        self.demands = [
            Demand(id=DemandId(1), opened_on="2025-01-01", status=DemandStatus.IN_PROGRESS),
            Demand(id=DemandId(2), opened_on="2025-01-01", status=DemandStatus.IN_PROGRESS),
            Demand(id=DemandId(3), opened_on="2025-01-01", closed_on="2025-03-01", status=DemandStatus.FINALIZED),
        ]
        self.service = DemandStatusService(
            FakeDemandRepository(self.demands),
            FakeDocumentRepository(_documents()),
        )

    def test_status(self) -> None:
        self.assertEqual(self.service.status(DemandId(1)), DemandStatus.AWAITING)
        self.assertEqual(self.service.status(DemandId(2)), DemandStatus.IN_PROGRESS)
        self.assertIsNone(self.service.status(DemandId(42)))

    def test_color(self) -> None:
        self.assertEqual(self.service.color(DemandId(1)), "#DC3545")
        self.assertEqual(self.service.color(DemandId(3)), "#28A745")
        self.assertIsNone(self.service.color(DemandId(42)))

    def test_statuses(self) -> None:
        self.assertEqual(
            self.service.statuses(),
            {
                DemandId(1): DemandStatus.AWAITING,
                DemandId(2): DemandStatus.IN_PROGRESS,
                DemandId(3): DemandStatus.FINALIZED,
            },
        )

    def test_stale(self) -> None:
        with self.assertLogs("demandtracking.logic.services.status_service", level="INFO"):
            stale = self.service.stale()
        self.assertEqual([(d.id, s) for d, s in stale], [(DemandId(1), DemandStatus.AWAITING)])


if __name__ == "__main__":
    unittest.main()
