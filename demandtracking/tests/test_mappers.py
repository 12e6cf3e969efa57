"""
demandtracking/tests/test_mappers.py

Unit tests for the lenient host-record mappers.
"""

from __future__ import annotations

import unittest
from datetime import date

from demandtracking.exceptions.errors import UnknownDocumentTypeError
from demandtracking.models.demand_status import DemandStatus
from demandtracking.models.document_subject import CircularLetterSubject, LetterSubject
from demandtracking.models.document_type import DocumentType
from demandtracking.models.mappers import (
    demand_from_record,
    document_from_record,
    documents_from_records,
)


class TestDocumentFromRecord(unittest.TestCase):
    def test_legacy_portuguese_record(self) -> None:
        doc = document_from_record({
            "id": 12,
            "demandaId": 3,
            "tipoDocumento": "Ofício",
            "assunto": "Encaminhamento de mídia",
            "destinatario": "Google Brasil",
            "dataEnvio": "05/02/2025",
            "dataResposta": "",
            "codigoRastreio": " BR123 ",
            "selectedMidias": ["4", 5, "x"],
        })
        self.assertEqual(doc.id, 12)
        self.assertEqual(doc.demand_id, 3)
        self.assertEqual(doc.doc_type, DocumentType.OFFICIAL_LETTER)
        self.assertEqual(doc.subject, LetterSubject.FORWARDING_MEDIA)
        self.assertEqual(doc.dispatched_on, date(2025, 2, 5))
        self.assertIsNone(doc.answered_on)
        self.assertEqual(doc.tracking_code, "BR123")
        self.assertFalse(doc.responded)
        self.assertEqual(doc.selected_media, [4, 5])

    def test_english_record(self) -> None:
        doc = document_from_record({
            "id": 1,
            "demand_id": 1,
            "doc_type": "Official Letter",
            "subject": "Request for Registration Data",
            "dispatched_on": "2025-02-05",
            "answered_on": "2025-02-20",
        })
        self.assertEqual(doc.subject, LetterSubject.REQUEST_REGISTRATION_DATA)
        self.assertTrue(doc.responded)

    def test_unknown_subject_is_kept_as_text(self) -> None:
        doc = document_from_record({
            "id": 1, "demand_id": 1, "doc_type": "Official Letter", "subject": "Assunto antigo",
        })
        self.assertIsNone(doc.subject)
        self.assertEqual(doc.subject_other, "Assunto antigo")

    def test_other_subject_keeps_free_text(self) -> None:
        doc = document_from_record({
            "id": 1, "demandaId": 1, "tipoDocumento": "Ofício",
            "assunto": "Outros", "assuntoOutros": "Pedido de informação",
        })
        self.assertEqual(doc.subject, LetterSubject.OTHER)
        self.assertEqual(doc.subject_other, "Pedido de informação")

    def test_unknown_type_raises(self) -> None:
        with self.assertRaises(UnknownDocumentTypeError):
            document_from_record({"id": 1, "demand_id": 1, "doc_type": "Fax"})

    def test_unparseable_date_is_dropped_and_logged(self) -> None:
        with self.assertLogs("demandtracking.models.mappers", level="WARNING"):
            doc = document_from_record({
                "id": 1, "demand_id": 1, "doc_type": "Media", "dataEnvio": "tomorrow",
            })
        self.assertIsNone(doc.dispatched_on)

    def test_tracking_conflict_drops_code(self) -> None:
        with self.assertLogs("demandtracking.models.mappers", level="WARNING"):
            doc = document_from_record({
                "id": 1, "demand_id": 1, "doc_type": "Official Letter",
                "codigoRastreio": "BR1", "naopossuiRastreio": True,
            })
        self.assertEqual(doc.tracking_code, "")
        self.assertTrue(doc.no_tracking)

    def test_textual_flags(self) -> None:
        base = {"id": 1, "demandaId": 1, "tipoDocumento": "Mídia"}
        doc = document_from_record({**base, "respondido": "false", "apresentouDefeito": "0"})
        self.assertFalse(doc.responded)
        self.assertFalse(doc.defective)
        doc = document_from_record({**base, "respondido": "Sim", "apresentouDefeito": 1})
        self.assertTrue(doc.responded)
        self.assertTrue(doc.defective)
        doc = document_from_record({**base, "dataResposta": "2025-02-01", "respondido": ""})
        self.assertTrue(doc.responded)
        doc = document_from_record({**base, "codigoRastreio": "BR1", "naopossuiRastreio": "false"})
        self.assertEqual(doc.tracking_code, "BR1")
        self.assertFalse(doc.no_tracking)

    def test_circular_letter_recipients_from_data(self) -> None:
        doc = document_from_record({
            "id": 1, "demandaId": 1, "tipoDocumento": "Ofício Circular",
            "assunto": "Requisição de dados cadastrais",
            "destinatario": "Claro, Vivo e TIM",
            "destinatariosData": [
                {"nome": "Claro", "dataEnvio": "2025-01-02", "dataResposta": "2025-01-10"},
                {"nome": "Vivo", "dataEnvio": "2025-01-02"},
                {"nome": "TIM"},
            ],
        })
        self.assertEqual(doc.subject, CircularLetterSubject.REQUEST_REGISTRATION_DATA)
        self.assertEqual([r.name for r in doc.recipients], ["Claro", "Vivo", "TIM"])
        self.assertTrue(doc.recipients[0].responded)
        self.assertIsNone(doc.recipients[2].dispatched_on)

    def test_circular_letter_recipients_from_envelope(self) -> None:
        doc = document_from_record({
            "id": 1, "demandaId": 1, "tipoDocumento": "Ofício Circular",
            "assunto": "Outros",
            "destinatario": "Claro, Vivo e TIM",
            "dataEnvio": "2025-01-02",
        })
        self.assertEqual([r.name for r in doc.recipients], ["Claro", "Vivo", "TIM"])
        self.assertTrue(all(r.dispatched_on == date(2025, 1, 2) for r in doc.recipients))

    def test_judicial_decision_with_rectifications(self) -> None:
        doc = document_from_record({
            "id": 1, "demandaId": 1, "tipoDocumento": "Decisão Judicial",
            "autoridade": "Juiz A", "orgaoJudicial": "1ª Vara", "dataAssinatura": "2025-01-01",
            "retificacoes": [{"autoridade": "Juiz B", "orgaoJudicial": "2ª Vara", "dataAssinatura": "2025-02-01"}],
        })
        self.assertEqual(doc.signed_on, date(2025, 1, 1))
        self.assertEqual(len(doc.rectifications), 1)
        self.assertEqual(doc.rectifications[0].authority, "Juiz B")


class TestDemandFromRecord(unittest.TestCase):
    def test_legacy_record(self) -> None:
        demand = demand_from_record({
            "id": 9, "sged": "2025/001", "orgao": {"id": 1, "nome": "MPSP"},
            "dataInicial": "10/01/2025", "dataFinal": "", "status": "Em Andamento",
        })
        self.assertEqual(demand.id, 9)
        self.assertEqual(demand.requesting_authority, "MPSP")
        self.assertEqual(demand.opened_on, date(2025, 1, 10))
        self.assertIsNone(demand.closed_on)
        self.assertEqual(demand.status, DemandStatus.IN_PROGRESS)

    def test_unknown_status_is_none(self) -> None:
        self.assertIsNone(demand_from_record({"id": 1, "status": "???"}).status)


class TestDocumentsFromRecords(unittest.TestCase):
    RECORDS = [
        {"id": 1, "demand_id": 1, "doc_type": "Media"},
        {"id": 2, "demand_id": 1, "doc_type": "Fax"},
    ]

    def test_first_failure_propagates(self) -> None:
        with self.assertRaises(UnknownDocumentTypeError):
            documents_from_records(self.RECORDS)

    def test_failures_reported_and_skipped(self) -> None:
        failures = []
        docs = documents_from_records(self.RECORDS, on_error=lambda rec, exc: failures.append(rec["id"]))
        self.assertEqual([d.id for d in docs], [1])
        self.assertEqual(failures, [2])


if __name__ == "__main__":
    unittest.main()
