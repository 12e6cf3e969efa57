"""
demandtracking/tests/test_recipient_parser.py

Unit tests for splitting addressee strings of circular letters.
"""

from __future__ import annotations

import unittest
from datetime import date

from demandtracking.logic.util.recipient_parser import (
    format_recipients,
    parse_recipients,
    recipients_from_envelope,
)


class TestParseRecipients(unittest.TestCase):
    def test_shapes(self) -> None:
        cases = {
            "Claro, Vivo, TIM": ["Claro", "Vivo", "TIM"],
            "Claro, Vivo e TIM": ["Claro", "Vivo", "TIM"],
            "Claro e Vivo": ["Claro", "Vivo"],
            "Google and Meta": ["Google", "Meta"],
            "  Claro ,, Vivo ": ["Claro", "Vivo"],
            "Google Brasil": ["Google Brasil"],
        }
        for text, expected in cases.items():
            with self.subTest(text=text):
                self.assertEqual(parse_recipients(text, ("e", "and")), expected)

    def test_only_last_conjunction_splits(self) -> None:
        self.assertEqual(
            parse_recipients("Banco A e B, Provider e C", ("e",)),
            ["Banco A e B", "Provider", "C"],
        )

    def test_blank(self) -> None:
        self.assertEqual(parse_recipients(None), [])
        self.assertEqual(parse_recipients("   "), [])

    def test_without_conjunctions(self) -> None:
        self.assertEqual(parse_recipients("Claro e Vivo", ()), ["Claro e Vivo"])


class TestFormatRecipients(unittest.TestCase):
    def test_format(self) -> None:
        self.assertEqual(format_recipients(["Claro", "Vivo", "TIM"]), "Claro, Vivo e TIM")
        self.assertEqual(format_recipients(["Claro"]), "Claro")
        self.assertEqual(format_recipients([]), "")
        self.assertEqual(format_recipients(["A", "B"], conjunction="and"), "A and B")


class TestRecipientsFromEnvelope(unittest.TestCase):
    def test_names_inherit_envelope(self) -> None:
        recipients = recipients_from_envelope(
            "Claro e Vivo",
            dispatched_on=date(2025, 1, 2),
            tracking_code="BR9",
        )
        self.assertEqual([r.name for r in recipients], ["Claro", "Vivo"])
        self.assertTrue(all(r.dispatched_on == date(2025, 1, 2) for r in recipients))
        self.assertTrue(all(r.tracking_code == "BR9" for r in recipients))
        self.assertFalse(any(r.responded for r in recipients))

    def test_untracked_envelope_drops_code(self) -> None:
        recipients = recipients_from_envelope("Claro", tracking_code="BR9", no_tracking=True)
        self.assertEqual(recipients[0].tracking_code, "")


if __name__ == "__main__":
    unittest.main()
