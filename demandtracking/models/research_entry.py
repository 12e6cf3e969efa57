from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ResearchEntry:
    """Descriptive (kind, identifier, note) triple, e.g. ("CPF", "123...", "")."""
    kind: str
    identifier: str
    note: str = ""
