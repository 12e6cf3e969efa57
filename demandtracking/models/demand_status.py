from __future__ import annotations
from enum import Enum
from typing import Optional

from .document_type import normalize_label


class DemandStatus(str, Enum):
    """Lifecycle status of a Demand, derived from its dates and documents."""
    FINALIZED = "Finalized"
    WAITING_QUEUE = "Waiting Queue"
    AWAITING = "Awaiting"
    IN_PROGRESS = "In Progress"

    @classmethod
    def from_label(cls, text: str | None) -> Optional["DemandStatus"]:
        """Map English or legacy Portuguese labels ("Em Andamento", ...); unknown -> None."""
        key = normalize_label(text)
        if not key:
            return None
        for member in cls:
            if key in (normalize_label(member.value), member.name.casefold()):
                return member
        return _LEGACY_LABELS.get(key)


_LEGACY_LABELS = {
    normalize_label("Finalizada"): DemandStatus.FINALIZED,
    normalize_label("Fila de Espera"): DemandStatus.WAITING_QUEUE,
    normalize_label("Aguardando"): DemandStatus.AWAITING,
    normalize_label("Em Andamento"): DemandStatus.IN_PROGRESS,
}
