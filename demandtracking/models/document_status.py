from __future__ import annotations
from enum import Enum


class DocumentStatus(str, Enum):
    """Envelope status of a letter or of one circular-letter recipient."""
    NOT_SENT = "Not Sent"
    PENDING = "Pending"
    ANSWERED = "Answered"
    NO_STATUS = "No Status"


class ProgressStatus(str, Enum):
    """List-view status; also tells forwarded letters and produced reports apart."""
    NOT_SENT = "Not Sent"
    PENDING = "Pending"
    ANSWERED = "Answered"
    FORWARDED = "Forwarded"
    IN_PRODUCTION = "In Production"
    FINALIZED = "Finalized"
    NO_STATUS = "No Status"
