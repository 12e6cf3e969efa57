from .errors import (
    DemandTrackingError,
    InvalidSubjectError,
    TrackingConflictError,
    UnknownDocumentTypeError,
)

__all__ = [
    "DemandTrackingError",
    "InvalidSubjectError",
    "TrackingConflictError",
    "UnknownDocumentTypeError",
]
