"""Demand tracking exceptions.

Raised only at construction/mapping boundaries; resolvers never raise for
unknown or legacy data.
"""
from __future__ import annotations


class DemandTrackingError(Exception):
    """Base exception for the demand tracking feature."""


class InvalidSubjectError(DemandTrackingError):
    """Raised when a subject does not belong to its document type's vocabulary."""


class TrackingConflictError(DemandTrackingError):
    """Raised when "no tracking" is set together with a tracking code."""


class UnknownDocumentTypeError(DemandTrackingError):
    """Raised when a host record carries a document type outside the closed set."""
