"""
date_time_helper.py

Provides helper functions for parsing, normalising and formatting the calendar
dates carried by demands and documents.

Host records mix ISO dates ("2025-08-01"), Brazilian display dates
("01/08/2025"), empty strings and None. Every feature should go through these
helpers so that "absent" means the same thing everywhere.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Iterable, Optional, Union

from core.config.config_service import config_service

DateLike = Union[date, datetime, str, None]


def _input_formats() -> tuple:
    return tuple(config_service.dates.input_formats) or ("%Y-%m-%d", "%d/%m/%Y")


def is_blank(value: DateLike) -> bool:
    """True for None and for empty/whitespace strings."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_date(value: DateLike, formats: Optional[Iterable[str]] = None) -> Optional[date]:
    """
    Converts a date-like value to a ``date``.

    :param value: date/datetime object, ISO or DD/MM/YYYY string, or None
    :param formats: strptime formats tried in order (defaults from config)
    :return: the parsed date, or None if the value is blank or unparseable
    """
    if is_blank(value):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    text = str(value).strip()
    # ISO datetimes ("2025-08-01T10:00:00") are accepted as well
    if "T" in text:
        text = text.split("T", 1)[0]
    for fmt in formats or _input_formats():
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def coerce_date(value: DateLike) -> Optional[date]:
    """
    Strict variant of ``parse_date`` for model construction: blank -> None,
    unparseable text -> ValueError.
    """
    if is_blank(value):
        return None
    parsed = parse_date(value)
    if parsed is None:
        raise ValueError(f"Unrecognised date: {value!r}")
    return parsed


def to_iso(value: DateLike) -> Optional[str]:
    """Returns "YYYY-MM-DD" or None."""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else None


def to_display(value: DateLike, fmt: Optional[str] = None) -> str:
    """
    Formats a date for display (default "DD/MM/YYYY").
    Blank values yield an empty string; unparseable strings are returned as-is.
    """
    if is_blank(value):
        return ""
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime(fmt or config_service.dates.display_format)


def today() -> date:
    """Current UTC calendar date."""
    return datetime.now(timezone.utc).date()


def is_future(value: DateLike, reference: Optional[date] = None) -> bool:
    """True if the value is strictly after *reference* (default: today)."""
    parsed = parse_date(value)
    if parsed is None:
        return False
    return parsed > (reference or today())
