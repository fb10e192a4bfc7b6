"""
Calendar-day helpers.

Ticket dates are calendar days. Every value is pinned to midday before its
day is read, so converting across a UTC offset (at most +-12h) or a DST
change never moves it to the neighbouring day.
"""

from datetime import date, datetime, time, timedelta
from typing import Union

from django.utils import timezone

MIDDAY = time(12, 0, 0)
ISO_DATE_FORMAT = '%Y-%m-%d'

DateLike = Union[date, datetime, str]


def normalize_date(value: DateLike) -> datetime:
    """
    Return ``value`` as a datetime at 12:00:00 of the same calendar day.

    Accepts dates, datetimes (naive or aware, tzinfo is kept) and ISO
    strings (``YYYY-MM-DD`` or a full ISO datetime).
    """
    if isinstance(value, str):
        value = datetime.fromisoformat(value) if len(value) > 10 else date.fromisoformat(value)

    if isinstance(value, datetime):
        return value.replace(hour=12, minute=0, second=0, microsecond=0)
    if isinstance(value, date):
        return datetime.combine(value, MIDDAY)

    raise TypeError(f"Expected date, datetime or ISO string, got {type(value).__name__}")


def get_today_normalized() -> datetime:
    """Today, in the active Django time zone, at midday."""
    return normalize_date(timezone.localdate())


def date_to_iso_string(value: DateLike) -> str:
    """Day key ``YYYY-MM-DD`` of ``value`` after normalization."""
    return normalize_date(value).strftime(ISO_DATE_FORMAT)


def iso_string_to_date(value: str) -> datetime:
    """Parse a ``YYYY-MM-DD`` string into a midday datetime."""
    return datetime.combine(date.fromisoformat(value[:10]), MIDDAY)


def get_previous_day(value: str) -> str:
    """Day before ``value`` (``YYYY-MM-DD`` in and out)."""
    return date_to_iso_string(iso_string_to_date(value) - timedelta(days=1))


def get_next_day(value: str) -> str:
    """Day after ``value`` (``YYYY-MM-DD`` in and out)."""
    return date_to_iso_string(iso_string_to_date(value) + timedelta(days=1))
