"""Helpers for calendar dates stored as ISO date-only strings (YYYY-MM-DD)."""

from datetime import date, datetime
from typing import Optional


def parse_date_only(value: date | datetime | str | None) -> date:
    """Parse a date-only value into a calendar date.

    Datetimes are truncated to their date part, so no timezone shift can move
    a stored day onto its neighbour. Empty input yields today.

    Args:
        value: ISO date string, datetime or date

    Returns:
        Calendar date
    """
    if not value:
        return date.today()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Accept full ISO timestamps too and keep only the day
    return datetime.fromisoformat(value.replace("Z", "+00:00")).date()


def to_date_only_string(value: date | datetime) -> str:
    """Convert a date or datetime to a YYYY-MM-DD string."""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def days_between(start: date | str, end: date | str) -> int:
    """Whole calendar days from start to end (negative if end is earlier)."""
    return (parse_date_only(end) - parse_date_only(start)).days


def calculate_nights(start_date: date | str, end_date: date | str) -> int:
    """Number of nights between check-in and check-out (checkout day excluded)."""
    return days_between(start_date, end_date)


def is_past_date(value: date | str, today: Optional[date] = None) -> bool:
    """True if the date is before today."""
    return parse_date_only(value) < (today or date.today())


def is_future_date(value: date | str, today: Optional[date] = None) -> bool:
    """True if the date is after today."""
    return parse_date_only(value) > (today or date.today())


def format_display_date(value: date | str) -> str:
    """Format a date the way the web client shows it (en-US short, M/D/YYYY)."""
    day = parse_date_only(value)
    return f"{day.month}/{day.day}/{day.year}"
