"""Shared utilities."""

from cabin_buddy.utils.dates import (
    calculate_nights,
    days_between,
    format_display_date,
    is_future_date,
    is_past_date,
    parse_date_only,
    to_date_only_string,
)

__all__ = [
    "parse_date_only",
    "to_date_only_string",
    "days_between",
    "calculate_nights",
    "is_past_date",
    "is_future_date",
    "format_display_date",
]
