"""Human-readable date labels attached to booking responses."""

from __future__ import annotations

from datetime import date, datetime

from django.utils import dateformat, timezone, translation  # type: ignore
from django.utils.dateparse import parse_date, parse_datetime  # type: ignore

NOT_SPECIFIED = "Not specified"
INVALID_DATE = "Invalid Date"

# "June 1, 2024"
LONG_DATE_FORMAT = "F j, Y"


def _to_date(value: date | datetime | str) -> date | None:
    if isinstance(value, datetime):
        if timezone.is_aware(value):
            value = timezone.localtime(value)
        return value.date()
    if isinstance(value, date):
        return value
    try:
        parsed_date = parse_date(value)
        if parsed_date is not None:
            return parsed_date
        parsed_datetime = parse_datetime(value)
    except (TypeError, ValueError):
        return None
    return _to_date(parsed_datetime) if parsed_datetime is not None else None


def format_date(value: date | datetime | str | None) -> str:
    """Return a long US-English label for ``value``, e.g. ``"June 1, 2024"``.

    Missing input gives ``"Not specified"``; a string that is not an ISO
    date or datetime gives ``"Invalid Date"``.
    """
    if value is None or value == "":
        return NOT_SPECIFIED
    parsed = _to_date(value)
    if parsed is None:
        return INVALID_DATE
    with translation.override("en-us"):
        return dateformat.format(parsed, LONG_DATE_FORMAT)


def format_date_range(start, end) -> str:
    return f"{format_date(start)} to {format_date(end)}"


def booking_dates(start, end) -> dict[str, str]:
    """Date metadata block shared by search results and booking payloads."""
    return {
        "bookDate": format_date(start),
        "purchaseDate": format_date(end),
        "dateRange": format_date_range(start, end),
    }
