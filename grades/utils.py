"""
Utility functions for grades
"""
from datetime import datetime, time, timezone as dt_timezone

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from core.exceptions import InvalidDate


def parse_grade_date(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime string into an aware datetime

    Date-only values map to midnight UTC; naive datetimes are taken as UTC.
    Aware values are converted to UTC.

    Raises:
        InvalidDate: value is not a valid ISO date/datetime
    """
    value = (value or '').strip()

    try:
        parsed = parse_datetime(value)
        if parsed is None:
            day = parse_date(value)
            if day is not None:
                parsed = datetime.combine(day, time.min)
    except ValueError:
        parsed = None

    if parsed is None:
        raise InvalidDate(f"Invalid date: {value!r}")

    if timezone.is_naive(parsed):
        parsed = timezone.make_aware(parsed, dt_timezone.utc)

    return parsed.astimezone(dt_timezone.utc)
