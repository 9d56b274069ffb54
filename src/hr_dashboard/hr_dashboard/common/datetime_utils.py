from __future__ import annotations

import calendar
from datetime import date, datetime, time

from ..core.exceptions import ValidationError


def parse_iso_date(value) -> date:
    """Parse YYYY-MM-DD string into date.

    Raises ValidationError for anything that is not a valid calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value).strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date: {value!r}") from None


def parse_clock_time(value) -> time | None:
    """Parse HH:MM into time. Empty values mean "not recorded"."""
    if value is None or isinstance(value, time):
        return value
    text = str(value).strip()
    if not text:
        return None
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(text, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time: {value!r}")


def format_clock_time(value: time | None) -> str | None:
    return value.strftime("%H:%M") if value else None


def subtract_months(value: date, months: int) -> date:
    """Calendar-month subtraction; the day is clamped to the target month's length."""
    index = value.year * 12 + (value.month - 1) - int(months)
    year, month = divmod(index, 12)
    month += 1
    if not date.min.year <= year <= date.max.year:
        raise ValidationError(f"Cannot go back {months} months from {value.isoformat()}")
    day = min(value.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def start_of_week(value: date) -> date:
    """Monday of the week containing value."""
    return date.fromordinal(value.toordinal() - value.weekday())


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
