from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Iterable, Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import LeaveType
from .model import AbsencePeriod

ABSENCE_LEAVE_TYPES = (LeaveType.SICK, LeaveType.UNPAID)


def is_absence_day(record: AttendanceRecord, start_date: date, end_date: date) -> bool:
    """A full absence day: in window, sick or unpaid, and never clocked in."""
    return (
        start_date <= record.work_date <= end_date
        and record.leave_type in ABSENCE_LEAVE_TYPES
        and not record.clock_in
    )


def extract_absence_periods(
    records: Iterable[AttendanceRecord],
    start_date: date,
    end_date: date,
) -> list[AbsencePeriod]:
    """Group one member's absence days into spells.

    Records must already be filtered to a single member. A day extends the
    current spell only when it falls exactly one day after the spell's end
    and carries the same leave type.
    """
    absence_days = sorted(
        (r for r in records if is_absence_day(r, start_date, end_date)),
        key=lambda r: r.work_date,
    )

    periods: list[AbsencePeriod] = []
    current: Optional[AbsencePeriod] = None
    for record in absence_days:
        if (
            current is not None
            and record.work_date == current.end_date + timedelta(days=1)
            and record.leave_type == current.type
        ):
            current = replace(current, end_date=record.work_date, days=current.days + 1)
            continue

        if current is not None:
            periods.append(current)
        current = AbsencePeriod(
            start_date=record.work_date,
            end_date=record.work_date,
            days=1,
            type=LeaveType(record.leave_type),
        )

    if current is not None:
        periods.append(current)
    return periods
