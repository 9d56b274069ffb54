from __future__ import annotations

from datetime import date, datetime, time

import pytest

from src.hr_dashboard.hr_dashboard.attendance.model import AttendanceRecord
from src.hr_dashboard.hr_dashboard.core.enums import LeaveType


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 15, 9, 30, 0)


@pytest.fixture
def make_record():
    counter = {"n": 0}

    def _make(
        day: str,
        leave_type: LeaveType | None = None,
        *,
        member_id: str = "tm-1",
        clock_in: time | None = None,
        clock_out: time | None = None,
        break_minutes: int = 0,
    ) -> AttendanceRecord:
        counter["n"] += 1
        return AttendanceRecord(
            record_id=f"att-{counter['n']}",
            member_id=member_id,
            work_date=date.fromisoformat(day),
            clock_in=clock_in,
            clock_out=clock_out,
            break_minutes=break_minutes,
            leave_type=leave_type,
        )

    return _make
