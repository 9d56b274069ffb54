from __future__ import annotations

from datetime import date, time

import pytest

from src.hr_dashboard.hr_dashboard.attendance.model import AttendanceRecord
from src.hr_dashboard.hr_dashboard.core.enums import LeaveType
from src.hr_dashboard.hr_dashboard.core.exceptions import ValidationError


def test_from_dict_parses_boundary_values():
    record = AttendanceRecord.from_dict(
        {
            "id": "att-9",
            "member_id": "tm-3",
            "date": "2024-01-05",
            "clock_in": "08:45",
            "clock_out": "17:15",
            "break_minutes": 30,
            "leave_type": "none",
        }
    )

    assert record.work_date == date(2024, 1, 5)
    assert record.clock_in == time(8, 45)
    assert record.leave_type == LeaveType.NONE
    assert record.to_dict()["clock_out"] == "17:15"


@pytest.mark.parametrize("bad_date", ["2024-13-01", "2024-02-30", "05/01/2024", "", None])
def test_from_dict_rejects_malformed_dates(bad_date):
    with pytest.raises(ValidationError):
        AttendanceRecord.from_dict({"id": "x", "member_id": "tm-1", "date": bad_date})


def test_unknown_or_missing_leave_type_is_not_recorded():
    unknown = AttendanceRecord.from_dict({"id": "a", "member_id": "tm-1", "date": "2024-01-01", "leave_type": "bereavement"})
    missing = AttendanceRecord.from_dict({"id": "b", "member_id": "tm-1", "date": "2024-01-02"})

    assert unknown.leave_type is None
    assert missing.leave_type is None


def test_empty_clock_in_is_absent():
    record = AttendanceRecord.from_dict({"id": "a", "member_id": "tm-1", "date": "2024-01-01", "clock_in": "", "leave_type": "sick"})

    assert record.clock_in is None


def test_presence_flags(make_record):
    assert make_record("2024-01-01", LeaveType.NONE, clock_in=time(9, 0)).is_present
    assert make_record("2024-01-01", None, clock_in=time(9, 0)).is_present
    assert not make_record("2024-01-01", LeaveType.SICK, clock_in=time(9, 0)).is_present
    assert make_record("2024-01-01", LeaveType.VACATION).is_on_leave
    assert not make_record("2024-01-01", LeaveType.NONE).is_on_leave
