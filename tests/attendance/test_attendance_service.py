from __future__ import annotations

from datetime import date, time

import pytest

from src.hr_dashboard.hr_dashboard.attendance.memory_attendance_repository import InMemoryAttendanceRepository
from src.hr_dashboard.hr_dashboard.attendance.service import AttendanceService
from src.hr_dashboard.hr_dashboard.core.enums import LeaveType, Position
from src.hr_dashboard.hr_dashboard.core.exceptions import NotFoundError, ValidationError
from src.hr_dashboard.hr_dashboard.teams.memory_team_repository import InMemoryTeamMemberRepository
from src.hr_dashboard.hr_dashboard.teams.model import TeamMember
from src.hr_dashboard.hr_dashboard.users.model import User


def _service():
    members = InMemoryTeamMemberRepository(
        [
            TeamMember(member_id="tm-3", name="Emily Davis", position=Position.MEDICAL_BILLER, client_id="client-1"),
            TeamMember(member_id="tm-4", name="David Wilson", position=Position.MEDICAL_CODER, client_id="client-1"),
        ]
    )
    repo = InMemoryAttendanceRepository()
    return AttendanceService(repo, members), repo, members


def test_first_time_entry_creates_record_with_defaults():
    svc, repo, _ = _service()

    record = svc.update_day("tm-3", "2024-03-15", {"clock_in": "09:00"})

    assert record.clock_in == time(9, 0)
    assert record.leave_type == LeaveType.NONE
    assert record.break_minutes == 0
    assert repo.get_for_member_and_date("tm-3", date(2024, 3, 15)) == record


def test_second_entry_updates_same_record():
    svc, repo, _ = _service()

    first = svc.update_day("tm-3", "2024-03-15", {"clock_in": "09:00"})
    second = svc.update_day("tm-3", "2024-03-15", {"clock_out": "17:30", "break_minutes": 30})

    assert second.record_id == first.record_id
    assert second.clock_in == time(9, 0)
    assert second.clock_out == time(17, 30)
    assert len(repo.list_all()) == 1



def test_record_times_sets_clock_in_then_clock_out():
    svc, repo, _ = _service()

    first = svc.record_times("tm-3", "2024-03-15", clock_in="09:00")
    second = svc.record_times("tm-3", "2024-03-15", clock_out="17:00")

    assert second.record_id == first.record_id
    assert (second.clock_in, second.clock_out) == (time(9, 0), time(17, 0))
    assert svc.worked_hours(second) == 8.0
    assert len(repo.list_all()) == 1


def test_records_between_is_inclusive():
    svc, _, _ = _service()
    for day in ("2024-03-10", "2024-03-11", "2024-03-15", "2024-03-16"):
        svc.record_leave("tm-4", day, "vacation")

    records = svc.records_between(date(2024, 3, 11), date(2024, 3, 15))

    assert sorted(r.work_date for r in records) == [date(2024, 3, 11), date(2024, 3, 15)]

def test_record_leave_rejects_unknown_type_on_write():
    svc, _, _ = _service()

    with pytest.raises(ValidationError):
        svc.record_leave("tm-3", "2024-03-15", "sabbatical")

    record = svc.record_leave("tm-3", "2024-03-15", "sick")
    assert record.leave_type == LeaveType.SICK


def test_update_rejects_unknown_member_bad_date_and_fields():
    svc, _, _ = _service()

    with pytest.raises(NotFoundError):
        svc.update_day("tm-99", "2024-03-15", {"clock_in": "09:00"})
    with pytest.raises(ValidationError):
        svc.update_day("tm-3", "15/03/2024", {"clock_in": "09:00"})
    with pytest.raises(ValidationError):
        svc.update_day("tm-3", "2024-03-15", {"member_id": "tm-4"})
    with pytest.raises(ValidationError):
        svc.update_day("tm-3", "2024-03-15", {"clock_in": "9am"})


def test_validate_stamps_validator(fixed_now):
    svc, _, _ = _service()
    lead = User(user_id="2", username="john.lead", password_hash="x", name="John Smith", position=Position.TEAM_LEAD)
    svc.update_day("tm-3", fixed_now.date(), {"clock_in": "09:00"})

    record = svc.validate("tm-3", fixed_now.date(), validator=lead, now=fixed_now)

    assert record.validated_by == "2"
    assert record.validated_at == fixed_now


def test_validate_without_record_fails(fixed_now):
    svc, _, _ = _service()
    lead = User(user_id="2", username="john.lead", password_hash="x", name="John Smith", position=Position.TEAM_LEAD)

    with pytest.raises(ValidationError):
        svc.validate("tm-3", fixed_now.date(), validator=lead)


def test_day_sheet_hours_and_missing_rows():
    svc, _, members = _service()
    svc.update_day("tm-3", "2024-03-15", {"clock_in": "09:00", "clock_out": "17:30", "break_minutes": 30})

    rows = svc.day_sheet(members.list_all(), date(2024, 3, 15))

    assert [r["member"]["member_id"] for r in rows] == ["tm-3", "tm-4"]
    assert rows[0]["hours"] == "8.00"
    assert rows[1]["record"] is None
    assert rows[1]["hours"] == "0.00"


def test_import_is_all_or_nothing():
    svc, repo, _ = _service()
    rows = [
        {"member_id": "tm-3", "date": "2024-01-01", "leave_type": "sick"},
        {"member_id": "tm-3", "date": "2024-01-32", "leave_type": "sick"},
    ]

    with pytest.raises(ValidationError):
        svc.import_records(rows)
    assert repo.list_all() == []

    assert svc.import_records(rows[:1]) == 1
    assert len(svc.snapshot()) == 1
