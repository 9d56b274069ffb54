from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import now_local, parse_clock_time, parse_iso_date
from ..common.validators import require_non_negative
from ..core.constants import DEFAULT_BREAK_MINUTES
from ..core.enums import LeaveType
from ..core.exceptions import NotFoundError, ValidationError
from ..teams.model import TeamMember
from ..teams.repository import TeamMemberRepository
from ..users.model import User
from .calculator import HoursCalculator, StandardHoursCalculator
from .model import AttendanceRecord
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

_EDITABLE_FIELDS = {"clock_in", "clock_out", "leave_type", "break_minutes", "notes"}


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        members: TeamMemberRepository,
        *,
        calculator: HoursCalculator | None = None,
    ):
        self._attendance = attendance
        self._members = members
        self._calculator = calculator or StandardHoursCalculator()

    def snapshot(self) -> list[AttendanceRecord]:
        """All records as an immutable-item list, safe to hand to pure scoring code."""
        return list(self._attendance.list_all())

    def import_records(self, rows: Iterable[dict]) -> int:
        """Load raw records; a malformed date aborts the import before anything is stored."""
        records = []
        for row in rows:
            data = dict(row)
            data.setdefault("record_id", self._attendance.next_id())
            records.append(AttendanceRecord.from_dict(data))

        for record in records:
            self._attendance.add(record)
        logger.info("Imported %d attendance records", len(records))
        return len(records)

    def _clean_changes(self, changes: dict) -> dict:
        unknown = set(changes) - _EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Unknown attendance fields: {', '.join(sorted(unknown))}")

        fields = {}
        for name in ("clock_in", "clock_out"):
            if name in changes:
                fields[name] = parse_clock_time(changes[name])
        if "leave_type" in changes:
            value = changes["leave_type"]
            try:
                fields["leave_type"] = LeaveType(value) if value else LeaveType.NONE
            except ValueError:
                raise ValidationError(f"Unknown leave type: {value}") from None
        if "break_minutes" in changes:
            fields["break_minutes"] = require_non_negative(changes["break_minutes"], "Break minutes")
        if "notes" in changes:
            fields["notes"] = changes["notes"] or None
        return fields

    def update_day(self, member_id: str, work_date, changes: dict) -> AttendanceRecord:
        """Create or update the member's record for one day (times, leave, break, notes)."""
        if not self._members.get_by_id(member_id):
            raise NotFoundError("Team member not found")
        work_date = parse_iso_date(work_date)
        fields = self._clean_changes(changes)

        existing = self._attendance.get_for_member_and_date(member_id, work_date)
        if existing:
            return self._attendance.update(existing.record_id, **fields)

        record = AttendanceRecord(
            record_id=self._attendance.next_id(),
            member_id=member_id,
            work_date=work_date,
            break_minutes=DEFAULT_BREAK_MINUTES,
            leave_type=LeaveType.NONE,
        )
        if fields:
            record = replace(record, **fields)
        return self._attendance.add(record)

    def record_times(self, member_id: str, work_date, *, clock_in=None, clock_out=None) -> AttendanceRecord:
        """Set clock-in and/or clock-out; None leaves a time untouched, "" clears it."""
        changes = {}
        if clock_in is not None:
            changes["clock_in"] = clock_in
        if clock_out is not None:
            changes["clock_out"] = clock_out
        return self.update_day(member_id, work_date, changes)

    def record_leave(self, member_id: str, work_date, leave_type) -> AttendanceRecord:
        return self.update_day(member_id, work_date, {"leave_type": leave_type})

    def records_between(self, start_date: date, end_date: date) -> list[AttendanceRecord]:
        return list(self._attendance.list_between(start_date=start_date, end_date=end_date))

    def validate(self, member_id: str, work_date, *, validator: User, now: datetime | None = None) -> AttendanceRecord:
        work_date = parse_iso_date(work_date)
        record = self._attendance.get_for_member_and_date(member_id, work_date)
        if not record:
            raise ValidationError("No attendance recorded for that day")

        now = now or now_local()
        logger.info("Attendance %s validated by %s", record.record_id, validator.username)
        return self._attendance.update(record.record_id, validated_by=validator.user_id, validated_at=now)

    def worked_hours(self, record: Optional[AttendanceRecord]) -> float:
        return self._calculator.worked_hours(record) if record else 0.0

    def total_hours(self, records: Iterable[AttendanceRecord]) -> float:
        return sum(self.worked_hours(r) for r in records)

    def day_sheet(self, members: Sequence[TeamMember], work_date: date) -> list[dict]:
        """One row per member for the attendance tab of a given day."""
        rows = []
        for member in members:
            record = self._attendance.get_for_member_and_date(member.member_id, work_date)
            rows.append(
                {
                    "member": member.to_dict(),
                    "record": record.to_dict() if record else None,
                    "hours": f"{self.worked_hours(record):.2f}",
                    "validated": bool(record and record.validated_by),
                }
            )
        return rows
