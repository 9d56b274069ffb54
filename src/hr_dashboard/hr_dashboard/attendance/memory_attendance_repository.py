from __future__ import annotations

import itertools
from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..core.exceptions import ValidationError
from .model import AttendanceRecord


class InMemoryAttendanceRepository:
    """Process-local attendance store keyed by (member_id, work_date)."""

    def __init__(self, records: Sequence[AttendanceRecord] = ()):
        self._by_member_date: dict[tuple[str, date], AttendanceRecord] = {}
        self._ids = itertools.count(1)
        for record in records:
            self.add(record)

    def next_id(self) -> str:
        return f"att-{next(self._ids)}"

    def list_all(self) -> Sequence[AttendanceRecord]:
        return sorted(self._by_member_date.values(), key=lambda r: (r.work_date, r.member_id))

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        return [r for r in self.list_all() if start_date <= r.work_date <= end_date]

    def get_for_member_and_date(self, member_id: str, work_date: date) -> Optional[AttendanceRecord]:
        return self._by_member_date.get((member_id, work_date))

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        key = (record.member_id, record.work_date)
        if key in self._by_member_date:
            raise ValidationError(f"Attendance for {record.member_id} on {record.work_date} already exists")
        self._by_member_date[key] = record
        return record

    def update(self, record_id: str, **changes) -> Optional[AttendanceRecord]:
        for key, record in self._by_member_date.items():
            if record.record_id == record_id:
                updated = replace(record, **changes)
                if (updated.member_id, updated.work_date) != key:
                    raise ValidationError("Member and date of a record cannot change")
                self._by_member_date[key] = updated
                return updated
        return None
