from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    """Repository interface for attendance records.

    Note (DIP): services depend on this interface, not on a concrete store.
    """

    def next_id(self) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_member_and_date(self, member_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def add(self, record: AttendanceRecord) -> AttendanceRecord:
        raise NotImplementedError

    def update(self, record_id: str, **changes) -> Optional[AttendanceRecord]:
        raise NotImplementedError
