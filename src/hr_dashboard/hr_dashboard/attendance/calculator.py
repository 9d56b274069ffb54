from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from .model import AttendanceRecord


class HoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_minutes(self, record: AttendanceRecord) -> int:
        raise NotImplementedError

    def worked_hours(self, record: AttendanceRecord) -> float:
        return self.worked_minutes(record) / 60


class StandardHoursCalculator(HoursCalculator):
    """Standard rule: (out - in) - break_minutes, not below 0."""

    def worked_minutes(self, record: AttendanceRecord) -> int:
        if not record.clock_in or not record.clock_out:
            return 0
        start = datetime.combine(record.work_date, record.clock_in)
        end = datetime.combine(record.work_date, record.clock_out)
        minutes = int((end - start).total_seconds() // 60)
        minutes -= int(record.break_minutes or 0)
        return max(minutes, 0)
