from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import format_clock_time, parse_clock_time, parse_iso_date
from ..common.validators import require_non_empty, require_non_negative
from ..core.enums import LeaveType
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


def parse_leave_type(value) -> Optional[LeaveType]:
    """Map a raw leave type to LeaveType; unknown or missing values become None."""
    if value is None or value == "":
        return None
    try:
        return LeaveType(value)
    except ValueError:
        logger.warning("Unknown leave type %r treated as not recorded", value)
        return None


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one member's attendance entry for one calendar day."""

    record_id: str
    member_id: str
    work_date: date
    clock_in: Optional[time] = None
    clock_out: Optional[time] = None
    break_minutes: int = 0
    leave_type: Optional[LeaveType] = None
    notes: Optional[str] = None
    validated_by: Optional[str] = None
    validated_at: Optional[datetime] = None

    @property
    def is_present(self) -> bool:
        return self.clock_in is not None and not self.is_on_leave

    @property
    def is_on_leave(self) -> bool:
        return self.leave_type is not None and self.leave_type != LeaveType.NONE

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        """Build a record from raw (JSON-like) values.

        Dates and clock times must parse; leave types are lenient.
        """
        validated_at = data.get("validated_at")
        if isinstance(validated_at, str):
            try:
                validated_at = datetime.fromisoformat(validated_at)
            except ValueError:
                raise ValidationError(f"Invalid timestamp: {validated_at!r}") from None
        return cls(
            record_id=require_non_empty(data.get("record_id") or data.get("id"), "Record id"),
            member_id=require_non_empty(data.get("member_id"), "Member id"),
            work_date=parse_iso_date(data.get("date") or data.get("work_date")),
            clock_in=parse_clock_time(data.get("clock_in")),
            clock_out=parse_clock_time(data.get("clock_out")),
            break_minutes=require_non_negative(data.get("break_minutes") or 0, "Break minutes"),
            leave_type=parse_leave_type(data.get("leave_type")),
            notes=data.get("notes"),
            validated_by=data.get("validated_by"),
            validated_at=validated_at,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.record_id,
            "member_id": self.member_id,
            "date": self.work_date.isoformat(),
            "clock_in": format_clock_time(self.clock_in),
            "clock_out": format_clock_time(self.clock_out),
            "break_minutes": self.break_minutes,
            "leave_type": self.leave_type.value if self.leave_type else None,
            "notes": self.notes,
            "validated_by": self.validated_by,
            "validated_at": self.validated_at.isoformat() if self.validated_at else None,
        }
