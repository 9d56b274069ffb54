from __future__ import annotations

from enum import Enum


class LeaveType(str, Enum):
    """Leave recorded against an attendance day."""

    NONE = "none"
    SICK = "sick"
    VACATION = "vacation"
    HOLIDAY = "holiday"
    UNPAID = "unpaid"


class BradfordLevel(str, Enum):
    """Severity tier derived from a Bradford Factor score."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class Position(str, Enum):
    """Job positions used for the role hierarchy."""

    SUPER_ADMIN = "Super Admin"
    SENIOR_TEAM_LEAD = "Senior Team Lead"
    TEAM_LEAD = "Team Lead"
    ASSISTANT_TEAM_LEAD = "Assistant Team Lead"
    MEDICAL_BILLER = "Medical Biller"
    MEDICAL_CODER = "Medical Coder"
    QA_SPECIALIST = "QA Specialist"
    OPERATIONS_MANAGER = "Operations Manager"
