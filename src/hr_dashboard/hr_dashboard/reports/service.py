from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..attendance.service import AttendanceService
from ..bradford.service import BradfordService, BradfordSummary
from ..common.datetime_utils import now_local, start_of_week
from ..teams.service import TeamService
from ..users.model import User


@dataclass(frozen=True)
class OverviewData:
    total_members: int
    total_clients: int
    present: int
    on_leave: int
    absent: int
    attendance_rate: int
    total_hours_today: float
    week_hours: float
    validated: int
    bradford: BradfordSummary

    def to_dict(self, bradford: BradfordService) -> dict:
        return {
            "total_members": self.total_members,
            "total_clients": self.total_clients,
            "present": self.present,
            "on_leave": self.on_leave,
            "absent": self.absent,
            "attendance_rate": self.attendance_rate,
            "total_hours_today": round(self.total_hours_today, 2),
            "week_hours": round(self.week_hours, 2),
            "validated": self.validated,
            "bradford": {
                "high_risk": self.bradford.high_risk,
                "concerns": self.bradford.concerns,
                "flagged": [
                    {"member": s.member.to_dict(), "badge": bradford.badge(s.score)}
                    for s in self.bradford.flagged
                ],
            },
        }


class OverviewService:
    """Read-model for the overview tab: today's presence, hours and Bradford risk."""

    def __init__(self, teams: TeamService, attendance: AttendanceService, bradford: BradfordService):
        self._teams = teams
        self._attendance = attendance
        self._bradford = bradford

    def build(self, actor: User, *, today: Optional[date] = None) -> OverviewData:
        today = today or now_local().date()
        clients = self._teams.visible_clients(actor)
        members = self._teams.visible_members(actor)
        member_ids = {m.member_id for m in members}

        records = self._attendance.snapshot()
        week_records = [
            r for r in self._attendance.records_between(start_of_week(today), today) if r.member_id in member_ids
        ]
        today_records = [r for r in week_records if r.work_date == today]

        present = sum(1 for r in today_records if r.is_present)
        rate = round(present / len(members) * 100) if members else 0

        return OverviewData(
            total_members=len(members),
            total_clients=len(clients),
            present=present,
            on_leave=sum(1 for r in today_records if r.is_on_leave),
            absent=len(members) - len(today_records),
            attendance_rate=rate,
            total_hours_today=self._attendance.total_hours(today_records),
            week_hours=self._attendance.total_hours(week_records),
            validated=sum(1 for r in today_records if r.validated_by),
            bradford=self._bradford.summary(members, records, today=today),
        )
