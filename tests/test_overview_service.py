from __future__ import annotations

from datetime import date

from src.hr_dashboard.hr_dashboard.container import build_container
from src.hr_dashboard.hr_dashboard.core.enums import Position
from src.hr_dashboard.hr_dashboard.users.model import User

TODAY = date(2024, 3, 15)

ROWS = [
    {"member_id": "tm-1", "date": "2024-03-15", "clock_in": "09:00", "clock_out": "17:00", "break_minutes": 30, "leave_type": "none"},
    {"member_id": "tm-2", "date": "2024-03-15", "leave_type": "vacation"},
    {"member_id": "tm-3", "date": "2024-03-13", "clock_in": "09:00", "clock_out": "17:00"},
] + [
    {"member_id": "tm-4", "date": f"2024-01-{day:02d}", "leave_type": "sick"}
    for day in (2, 5, 9, 12, 16, 19)
]


def test_overview_for_super_admin():
    container = build_container(attendance_rows=ROWS)
    admin = container.users_repo.get_by_username("admin")

    data = container.overview_service.build(admin, today=TODAY)

    assert data.total_members == 4
    assert data.total_clients == 3
    assert data.present == 1
    assert data.on_leave == 1
    assert data.absent == 2
    assert data.attendance_rate == 25
    assert data.total_hours_today == 7.5
    assert data.week_hours == 15.5
    assert data.validated == 0
    assert data.bradford.high_risk == 1
    assert data.bradford.concerns == 0
    assert [s.member.member_id for s in data.bradford.flagged] == ["tm-4"]
    assert data.bradford.flagged[0].score.score == 216


def test_overview_serializes_badges():
    container = build_container(attendance_rows=ROWS)
    lead = container.users_repo.get_by_username("john.lead")

    payload = container.overview_service.build(lead, today=TODAY).to_dict(container.bradford_service)

    assert payload["total_clients"] == 1
    flagged = payload["bradford"]["flagged"]
    assert flagged[0]["badge"]["label"] == "BF: 216"
    assert flagged[0]["badge"]["description"] == "Serious attendance issue - written warning"


def test_overview_without_assigned_clients_is_empty():
    container = build_container(attendance_rows=ROWS)
    loner = User(user_id="9", username="loner", password_hash="x", name="Lo Ner", position=Position.TEAM_LEAD)

    data = container.overview_service.build(loner, today=TODAY)

    assert data.total_members == 0
    assert data.attendance_rate == 0
    assert data.bradford.scores == []
