"""Example: Bradford Factor scores through the service layer (no Flask).

Controllers are a thin layer; the scoring itself is a pure function over a
snapshot of attendance records.
"""

from datetime import date

from src.hr_dashboard.hr_dashboard.container import build_container


def main():
    rows = [
        {"member_id": "tm-3", "date": "2024-01-01", "leave_type": "sick"},
        {"member_id": "tm-3", "date": "2024-01-02", "leave_type": "sick"},
        {"member_id": "tm-3", "date": "2024-01-04", "leave_type": "sick"},
        {"member_id": "tm-4", "date": "2024-02-05", "leave_type": "unpaid"},
    ]
    container = build_container(attendance_rows=rows)
    records = container.attendance_service.snapshot()

    for member in container.members_repo.list_all():
        score = container.bradford_service.member_score(member.member_id, records, today=date(2024, 6, 30))
        print(f"{member.name:<16} {score.formula:<16} {score.level.value:<9} {score.description}")


if __name__ == "__main__":
    main()
