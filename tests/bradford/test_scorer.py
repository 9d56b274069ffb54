from __future__ import annotations

from datetime import date, time

import pytest

from src.hr_dashboard.hr_dashboard.bradford.model import AbsencePeriod
from src.hr_dashboard.hr_dashboard.bradford.scorer import (
    calculate_bradford_factor,
    classify,
    get_member_bradford_score,
)
from src.hr_dashboard.hr_dashboard.core.enums import BradfordLevel, LeaveType


def _period(days: int) -> AbsencePeriod:
    return AbsencePeriod(start_date=date(2024, 1, 1), end_date=date(2024, 1, days), days=days, type=LeaveType.SICK)


def test_formula_two_spells_eight_days():
    result = calculate_bradford_factor([_period(3), _period(5)])

    assert result.spells == 2
    assert result.days == 8
    assert result.score == 32
    assert result.level == BradfordLevel.LOW
    assert result.formula == "2² × 8 = 32"


def test_no_periods_scores_zero():
    result = calculate_bradford_factor([])

    assert (result.score, result.spells, result.days) == (0, 0, 0)
    assert result.level == BradfordLevel.LOW
    assert result.description == "Good attendance"


@pytest.mark.parametrize(
    "score, level, description",
    [
        (0, BradfordLevel.LOW, "Good attendance"),
        (49, BradfordLevel.LOW, "Good attendance"),
        (50, BradfordLevel.MEDIUM, "Monitor attendance"),
        (124, BradfordLevel.MEDIUM, "Monitor attendance"),
        (125, BradfordLevel.HIGH, "Attendance concern - verbal warning"),
        (199, BradfordLevel.HIGH, "Attendance concern - verbal warning"),
        (200, BradfordLevel.CRITICAL, "Serious attendance issue - written warning"),
        (399, BradfordLevel.CRITICAL, "Serious attendance issue - written warning"),
        (400, BradfordLevel.CRITICAL, "Critical attendance issue - disciplinary action"),
        (10_000, BradfordLevel.CRITICAL, "Critical attendance issue - disciplinary action"),
    ],
)
def test_threshold_boundaries(score, level, description):
    assert classify(score) == (level, description)


def test_critical_level_keeps_two_descriptions():
    # 5 one-day spells: 25 * 5 = 125 (high); 6 spells: 36 * 6 = 216; 8 spells: 64 * 8 = 512
    written = calculate_bradford_factor([_period(1)] * 6)
    disciplinary = calculate_bradford_factor([_period(1)] * 8)

    assert written.score == 216
    assert disciplinary.score == 512
    assert written.level == disciplinary.level == BradfordLevel.CRITICAL
    assert written.description != disciplinary.description


def test_member_score_filters_member_and_rolling_window(make_record):
    today = date(2024, 6, 30)
    records = [
        make_record("2024-06-03", LeaveType.SICK),
        make_record("2024-06-04", LeaveType.SICK),
        make_record("2024-06-10", LeaveType.UNPAID),
        make_record("2024-06-11", LeaveType.SICK, member_id="tm-2"),
        make_record("2023-06-29", LeaveType.SICK),  # before the 12-month window
        make_record("2023-06-30", LeaveType.SICK),  # first day of the window
    ]

    result = get_member_bradford_score("tm-1", records, 12, today=today)

    assert result.spells == 3
    assert result.days == 4
    assert result.score == 36


def test_member_score_shorter_window(make_record):
    records = [make_record("2024-01-10", LeaveType.SICK), make_record("2024-06-01", LeaveType.SICK)]

    result = get_member_bradford_score("tm-1", records, 3, today=date(2024, 6, 30))

    assert (result.spells, result.days) == (1, 1)


def test_member_score_is_idempotent_and_order_independent(make_record):
    records = [
        make_record("2024-05-01", LeaveType.SICK),
        make_record("2024-05-02", LeaveType.SICK),
        make_record("2024-05-03", LeaveType.UNPAID, clock_in=time(10, 0)),
        make_record("2024-05-20", LeaveType.UNPAID),
    ]
    today = date(2024, 6, 1)

    first = get_member_bradford_score("tm-1", records, today=today)
    second = get_member_bradford_score("tm-1", records, today=today)
    reversed_order = get_member_bradford_score("tm-1", list(reversed(records)), today=today)

    assert first == second == reversed_order
    assert first.to_dict() == reversed_order.to_dict()


def test_unknown_member_scores_low(make_record):
    result = get_member_bradford_score("nobody", [make_record("2024-05-01", LeaveType.SICK)], today=date(2024, 6, 1))

    assert result.score == 0
    assert result.level == BradfordLevel.LOW
