from __future__ import annotations

from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import now_local, subtract_months
from ..core.constants import (
    BRADFORD_THRESHOLD_CRITICAL,
    BRADFORD_THRESHOLD_HIGH,
    BRADFORD_THRESHOLD_LOW,
    BRADFORD_THRESHOLD_MEDIUM,
    DEFAULT_ROLLING_MONTHS,
)
from ..core.enums import BradfordLevel
from .extractor import extract_absence_periods
from .model import AbsencePeriod, BradfordScore

# (exclusive upper bound, level, description), checked in order.
_BANDS = (
    (BRADFORD_THRESHOLD_LOW, BradfordLevel.LOW, "Good attendance"),
    (BRADFORD_THRESHOLD_MEDIUM, BradfordLevel.MEDIUM, "Monitor attendance"),
    (BRADFORD_THRESHOLD_HIGH, BradfordLevel.HIGH, "Attendance concern - verbal warning"),
    (BRADFORD_THRESHOLD_CRITICAL, BradfordLevel.CRITICAL, "Serious attendance issue - written warning"),
)
_TOP_BAND = (BradfordLevel.CRITICAL, "Critical attendance issue - disciplinary action")


def classify(score: int) -> tuple[BradfordLevel, str]:
    """Map a score to (level, description).

    Scores from 200 upwards are all CRITICAL; only the description tells the
    written-warning band apart from the disciplinary band at 400+.
    """
    for upper, level, description in _BANDS:
        if score < upper:
            return level, description
    return _TOP_BAND


def calculate_bradford_factor(periods: Sequence[AbsencePeriod]) -> BradfordScore:
    spells = len(periods)
    days = sum(p.days for p in periods)
    score = spells * spells * days
    level, description = classify(score)
    return BradfordScore(score=score, spells=spells, days=days, level=level, description=description)


def get_member_bradford_score(
    member_id: str,
    all_records: Iterable[AttendanceRecord],
    rolling_months: int = DEFAULT_ROLLING_MONTHS,
    *,
    today: Optional[date] = None,
) -> BradfordScore:
    """Score one member over the trailing rolling_months calendar months."""
    end_date = today or now_local().date()
    start_date = subtract_months(end_date, rolling_months)

    member_records = [r for r in all_records if r.member_id == member_id]
    periods = extract_absence_periods(member_records, start_date, end_date)
    return calculate_bradford_factor(periods)
