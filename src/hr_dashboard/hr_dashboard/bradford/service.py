from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceRecord
from ..core.constants import DEFAULT_ROLLING_MONTHS
from ..core.enums import BradfordLevel
from ..teams.model import TeamMember
from .model import BradfordScore
from .scorer import get_member_bradford_score


@dataclass(frozen=True)
class MemberBradfordScore:
    member: TeamMember
    score: BradfordScore


@dataclass(frozen=True)
class BradfordSummary:
    scores: list[MemberBradfordScore]
    high_risk: int
    concerns: int

    @property
    def flagged(self) -> list[MemberBradfordScore]:
        """Members above LOW, worst first."""
        items = [s for s in self.scores if s.score.level != BradfordLevel.LOW]
        return sorted(items, key=lambda s: s.score.score, reverse=True)


class BradfordService:
    """Applies the Bradford scorer to teams.

    Takes record snapshots from the caller; never reads repositories itself.
    """

    def __init__(self, *, rolling_months: int = DEFAULT_ROLLING_MONTHS):
        self._rolling_months = int(rolling_months)

    @property
    def rolling_months(self) -> int:
        return self._rolling_months

    def member_score(
        self,
        member_id: str,
        records: Sequence[AttendanceRecord],
        *,
        rolling_months: Optional[int] = None,
        today: Optional[date] = None,
    ) -> BradfordScore:
        months = self._rolling_months if rolling_months is None else int(rolling_months)
        return get_member_bradford_score(member_id, records, months, today=today)

    def team_scores(
        self,
        members: Sequence[TeamMember],
        records: Sequence[AttendanceRecord],
        *,
        rolling_months: Optional[int] = None,
        today: Optional[date] = None,
    ) -> list[MemberBradfordScore]:
        return [
            MemberBradfordScore(
                member=m,
                score=self.member_score(m.member_id, records, rolling_months=rolling_months, today=today),
            )
            for m in members
        ]

    def summary(
        self,
        members: Sequence[TeamMember],
        records: Sequence[AttendanceRecord],
        *,
        rolling_months: Optional[int] = None,
        today: Optional[date] = None,
    ) -> BradfordSummary:
        scores = self.team_scores(members, records, rolling_months=rolling_months, today=today)
        high_risk = sum(1 for s in scores if s.score.level in (BradfordLevel.HIGH, BradfordLevel.CRITICAL))
        concerns = sum(1 for s in scores if s.score.level == BradfordLevel.MEDIUM)
        return BradfordSummary(scores=scores, high_risk=high_risk, concerns=concerns)

    def badge(self, score: BradfordScore) -> dict:
        """View-model for the score badge and its tooltip."""
        css = {
            BradfordLevel.LOW: "badge-low",
            BradfordLevel.MEDIUM: "badge-medium",
            BradfordLevel.HIGH: "badge-high",
            BradfordLevel.CRITICAL: "badge-critical",
        }.get(score.level, "badge-low")

        return {
            "label": f"BF: {score.score}",
            "level": score.level.value,
            "css_class": css,
            "description": score.description,
            "breakdown": f"{score.spells} absence spells • {score.days} days total",
            "formula": f"Formula: {score.formula}",
        }
