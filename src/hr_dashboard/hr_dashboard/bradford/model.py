from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import BradfordLevel, LeaveType


@dataclass(frozen=True)
class AbsencePeriod:
    """A maximal run of consecutive absence days sharing one leave type."""

    start_date: date
    end_date: date
    days: int
    type: LeaveType

    def to_dict(self) -> dict:
        return {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "days": self.days,
            "type": self.type.value,
        }


@dataclass(frozen=True)
class BradfordScore:
    """Scoring outcome for one member over one window."""

    score: int
    spells: int
    days: int
    level: BradfordLevel
    description: str

    @property
    def formula(self) -> str:
        return f"{self.spells}² × {self.days} = {self.score}"

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "spells": self.spells,
            "days": self.days,
            "level": self.level.value,
            "description": self.description,
            "formula": self.formula,
        }
