from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.constants import DEFAULT_SHIFT
from ..core.enums import Position


@dataclass(frozen=True)
class Client:
    """A billing client that team members are assigned to."""

    client_id: str
    name: str
    code: str
    active: bool = True

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TeamMember:
    """Domain entity: an employee whose attendance is tracked.

    Note: plain data object, not tied to any storage.
    """

    member_id: str
    name: str
    position: Position
    client_id: str
    shift: str = DEFAULT_SHIFT
    team_lead_id: Optional[str] = None
    active: bool = True

    def to_dict(self) -> dict:
        data = asdict(self)
        data["position"] = self.position.value
        return data
