from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from ..core.enums import Position


@dataclass(frozen=True)
class User:
    """Domain entity: a dashboard user (team lead, manager, admin).

    Note: plain data object; password_hash is never serialized.
    """

    user_id: str
    username: str
    password_hash: str
    name: str
    position: Position
    assigned_clients: tuple[str, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)

    def to_dict(self) -> dict:
        return {
            "id": self.user_id,
            "username": self.username,
            "name": self.name,
            "position": self.position.value,
            "assigned_clients": list(self.assigned_clients),
            "created_at": self.created_at.isoformat(),
        }
