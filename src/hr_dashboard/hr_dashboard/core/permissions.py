from __future__ import annotations

from .constants import POSITION_RANKS
from .enums import Position


def rank(position: Position | str) -> int:
    """Capability rank of a position; unknown positions rank lowest."""
    key = position.value if isinstance(position, Position) else str(position)
    return POSITION_RANKS.get(key, 0)


def outranks_or_equals(actor: Position | str, target: Position | str) -> bool:
    return rank(actor) >= rank(target)


def is_super_admin(position: Position | str) -> bool:
    return position == Position.SUPER_ADMIN
