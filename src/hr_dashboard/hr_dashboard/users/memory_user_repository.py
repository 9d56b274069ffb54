from __future__ import annotations

from typing import Iterable, Optional

from ..common.memory_store import InMemoryStore
from .model import User


class InMemoryUserRepository(InMemoryStore[User]):
    def __init__(self, users: Iterable[User] = ()):
        super().__init__(lambda u: u.user_id, id_prefix="user", items=users)

    def get_by_username(self, username: str) -> Optional[User]:
        for user in self.list_all():
            if user.username == username:
                return user
        return None
