from __future__ import annotations

from typing import Iterable

from ..common.memory_store import InMemoryStore
from .model import Client, TeamMember


class InMemoryClientRepository(InMemoryStore[Client]):
    def __init__(self, clients: Iterable[Client] = ()):
        super().__init__(lambda c: c.client_id, id_prefix="client", items=clients)


class InMemoryTeamMemberRepository(InMemoryStore[TeamMember]):
    def __init__(self, members: Iterable[TeamMember] = ()):
        super().__init__(lambda m: m.member_id, id_prefix="tm", items=members)
