from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Client, TeamMember


class ClientRepository(Protocol):
    def next_id(self) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[Client]:
        raise NotImplementedError

    def get_by_id(self, client_id: str) -> Optional[Client]:
        raise NotImplementedError

    def add(self, client: Client) -> Client:
        raise NotImplementedError

    def update(self, client_id: str, **changes) -> Optional[Client]:
        raise NotImplementedError

    def delete_by_id(self, client_id: str) -> bool:
        raise NotImplementedError


class TeamMemberRepository(Protocol):
    def next_id(self) -> str:
        raise NotImplementedError

    def list_all(self) -> Sequence[TeamMember]:
        raise NotImplementedError

    def get_by_id(self, member_id: str) -> Optional[TeamMember]:
        raise NotImplementedError

    def add(self, member: TeamMember) -> TeamMember:
        raise NotImplementedError

    def update(self, member_id: str, **changes) -> Optional[TeamMember]:
        raise NotImplementedError

    def delete_by_id(self, member_id: str) -> bool:
        raise NotImplementedError
