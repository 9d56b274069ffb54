from __future__ import annotations

import logging
from typing import Optional

from ..common.datetime_utils import parse_clock_time
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_SHIFT
from ..core.enums import Position
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.permissions import is_super_admin, outranks_or_equals
from ..users.model import User
from .model import Client, TeamMember
from .repository import ClientRepository, TeamMemberRepository

logger = logging.getLogger(__name__)


def _parse_position(value) -> Position:
    try:
        return Position(value)
    except ValueError:
        raise ValidationError(f"Unknown position: {value}") from None


def _validate_shift(value: str) -> str:
    shift = require_non_empty(value, "Shift")
    start, sep, end = shift.partition("-")
    if not sep or parse_clock_time(start) is None or parse_clock_time(end) is None:
        raise ValidationError(f"Invalid shift: {value!r} (expected HH:MM-HH:MM)")
    return shift


class TeamService:
    """Use case: manage clients and team members, scoped by the actor's clients."""

    def __init__(self, clients: ClientRepository, members: TeamMemberRepository):
        self._clients = clients
        self._members = members

    # region Visibility
    def visible_clients(self, actor: User) -> list[Client]:
        clients = list(self._clients.list_all())
        if is_super_admin(actor.position):
            return clients
        return [c for c in clients if c.client_id in actor.assigned_clients]

    def visible_members(self, actor: User, *, client_id: Optional[str] = None) -> list[TeamMember]:
        members = [m for m in self._members.list_all() if m.active]
        if not is_super_admin(actor.position):
            client_ids = {c.client_id for c in self.visible_clients(actor)}
            members = [m for m in members if m.client_id in client_ids]
        if client_id:
            members = [m for m in members if m.client_id == client_id]
        return sorted(members, key=lambda m: m.name)

    def _require_client_access(self, actor: User, client_id: str) -> Client:
        client = self._clients.get_by_id(client_id)
        if not client:
            raise NotFoundError("Client not found")
        if not is_super_admin(actor.position) and client_id not in actor.assigned_clients:
            raise AuthorizationError("Client is not assigned to you")
        return client

    # endregion

    # region Clients
    def create_client(self, *, actor: User, name: str, code: str) -> Client:
        client = Client(
            client_id=self._clients.next_id(),
            name=require_non_empty(name, "Client name"),
            code=require_non_empty(code, "Client code").upper(),
        )
        self._clients.add(client)
        logger.info("Client %s created by %s", client.code, actor.username)
        return client

    def update_client(self, *, actor: User, client_id: str, changes: dict) -> Client:
        self._require_client_access(actor, client_id)
        fields = {}
        if "name" in changes:
            fields["name"] = require_non_empty(changes["name"], "Client name")
        if "code" in changes:
            fields["code"] = require_non_empty(changes["code"], "Client code").upper()
        if "active" in changes:
            fields["active"] = bool(changes["active"])
        return self._clients.update(client_id, **fields)

    def delete_client(self, *, actor: User, client_id: str) -> None:
        self._require_client_access(actor, client_id)
        if any(m.client_id == client_id and m.active for m in self._members.list_all()):
            raise ValidationError("Client still has active team members")
        self._clients.delete_by_id(client_id)
        logger.info("Client %s deleted by %s", client_id, actor.username)

    # endregion

    # region Members
    def _require_member_authority(self, actor: User, position: Position) -> None:
        if not outranks_or_equals(actor.position, position):
            raise AuthorizationError(f"{actor.position.value} cannot manage a {position.value}")

    def _check_team_lead(self, team_lead_id: Optional[str]) -> Optional[str]:
        if not team_lead_id:
            return None
        if not self._members.get_by_id(team_lead_id):
            raise ValidationError("Team lead not found")
        return team_lead_id

    def create_member(
        self,
        *,
        actor: User,
        name: str,
        position,
        client_id: str,
        shift: str = DEFAULT_SHIFT,
        team_lead_id: Optional[str] = None,
    ) -> TeamMember:
        position = _parse_position(position)
        self._require_member_authority(actor, position)
        self._require_client_access(actor, require_non_empty(client_id, "Client"))

        member = TeamMember(
            member_id=self._members.next_id(),
            name=require_non_empty(name, "Member name"),
            position=position,
            client_id=client_id,
            shift=_validate_shift(shift),
            team_lead_id=self._check_team_lead(team_lead_id),
        )
        self._members.add(member)
        logger.info("Team member %s added to %s by %s", member.member_id, client_id, actor.username)
        return member

    def update_member(self, *, actor: User, member_id: str, changes: dict) -> TeamMember:
        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Team member not found")
        self._require_member_authority(actor, member.position)
        self._require_client_access(actor, member.client_id)

        fields = {}
        if "name" in changes:
            fields["name"] = require_non_empty(changes["name"], "Member name")
        if "position" in changes:
            fields["position"] = _parse_position(changes["position"])
            self._require_member_authority(actor, fields["position"])
        if "client_id" in changes:
            self._require_client_access(actor, changes["client_id"])
            fields["client_id"] = changes["client_id"]
        if "shift" in changes:
            fields["shift"] = _validate_shift(changes["shift"])
        if "team_lead_id" in changes:
            if changes["team_lead_id"] == member_id:
                raise ValidationError("A member cannot lead themselves")
            fields["team_lead_id"] = self._check_team_lead(changes["team_lead_id"])
        if "active" in changes:
            fields["active"] = bool(changes["active"])
        return self._members.update(member_id, **fields)

    def delete_member(self, *, actor: User, member_id: str) -> None:
        member = self._members.get_by_id(member_id)
        if not member:
            raise NotFoundError("Team member not found")
        self._require_member_authority(actor, member.position)
        self._require_client_access(actor, member.client_id)
        self._members.delete_by_id(member_id)
        logger.info("Team member %s deleted by %s", member_id, actor.username)

    # endregion
