"""Demo data loaded into the in-memory repositories on startup."""

from __future__ import annotations

from werkzeug.security import generate_password_hash

from ..core.enums import Position
from ..teams.model import Client, TeamMember
from ..users.model import User

DEMO_CLIENTS = (
    Client(client_id="client-1", name="Behavior Frontiers", code="BF"),
    Client(client_id="client-2", name="CK Dermatology", code="CKD"),
    Client(client_id="client-3", name="MedLab Solutions", code="MLS"),
)

DEMO_TEAM_MEMBERS = (
    TeamMember(member_id="tm-1", name="Sarah Johnson", position=Position.SENIOR_TEAM_LEAD, client_id="client-1"),
    TeamMember(
        member_id="tm-2",
        name="Michael Brown",
        position=Position.TEAM_LEAD,
        client_id="client-1",
        team_lead_id="tm-1",
    ),
    TeamMember(
        member_id="tm-3",
        name="Emily Davis",
        position=Position.MEDICAL_BILLER,
        client_id="client-1",
        shift="15:00-23:00",
        team_lead_id="tm-2",
    ),
    TeamMember(
        member_id="tm-4",
        name="David Wilson",
        position=Position.MEDICAL_CODER,
        client_id="client-1",
        shift="15:00-23:00",
        team_lead_id="tm-2",
    ),
)


def demo_users() -> list[User]:
    return [
        User(
            user_id="1",
            username="admin",
            password_hash=generate_password_hash("admin123"),
            name="System Administrator",
            position=Position.SUPER_ADMIN,
        ),
        User(
            user_id="2",
            username="john.lead",
            password_hash=generate_password_hash("lead123"),
            name="John Smith",
            position=Position.TEAM_LEAD,
            assigned_clients=("client-1",),
        ),
    ]
