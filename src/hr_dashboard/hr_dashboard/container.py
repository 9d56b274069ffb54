from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .attendance.calculator import StandardHoursCalculator
from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .bradford.service import BradfordService
from .core.constants import DEFAULT_ROLLING_MONTHS
from .database.seed import DEMO_CLIENTS, DEMO_TEAM_MEMBERS, demo_users
from .reports.service import OverviewService
from .teams.memory_team_repository import InMemoryClientRepository, InMemoryTeamMemberRepository
from .teams.service import TeamService
from .users.memory_user_repository import InMemoryUserRepository
from .users.service import UserService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    clients_repo: InMemoryClientRepository
    members_repo: InMemoryTeamMemberRepository
    attendance_repo: InMemoryAttendanceRepository
    users_repo: InMemoryUserRepository

    user_service: UserService
    team_service: TeamService
    attendance_service: AttendanceService
    bradford_service: BradfordService
    overview_service: OverviewService


def build_container(
    *,
    seed_demo_data: bool = True,
    rolling_months: int = DEFAULT_ROLLING_MONTHS,
    attendance_rows: Iterable[dict] = (),
) -> Container:
    clients_repo = InMemoryClientRepository(DEMO_CLIENTS if seed_demo_data else ())
    members_repo = InMemoryTeamMemberRepository(DEMO_TEAM_MEMBERS if seed_demo_data else ())
    attendance_repo = InMemoryAttendanceRepository()
    users_repo = InMemoryUserRepository(demo_users() if seed_demo_data else ())

    user_service = UserService(users_repo)
    team_service = TeamService(clients_repo, members_repo)
    attendance_service = AttendanceService(attendance_repo, members_repo, calculator=StandardHoursCalculator())
    bradford_service = BradfordService(rolling_months=rolling_months)
    overview_service = OverviewService(team_service, attendance_service, bradford_service)

    attendance_service.import_records(attendance_rows)
    logger.debug(
        "Container ready: %d clients, %d members, %d users",
        len(clients_repo.list_all()),
        len(members_repo.list_all()),
        len(users_repo.list_all()),
    )

    return Container(
        clients_repo=clients_repo,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        users_repo=users_repo,
        user_service=user_service,
        team_service=team_service,
        attendance_service=attendance_service,
        bradford_service=bradford_service,
        overview_service=overview_service,
    )
