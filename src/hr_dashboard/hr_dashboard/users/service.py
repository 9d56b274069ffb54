from __future__ import annotations

import logging
from typing import Iterable, Optional

from werkzeug.security import generate_password_hash

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.enums import Position
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.permissions import is_super_admin
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Use case: manage dashboard users (Super Admin only)."""

    def __init__(self, users: UserRepository):
        self._users = users

    def get(self, user_id: str) -> Optional[User]:
        return self._users.get_by_id(user_id)

    def _require_admin(self, actor: User) -> None:
        if not is_super_admin(actor.position):
            raise AuthorizationError("Only a Super Admin can manage users")

    def list_users(self, *, actor: User) -> list[User]:
        self._require_admin(actor)
        return list(self._users.list_all())

    def create_user(
        self,
        *,
        actor: User,
        username: str,
        password: str,
        name: str,
        position: Position | str,
        assigned_clients: Iterable[str] = (),
    ) -> User:
        self._require_admin(actor)
        username = require_non_empty(username, "Username")
        require_non_empty(password, "Password")
        name = require_non_empty(name, "Full name")
        try:
            position = Position(position)
        except ValueError:
            raise ValidationError(f"Unknown position: {position}") from None
        if isinstance(assigned_clients, str) or not isinstance(assigned_clients, (list, tuple)):
            raise ValidationError("Assigned clients must be a list of client ids")

        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user = User(
            user_id=self._users.next_id(),
            username=username,
            password_hash=generate_password_hash(password),
            name=name,
            position=position,
            assigned_clients=tuple(assigned_clients),
            created_at=now_local(),
        )
        self._users.add(user)
        logger.info("User %s created by %s", user.username, actor.username)
        return user

    def delete_user(self, *, actor: User, user_id: str) -> None:
        self._require_admin(actor)
        if actor.user_id == user_id:
            raise ValidationError("You cannot delete your own account")
        if not self._users.delete_by_id(user_id):
            raise NotFoundError("User not found")
        logger.info("User %s deleted by %s", user_id, actor.username)
