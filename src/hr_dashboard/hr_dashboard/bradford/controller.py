from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import make_actor_required
from ..container import Container
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container)

    @app.route("/api/members/<member_id>/bradford", methods=["GET"], endpoint="member_bradford")
    @actor_required
    def member_bradford(member_id: str):
        if not container.members_repo.get_by_id(member_id):
            raise NotFoundError("Team member not found")
        if member_id not in {m.member_id for m in container.team_service.visible_members(g.actor)}:
            raise AuthorizationError("Team member is not in your teams")

        raw_months = request.args.get("months")
        try:
            months = int(raw_months) if raw_months else container.bradford_service.rolling_months
        except ValueError:
            raise ValidationError("months must be a whole number") from None
        if months < 1:
            raise ValidationError("months must be at least 1")

        score = container.bradford_service.member_score(
            member_id,
            container.attendance_service.snapshot(),
            rolling_months=months,
        )
        return jsonify({"member_id": member_id, "months": months, **score.to_dict(), "badge": container.bradford_service.badge(score)})
