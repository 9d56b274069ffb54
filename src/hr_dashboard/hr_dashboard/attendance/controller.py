from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.datetime_utils import now_local, parse_iso_date
from ..common.web import json_body, make_actor_required
from ..container import Container
from ..core.exceptions import AuthorizationError, NotFoundError


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container)

    def require_member_visible(member_id: str) -> None:
        if not container.members_repo.get_by_id(member_id):
            raise NotFoundError("Team member not found")
        visible = {m.member_id for m in container.team_service.visible_members(g.actor)}
        if member_id not in visible:
            raise AuthorizationError("Team member is not in your teams")

    @app.route("/api/attendance", methods=["GET"], endpoint="attendance_sheet")
    @actor_required
    def attendance_sheet():
        raw_date = request.args.get("date")
        work_date = parse_iso_date(raw_date) if raw_date else now_local().date()
        client_id = request.args.get("client_id") or None
        if client_id == "all":
            client_id = None

        members = container.team_service.visible_members(g.actor, client_id=client_id)
        rows = container.attendance_service.day_sheet(members, work_date)
        records = container.attendance_service.snapshot()
        for row in rows:
            score = container.bradford_service.member_score(
                row["member"]["member_id"],
                records,
                today=work_date,
            )
            row["bradford"] = container.bradford_service.badge(score)
        return jsonify({"date": work_date.isoformat(), "rows": rows})

    @app.route("/api/attendance/<member_id>/<work_date>", methods=["PUT"], endpoint="attendance_update")
    @actor_required
    def attendance_update(member_id: str, work_date: str):
        require_member_visible(member_id)
        record = container.attendance_service.update_day(member_id, work_date, json_body())
        return jsonify(record.to_dict())

    @app.route("/api/attendance/<member_id>/<work_date>/validate", methods=["POST"], endpoint="attendance_validate")
    @actor_required
    def attendance_validate(member_id: str, work_date: str):
        require_member_visible(member_id)
        record = container.attendance_service.validate(member_id, work_date, validator=g.actor)
        return jsonify(record.to_dict())
