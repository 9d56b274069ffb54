from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import json_body, make_actor_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container)

    @app.route("/api/users", methods=["GET"], endpoint="users_list")
    @actor_required
    def users_list():
        users = container.user_service.list_users(actor=g.actor)
        return jsonify([u.to_dict() for u in users])

    @app.route("/api/users", methods=["POST"], endpoint="users_create")
    @actor_required
    def users_create():
        data = json_body()
        user = container.user_service.create_user(
            actor=g.actor,
            username=data.get("username", ""),
            password=data.get("password", ""),
            name=data.get("name", ""),
            position=data.get("position", ""),
            assigned_clients=data.get("assigned_clients") or (),
        )
        return jsonify(user.to_dict()), 201

    @app.route("/api/users/<user_id>", methods=["DELETE"], endpoint="users_delete")
    @actor_required
    def users_delete(user_id: str):
        container.user_service.delete_user(actor=g.actor, user_id=user_id)
        return "", 204
