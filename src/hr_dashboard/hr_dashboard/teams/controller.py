from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.web import json_body, make_actor_required
from ..container import Container
from ..core.constants import DEFAULT_SHIFT


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container)
    teams = container.team_service

    @app.route("/api/clients", methods=["GET"], endpoint="clients_list")
    @actor_required
    def clients_list():
        return jsonify([c.to_dict() for c in teams.visible_clients(g.actor)])

    @app.route("/api/clients", methods=["POST"], endpoint="clients_create")
    @actor_required
    def clients_create():
        data = json_body()
        client = teams.create_client(actor=g.actor, name=data.get("name", ""), code=data.get("code", ""))
        return jsonify(client.to_dict()), 201

    @app.route("/api/clients/<client_id>", methods=["PUT"], endpoint="clients_update")
    @actor_required
    def clients_update(client_id: str):
        client = teams.update_client(actor=g.actor, client_id=client_id, changes=json_body())
        return jsonify(client.to_dict())

    @app.route("/api/clients/<client_id>", methods=["DELETE"], endpoint="clients_delete")
    @actor_required
    def clients_delete(client_id: str):
        teams.delete_client(actor=g.actor, client_id=client_id)
        return "", 204

    @app.route("/api/members", methods=["GET"], endpoint="members_list")
    @actor_required
    def members_list():
        client_id = request.args.get("client_id") or None
        if client_id == "all":
            client_id = None
        members = teams.visible_members(g.actor, client_id=client_id)
        return jsonify([m.to_dict() for m in members])

    @app.route("/api/members", methods=["POST"], endpoint="members_create")
    @actor_required
    def members_create():
        data = json_body()
        member = teams.create_member(
            actor=g.actor,
            name=data.get("name", ""),
            position=data.get("position", ""),
            client_id=data.get("client_id", ""),
            shift=data.get("shift") or DEFAULT_SHIFT,
            team_lead_id=data.get("team_lead_id") or None,
        )
        return jsonify(member.to_dict()), 201

    @app.route("/api/members/<member_id>", methods=["PUT"], endpoint="members_update")
    @actor_required
    def members_update(member_id: str):
        member = teams.update_member(actor=g.actor, member_id=member_id, changes=json_body())
        return jsonify(member.to_dict())

    @app.route("/api/members/<member_id>", methods=["DELETE"], endpoint="members_delete")
    @actor_required
    def members_delete(member_id: str):
        teams.delete_member(actor=g.actor, member_id=member_id)
        return "", 204
