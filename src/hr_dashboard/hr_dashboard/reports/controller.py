from __future__ import annotations

from flask import Flask, g, jsonify

from ..common.web import make_actor_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    actor_required = make_actor_required(container)

    @app.route("/api/overview", methods=["GET"], endpoint="overview")
    @actor_required
    def overview():
        data = container.overview_service.build(g.actor)
        return jsonify(data.to_dict(container.bradford_service))
