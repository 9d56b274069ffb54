"""Helpers shared by the Flask JSON controllers."""

from __future__ import annotations

import logging
from functools import wraps

from flask import Flask, g, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)

ACTOR_HEADER = "X-User-Id"


def make_actor_required(container):
    """Build a decorator that resolves the acting user from the X-User-Id header."""

    def actor_required(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user_id = request.headers.get(ACTOR_HEADER, "").strip()
            actor = container.user_service.get(user_id) if user_id else None
            if not actor:
                return jsonify({"error": "Unknown or missing user"}), 401
            g.actor = actor
            return view(*args, **kwargs)

        return wrapper

    return actor_required


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthorizationError)
    def _forbidden(e):
        return jsonify({"error": str(e)}), 403

    @app.errorhandler(NotFoundError)
    def _not_found(e):
        return jsonify({"error": str(e)}), 404

    @app.errorhandler(Exception)
    def _unhandled(e):
        # Flask renders its own HTTP errors (unknown routes, 405, ...).
        if isinstance(e, HTTPException):
            return e
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        if app.config.get("DEBUG"):
            return jsonify({"error": f"Internal error: {e}"}), 500
        return jsonify({"error": "Internal error"}), 500
