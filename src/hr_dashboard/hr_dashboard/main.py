from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .common.web import register_error_handlers
from .container import build_container
from .attendance.controller import register as register_attendance
from .bradford.controller import register as register_bradford
from .reports.controller import register as register_reports
from .teams.controller import register as register_teams
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    rolling_months = int(getattr(settings, "BRADFORD_ROLLING_MONTHS", 12))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Starting HR dashboard (settings=%s, rolling_months=%s)", settings_module, rolling_months)

    container = build_container(
        seed_demo_data=bool(getattr(settings, "SEED_DEMO_DATA", True)),
        rolling_months=rolling_months,
    )
    app.extensions["hr_dashboard"] = container

    register_error_handlers(app)
    register_users(app, container)
    register_teams(app, container)
    register_attendance(app, container)
    register_bradford(app, container)
    register_reports(app, container)

    return app
