from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .absences.controller import register as register_absences
from .balance.controller import register as register_balance
from .common.http import register_error_handlers
from .container import build_container
from .core.logging import configure_logging
from .database.bootstrap import apply_schema, list_tables
from .entries.controller import register as register_entries
from .schedules.controller import register as register_schedules
from .workday.controller import register as register_workday

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "starting timeclock engine",
        extra={
            "settings": settings_module,
            "db": f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}",
        },
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.info("schema ready", extra={"tables": len(list_tables(db_config))})

    container = build_container(db_config=db_config, engine=getattr(settings, "ENGINE", None))
    app.extensions["timeclock"] = container

    register_error_handlers(app)
    register_entries(app, container)
    register_workday(app, container)
    register_schedules(app, container)
    register_absences(app, container)
    register_balance(app, container)

    @app.get("/health", endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    return app
