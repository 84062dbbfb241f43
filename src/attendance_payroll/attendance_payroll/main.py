from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module, load_settings

from .advances.controller import register as register_advances
from .attendance.controller import register as register_attendance
from .container import build_container
from .core.logging import configure_logging
from .database.bootstrap import apply_schema
from .payroll.controller import register as register_payroll

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    settings = load_settings()
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    db_config = getattr(settings, "DB_CONFIG")

    logger.info(
        "settings=%s db=%s@%s:%s/%s",
        get_settings_module(),
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    container = build_container(
        db_config=db_config,
        overtime_departments=getattr(settings, "OVERTIME_DEPARTMENTS", ("Workshop", "Enamel")),
        recalc_max_attempts=int(getattr(settings, "RECALC_MAX_ATTEMPTS", 3)),
    )

    if getattr(settings, "AUTO_INIT_DB", False):
        schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
        count = apply_schema(container.conn, schema_path=schema_path)
        logger.info("schema ready (%s statements)", count)

    app.extensions["attendance_payroll"] = container

    register_attendance(app, container)
    register_advances(app, container)
    register_payroll(app, container)

    return app
