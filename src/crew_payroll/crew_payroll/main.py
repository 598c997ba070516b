from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .container import Container, build_container
from .core.exceptions import NotFoundError, SyncError, ValidationError
from .core.settings import AppSettings
from .database.bootstrap import apply_schema, list_tables
from .entries.controller import register as register_entries
from .payroll.controller import register as register_payroll
from .workers.controller import register as register_workers

_logger = logging.getLogger(__name__)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation_error(e: ValidationError):
        return jsonify({"success": False, "message": str(e)}), 400

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return jsonify({"success": False, "message": str(e)}), 404

    @app.errorhandler(SyncError)
    def _sync_error(e: SyncError):
        _logger.warning("Sheet sync failed: %s", e)
        return jsonify({"success": False, "message": str(e)}), 502


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=logging.DEBUG if app.config["DEBUG"] else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        db_config = getattr(settings, "DB_CONFIG")
        _logger.info(
            "settings=%s db=%s@%s:%s/%s",
            settings_module,
            db_config.get("user"),
            db_config.get("host"),
            db_config.get("port", 3306),
            db_config.get("database"),
        )
        container = build_container(
            db_config=db_config,
            settings=AppSettings.from_module(settings),
            sheet_url=str(getattr(settings, "SHEET_API_URL", "") or ""),
            sheet_timeout=float(getattr(settings, "SHEET_TIMEOUT", 15)),
        )
        if bool(getattr(settings, "AUTO_INIT_DB", False)):
            schema_path = Path(__file__).resolve().parents[3] / "database" / "schema.sql"
            apply_schema(container.conn, schema_path=schema_path)
            _logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))

    _register_error_handlers(app)
    register_workers(app, container)
    register_entries(app, container)
    register_payroll(app, container)

    return app
