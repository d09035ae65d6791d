"""Kampusku application factory and bootstrap."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Mapping, Optional

from flask import Flask, jsonify, send_from_directory

from kampusku.config import config_by_name, engine_options_from_uri
from kampusku.core.auth.session_store import build_session_store
from kampusku.extensions import db, init_extensions


def create_app(config_name: Optional[str] = None, overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """Create and configure the Kampusku Flask application."""
    env_name = (config_name or os.environ.get("APP_ENV") or "development").lower()
    project_root = Path(__file__).resolve().parent.parent
    instance_root = project_root / "instance"

    app = Flask(
        __name__,
        instance_path=str(instance_root),
        instance_relative_config=True,
        static_folder=str(Path(__file__).parent / "static"),
    )
    config_cls = config_by_name.get(env_name, config_by_name["development"])
    app.config.from_object(config_cls)
    if overrides:
        app.config.update(overrides)
        if "SQLALCHEMY_DATABASE_URI" in overrides and "SQLALCHEMY_ENGINE_OPTIONS" not in overrides:
            app.config["SQLALCHEMY_ENGINE_OPTIONS"] = engine_options_from_uri(overrides["SQLALCHEMY_DATABASE_URI"])

    # Normalize sqlite path to absolute to avoid "unable to open database file"
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI") or ""
    if db_uri.startswith("sqlite:///") and db_uri != "sqlite:///:memory:":
        db_path = db_uri.replace("sqlite:///", "", 1)
        abs_path = project_root / db_path
        abs_path.parent.mkdir(parents=True, exist_ok=True)
        app.config["SQLALCHEMY_DATABASE_URI"] = f"sqlite:///{abs_path}"

    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    logging.getLogger("kampusku").setLevel(app.config.get("LOG_LEVEL", "INFO"))

    init_extensions(app)
    app.extensions["session_store"] = build_session_store(app)
    _register_blueprints(app)
    _register_error_handlers(app)

    @app.get("/")
    def index():
        return send_from_directory(app.static_folder, "index.html")

    @app.get("/health")
    def health():
        return {"success": True}, 200

    from kampusku.scripts import register_commands

    register_commands(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Lazy import and register all controllers."""
    from kampusku.core.auth.controllers import auth_bp  # local import to avoid circulars
    from kampusku.domains.activities.controllers import activity_api_bp
    from kampusku.domains.enrollments.controllers import enrollment_api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(activity_api_bp)
    app.register_blueprint(enrollment_api_bp)


def _register_error_handlers(app: Flask) -> None:
    """Every failure leaves as ``{"success": false, "message": ...}``."""
    from sqlalchemy.exc import SQLAlchemyError
    from werkzeug.exceptions import HTTPException

    from kampusku.core.errors import ServiceError

    @app.errorhandler(ServiceError)
    def _service_error(exc: ServiceError):
        return jsonify(exc.to_dict()), exc.status_code

    @app.errorhandler(HTTPException)
    def _http_error(exc: HTTPException):
        body = {"success": False, "error": exc.name.lower().replace(" ", "_"), "message": exc.description}
        return jsonify(body), exc.code

    @app.errorhandler(SQLAlchemyError)
    def _storage_error(exc: SQLAlchemyError):
        db.session.rollback()
        app.logger.exception("Storage error: %s", exc)
        return jsonify({"success": False, "error": "server_error", "message": "Server error"}), 500

    @app.errorhandler(Exception)
    def _generic_error(exc: Exception):
        app.logger.exception("Unhandled error: %s", exc)
        return jsonify({"success": False, "error": "server_error", "message": "Server error"}), 500
