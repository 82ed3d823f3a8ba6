# backend/orderdesk/__init__.py
import os

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from .config import Config, ConfigError, validate_config
from .extensions import db, migrate


MIGRATIONS_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "migrations")


def create_app(config_overrides: dict | None = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)

    # Refuse to start without a usable database URL
    validate_config(app.config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db, directory=MIGRATIONS_DIR)

    # Import models so Alembic can discover metadata reliably
    from . import models  # noqa: F401

    # Register blueprints
    from .routes.system import system_bp
    from .routes.order_types import order_types_bp
    from .routes.orders import orders_bp
    from .routes.invoices import invoices_bp

    app.register_blueprint(system_bp)
    app.register_blueprint(order_types_bp)
    app.register_blueprint(orders_bp)
    app.register_blueprint(invoices_bp)

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        allowed_origin = app.config.get("FRONTEND_URL")
        if allowed_origin and origin == allowed_origin:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"
            response.headers["Access-Control-Allow-Headers"] = app.config["CORS_ALLOWED_HEADERS"]
            response.headers["Access-Control-Allow-Methods"] = app.config["CORS_ALLOWED_METHODS"]
        return response

    # ======================
    # JSON error responses
    # ======================
    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"error": e.description}), e.code

    @app.errorhandler(Exception)
    def unexpected_error(e):
        app.logger.exception("Unexpected error on %s %s", request.method, request.path)
        return jsonify({"error": "Unexpected server error", "details": str(e)}), 500

    # Register CLI commands
    from .cli import register_commands
    register_commands(app)

    return app


__all__ = ["create_app", "ConfigError"]
