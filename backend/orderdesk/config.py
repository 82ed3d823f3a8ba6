# backend/orderdesk/config.py
from __future__ import annotations
import os

from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError


class ConfigError(RuntimeError):
    """Startup configuration is missing or malformed."""


def normalize_db_url(url: str | None) -> str | None:
    if not url:
        return None
    u = url.strip()
    if not u:
        return None

    # Hosted Postgres providers hand out postgres:// URLs
    if u.startswith("postgres://"):
        u = u.replace("postgres://", "postgresql+psycopg2://", 1)

    return u


class Config:
    # Optional "SECRET_KEY", with default dev key
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret-key-change-me")

    # Required; create_app() refuses to start without it
    SQLALCHEMY_DATABASE_URI = normalize_db_url(os.environ.get("DATABASE_URL"))
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Single origin allowed to call the API from a browser
    FRONTEND_URL = (os.environ.get("FRONTEND_URL") or "").strip() or None
    CORS_ALLOWED_METHODS = "GET,POST,PATCH,DELETE"
    CORS_ALLOWED_HEADERS = "Content-Type, Authorization"

    PORT = int(os.environ.get("PORT", "5000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

    API_VERSION = "1.0.0"


def validate_config(config) -> None:
    """
    Fail fast on a missing or unparseable database URL.

    Raises:
        ConfigError: DATABASE_URL absent or not a valid SQLAlchemy URL
    """
    uri = normalize_db_url(config.get("SQLALCHEMY_DATABASE_URI"))
    if not uri:
        raise ConfigError("DATABASE_URL is required")
    try:
        make_url(uri)
    except ArgumentError as e:
        raise ConfigError(f"DATABASE_URL is malformed: {e}") from e
    config["SQLALCHEMY_DATABASE_URI"] = uri

    port = config.get("PORT")
    if not isinstance(port, int) or not 0 < port < 65536:
        raise ConfigError(f"PORT must be an integer between 1 and 65535, got {port!r}")
