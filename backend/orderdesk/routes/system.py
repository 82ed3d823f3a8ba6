# backend/orderdesk/routes/system.py
"""
System liveness, health and version endpoints.

GET / is the plain-text liveness probe the frontend and hosting platform
poll; /health additionally exercises the database.
"""

import sys
import time
from flask import Blueprint, current_app
from sqlalchemy import text

from ..extensions import db
from ..models import Order, Invoice, OrderType
from orderdesk.time_utils import utcnow

system_bp = Blueprint("system", __name__)


@system_bp.get("/")
def index():
    return "Server is running!", 200, {"Content-Type": "text/plain; charset=utf-8"}


def check_database_health() -> dict:
    """
    Check database connectivity and that the tables are readable.

    Returns dict with status and details.
    """
    start_time = time.time()
    try:
        db.session.execute(text("SELECT 1"))

        details = {
            "order_types": db.session.query(OrderType).count(),
            "orders": db.session.query(Order).count(),
            "invoices": db.session.query(Invoice).count(),
        }

        elapsed_ms = (time.time() - start_time) * 1000
        return {
            "status": "healthy",
            "latency_ms": round(elapsed_ms, 2),
            "details": details,
        }
    except Exception:
        db.session.rollback()
        elapsed_ms = (time.time() - start_time) * 1000
        current_app.logger.exception("Database health check failed")
        return {
            "status": "unhealthy",
            "latency_ms": round(elapsed_ms, 2),
            "error": "Database error"
        }


@system_bp.get("/health")
def health():
    """
    Health check endpoint.

    Returns:
    - 200: Database reachable
    - 503: Database unreachable
    """
    start_time = time.time()
    database_health = check_database_health()

    if database_health["status"] == "healthy":
        overall_status, http_status = "healthy", 200
    else:
        overall_status, http_status = "unhealthy", 503

    total_elapsed_ms = (time.time() - start_time) * 1000

    response = {
        "status": overall_status,
        "timestamp": utcnow().isoformat() + "Z",
        "total_latency_ms": round(total_elapsed_ms, 2),
        "checks": {
            "database": database_health,
        }
    }

    return response, http_status


@system_bp.get("/version")
def version():
    """
    Version endpoint for deployment debugging.

    Does NOT expose secret keys, database credentials or internal paths.
    """
    env = "production" if not current_app.debug else "development"

    return {
        "api_version": current_app.config["API_VERSION"],
        "environment": env,
        "python_version": sys.version.split()[0],
        "server_time": utcnow().isoformat() + "Z",
    }
