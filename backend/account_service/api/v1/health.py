"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from redis.exceptions import RedisError  # type: ignore[import-untyped]
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from account_service.api.deps import json_response, timing
from account_service.core.extensions import db, get_redis

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Report database (and, when configured, Redis) reachability."""

    payload = {"status": "ok", "db": "ok"}
    try:
        db.session.execute(text("SELECT 1"))
    except SQLAlchemyError:  # pragma: no cover - depends on DB backend
        current_app.logger.exception("healthcheck.db_error")
        payload["db"] = "fail"

    if current_app.config.get("REFRESH_TOKEN_BACKEND") == "redis":
        try:
            get_redis().ping()
            payload["redis"] = "ok"
        except RedisError:  # pragma: no cover - depends on Redis availability
            current_app.logger.exception("healthcheck.redis_error")
            payload["redis"] = "fail"

    payload["version"] = current_app.config.get("APP_VERSION", "dev")
    if "fail" in payload.values():
        payload["status"] = "degraded"
    return json_response(payload, status=200 if payload["status"] == "ok" else 503)
