"""HTTP API package; blueprints are mounted per version."""

from __future__ import annotations

from flask import Flask


def init_app(app: Flask) -> None:
    """Mount the v1 blueprints under ``{API_BASE_PREFIX}/v1``."""
    from account_service.api.v1 import API_VERSION, REGISTRY

    root = f"{app.config.get('API_BASE_PREFIX', '/api').rstrip('/')}/{API_VERSION}"
    for bp, rel_prefix in REGISTRY:
        app.register_blueprint(bp, url_prefix=f"{root}{rel_prefix}")


__all__ = ["init_app"]
