"""API v1 blueprint package bundling versioned routes."""

from __future__ import annotations

from flask import Blueprint

API_VERSION = "v1"

# Import blueprints *only here* to keep imports localized and avoid cycles.
from .accounts import bp as accounts_bp  # noqa: E402
from .health import bp as health_bp  # noqa: E402
from .me import bp as me_bp  # noqa: E402
from .sessions import bp as sessions_bp  # noqa: E402

# Each tuple: (blueprint, url_prefix_relative_to_version)
REGISTRY: list[tuple[Blueprint, str]] = [
    (health_bp, ""),  # -> /api/v1/health
    (accounts_bp, "/accounts"),
    (sessions_bp, "/sessions"),
    (me_bp, "/me"),
]
