"""Application factory wiring Flask extensions and blueprints."""

from __future__ import annotations

from flask import Flask

from account_service.core.config import REFRESH_TOKEN_BACKENDS, BaseConfig, get_config
from account_service.core.logger import configure_logging
from account_service.core.logger import init_app as init_logging


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config object (or import path) overriding ``APP_ENV``.
    :raises RuntimeError: On an unknown ``REFRESH_TOKEN_BACKEND``.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    backend = app.config.get("REFRESH_TOKEN_BACKEND", "sql")
    if backend not in REFRESH_TOKEN_BACKENDS:
        raise RuntimeError(f"Unknown REFRESH_TOKEN_BACKEND {backend!r}")

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from account_service.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from account_service.core import cors

    cors.init_app(app)

    from account_service.api import init_app as init_api

    init_api(app)

    from account_service.core import errors

    errors.init_app(app)

    from account_service import cli as app_cli

    app_cli.init_app(app)

    return app
