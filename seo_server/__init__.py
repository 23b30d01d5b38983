"""Application factory for the Star History SEO frontend server."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flask import Flask

from config import get_config, normalize_instance_url
from .cli import register_cli
from .logging import init_request_logging, setup_logging
from .snapshot import EXTENSION_KEY, SiteSnapshot, init_snapshot


def create_app(
    config_name: str | None = None,
    overrides: Mapping[str, Any] | None = None,
    snapshot: SiteSnapshot | None = None,
) -> Flask:
    """Application factory adhering to the Flask app factory pattern.

    ``overrides`` is applied on top of the selected config class before the
    build artifacts are read. A prebuilt ``snapshot`` skips artifact loading.
    """

    # The SPA build is served by the frontend blueprint, not Flask's static route.
    app = Flask(__name__, static_folder=None)
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    if overrides:
        app.config.from_mapping(overrides)
    app.config["INSTANCE_URL"] = normalize_instance_url(app.config.get("INSTANCE_URL"))

    setup_logging(app)
    init_request_logging(app)

    if snapshot is not None:
        app.extensions[EXTENSION_KEY] = snapshot
    init_snapshot(app)

    _register_blueprints(app)
    _register_error_handlers(app)

    register_cli(app)
    return app


def _register_blueprints(app: Flask) -> None:
    """Register Flask blueprints."""

    from .frontend import blp as frontend_blp

    app.register_blueprint(frontend_blp)


def _register_error_handlers(app: Flask) -> None:
    """Register global error handlers."""

    from .errors import register_error_handlers

    register_error_handlers(app)
