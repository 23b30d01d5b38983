"""CLI entry points."""

from __future__ import annotations

from flask import Flask

from .check_artifacts import check_artifacts
from .sitemap import print_sitemap


def register_cli(app: Flask) -> None:
    """Register CLI commands on the given Flask app."""

    app.cli.add_command(print_sitemap)
    app.cli.add_command(check_artifacts)
