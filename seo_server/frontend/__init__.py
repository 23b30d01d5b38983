"""Blueprint serving the SPA build with crawler metadata injected."""

from __future__ import annotations

from flask import Blueprint

blp = Blueprint("frontend", __name__)

from . import routes  # noqa: E402,F401
