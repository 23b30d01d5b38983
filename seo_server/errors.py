"""Application-wide error types and handlers."""

from __future__ import annotations

from pathlib import Path

from flask import Flask, Response, make_response
from werkzeug.exceptions import HTTPException


class ArtifactLoadError(Exception):
    """Raised when a build artifact cannot be read or parsed."""

    def __init__(self, message: str, *, path: str | Path | None = None):
        super().__init__(message)
        self.message = message
        self.path = str(path) if path is not None else None


class TemplateLoadError(ArtifactLoadError):
    """The HTML template artifact is missing or unreadable."""


class CatalogLoadError(ArtifactLoadError):
    """The content index artifact is missing, unreadable or malformed."""


DEFAULT_STATUS_MESSAGES: dict[int, str] = {
    400: "Request could not be processed.",
    404: "Resource not found.",
    405: "Method not allowed.",
}


def register_error_handlers(app: Flask) -> None:
    """Attach error handlers to the Flask application."""

    @app.errorhandler(HTTPException)
    def handle_http_error(error: HTTPException) -> Response:
        status = error.code or 500
        message = DEFAULT_STATUS_MESSAGES.get(status, error.name or "Request failed.")
        response = make_response(message + "\n", status)
        response.mimetype = "text/plain"
        # Keep the Allow header on 405 responses.
        for key, value in error.get_headers():
            if key.lower() != "content-type":
                response.headers[key] = value
        return response
