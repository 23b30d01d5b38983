"""Logging setup and per-request access logs for the SEO frontend server.

Every request produces one ``request.completed`` (or ``request.failed``)
record carrying the page kind the router picked (``asset``, ``robots``,
``sitemap``, ``blog``, ``blog_fallback`` or ``default``), so crawler traffic
and unknown-slug fallbacks can be told apart in the logs.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from datetime import UTC, datetime
from typing import Any

from flask import Flask, g, request
from werkzeug.exceptions import HTTPException

REQUEST_ID_HEADER = "X-Request-ID"

# Attributes every LogRecord has; anything else was passed through ``extra``.
_RECORD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JSONLogFormatter(logging.Formatter):
    """Render records as one JSON object per line, extras included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, separators=(",", ":"), default=str)


def setup_logging(app: Flask) -> None:
    """Route all loggers through a single root handler built from app config."""

    level = logging.getLevelName(str(app.config.get("LOG_LEVEL", "INFO")).upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler()
    if app.config.get("LOG_JSON_ENABLED"):
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(app.config.get("LOG_FORMAT")))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # request.completed replaces werkzeug's access log.
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    app.logger.handlers = []
    app.logger.setLevel(level)


def set_page_kind(kind: str, slug: str | None = None) -> None:
    """Record which response the router chose for the access log."""

    g.page_kind = kind
    if slug is not None:
        g.page_slug = slug


def init_request_logging(app: Flask) -> None:
    """Log one access record per request, tagged with a correlation ID."""

    @app.before_request
    def _start_request():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        g.request_start = time.perf_counter()

    @app.after_request
    def _log_request(response):
        if g.get("request_id"):
            response.headers.setdefault(REQUEST_ID_HEADER, g.request_id)
        app.logger.info(
            "Request handled",
            extra=_access_record("request.completed", response.status_code),
        )
        g.request_logged = True
        return response

    @app.teardown_request
    def _log_failure(exc: BaseException | None):
        if exc is None or g.get("request_logged"):
            return
        status = exc.code if isinstance(exc, HTTPException) and exc.code else 500
        app.logger.error(
            "Request failed",
            extra=_access_record("request.failed", status, error=str(exc)),
        )


def _access_record(event: str, status: int, *, error: str | None = None) -> dict[str, Any]:
    start = g.get("request_start")
    record = {
        "event": event,
        "status": status,
        "method": request.method,
        "path": request.path,
        "page": g.get("page_kind"),
        "slug": g.get("page_slug"),
        "request_id": g.get("request_id"),
        "duration_ms": round((time.perf_counter() - start) * 1000, 3) if start else None,
        "user_agent": request.user_agent.string or None,
        "client_ip": request.remote_addr,
        "error": error,
    }
    return {key: value for key, value in record.items() if value is not None}
