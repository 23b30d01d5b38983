"""Route handlers for static assets, crawler files and SPA pages."""

from __future__ import annotations

from pathlib import Path

from flask import Response, current_app, request, send_from_directory

from seo_server.logging import set_page_kind
from seo_server.responder import PageResponder
from seo_server.snapshot import get_snapshot

from . import blp

INDEX_FILE = "index.html"


def _responder() -> PageResponder:
    return PageResponder(get_snapshot())


def _html(body: str) -> Response:
    return Response(body, status=200, mimetype="text/html")


def _asset_root() -> Path:
    return Path(current_app.config.get("DIST_DIR") or "dist").resolve()


def _resolve_asset(root: Path, request_path: str) -> Path | None:
    relative = request_path.lstrip("/")
    if not relative or relative == INDEX_FILE:
        return None

    try:
        requested = (root / relative).resolve()
        # Prevent directory traversal outside the build root
        if not requested.is_relative_to(root) or not requested.is_file():
            return None
    except (OSError, ValueError):
        # NUL bytes and over-long names can never be build files.
        return None
    return requested.relative_to(root)


@blp.before_request
def serve_static_asset():
    """Serve literal build files before any page route is considered."""

    if request.method not in {"GET", "HEAD"}:
        return None

    root = _asset_root()
    asset = _resolve_asset(root, request.path)
    if asset is None:
        return None
    set_page_kind("asset")
    return send_from_directory(root, asset.as_posix())


@blp.route("/robots.txt")
def robots_txt():
    set_page_kind("robots")
    return Response(_responder().robots_txt(), status=200, mimetype="text/plain")


@blp.route("/sitemap.xml")
def sitemap_xml():
    set_page_kind("sitemap")
    return Response(_responder().sitemap_xml(), status=200, mimetype="application/xml")


@blp.route("/blog/<slug>")
def blog_page(slug: str):
    known = get_snapshot().catalog.find_by_slug(slug) is not None
    set_page_kind("blog" if known else "blog_fallback", slug)
    return _html(_responder().blog_page(slug))


@blp.route("/", defaults={"path": ""})
@blp.route("/<path:path>")
def default_page(path: str):
    """Serve the default shell; the client-side router takes it from there."""

    set_page_kind("default")
    return _html(_responder().default_page())
