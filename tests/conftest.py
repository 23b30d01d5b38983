"""Shared pytest fixtures."""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from seo_server import create_app  # noqa: E402

INSTANCE_URL = "https://example.com"

INDEX_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <!-- star-history.head.placeholder -->
    <script type="module" src="/assets/index.js"></script>
  </head>
  <body>
    <div id="app"></div>
    <!-- star-history.body.placeholder -->
  </body>
</html>
"""

BLOG_ENTRIES = [
    {
        "slug": "hello",
        "title": "Hello",
        "excerpt": "First post.",
        "featureImage": "/assets/blog/hello.webp",
        "publishedDate": "2024-01-01",
    },
    {"slug": "no-frontmatter"},
    {"slug": "xss", "title": "<script>alert(1)</script>", "excerpt": 'Say "hi" & <b>bye</b>'},
    {"title": "Missing slug"},
]


@pytest.fixture()
def dist_dir(tmp_path: Path) -> Path:
    """A minimal frontend build: template, content index and one asset."""

    dist = tmp_path / "dist"
    (dist / "blog").mkdir(parents=True)
    (dist / "assets").mkdir()
    (dist / "index.html").write_text(INDEX_HTML, encoding="utf-8")
    (dist / "blog" / "data.json").write_text(json.dumps(BLOG_ENTRIES), encoding="utf-8")
    (dist / "assets" / "index.js").write_text("console.log('app');\n", encoding="utf-8")
    return dist


@pytest.fixture()
def make_app(dist_dir: Path) -> Callable[..., object]:
    """Build an app against ``dist_dir`` with optional config overrides."""

    def _factory(**overrides):
        config = {
            "TESTING": True,
            "INSTANCE_URL": INSTANCE_URL,
            "DIST_DIR": str(dist_dir),
            "TEMPLATE_PATH": None,
            "CATALOG_PATH": None,
        }
        config.update(overrides)
        return create_app("development", overrides=config)

    return _factory


@pytest.fixture()
def app(make_app):
    return make_app()


@pytest.fixture()
def client(app) -> Iterator:
    """Provide a Flask test client."""

    with app.test_client() as client:
        yield client
