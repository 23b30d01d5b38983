"""Renderers for ``sitemap.xml`` and ``robots.txt``."""

from __future__ import annotations

from collections.abc import Iterable
from xml.sax.saxutils import escape

from .catalog import ContentEntry

SITEMAP_NAMESPACES = (
    ("xmlns", "http://www.sitemaps.org/schemas/sitemap/0.9"),
    ("xmlns:news", "http://www.google.com/schemas/sitemap-news/0.9"),
    ("xmlns:xhtml", "http://www.w3.org/1999/xhtml"),
    ("xmlns:mobile", "http://www.google.com/schemas/sitemap-mobile/1.0"),
    ("xmlns:image", "http://www.google.com/schemas/sitemap-image/1.1"),
    ("xmlns:video", "http://www.google.com/schemas/sitemap-video/1.1"),
)


def blog_url(instance_url: str, slug: str) -> str:
    return f"{instance_url}/blog/{slug}"


def build_sitemap(entries: Iterable[ContentEntry], instance_url: str) -> str:
    """Render one ``<url>`` per entry inside a single ``<urlset>`` root."""

    urls = [
        f"<url><loc>{escape(blog_url(instance_url, entry.slug))}</loc></url>"
        for entry in entries
    ]
    attributes = " ".join(f'{name}="{uri}"' for name, uri in SITEMAP_NAMESPACES)
    body = "\n".join(urls)
    return f"<urlset {attributes}>{body}</urlset>"


def build_robots_txt(instance_url: str) -> str:
    lines = [
        "User-agent: *",
        "Allow: /",
        f"Host: {instance_url}",
        f"Sitemap: {instance_url}/sitemap.xml",
    ]
    return "\n".join(lines)
