"""Response bodies for the crawler-facing routes."""

from __future__ import annotations

from .page_template import blog_body_marker
from .sitemap import build_robots_txt, build_sitemap
from .snapshot import SiteSnapshot


class PageResponder:
    """Builds robots, sitemap and HTML bodies from an immutable snapshot."""

    def __init__(self, snapshot: SiteSnapshot) -> None:
        self.snapshot = snapshot

    def robots_txt(self) -> str:
        return build_robots_txt(self.snapshot.instance_url)

    def sitemap_xml(self) -> str:
        return build_sitemap(self.snapshot.catalog.all(), self.snapshot.instance_url)

    def default_page(self) -> str:
        return self.snapshot.template.default_page

    def blog_page(self, slug: str) -> str:
        """Inject the post's metadata, or fall back to the default page.

        Unknown slugs are not an error: the client-side router renders its
        own not-found view once the default shell loads.
        """

        entry = self.snapshot.catalog.find_by_slug(slug)
        if entry is None:
            return self.default_page()

        resolver = self.snapshot.resolver
        head = resolver.render(resolver.resolve(entry))
        return self.snapshot.template.render(head, blog_body_marker(slug))
