"""SEO metadata values and the resolver that derives them from blog entries."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from markupsafe import escape

if TYPE_CHECKING:
    from .catalog import ContentEntry

SITE_NAME = "GitHub Star History"
TWITTER_CARD = "summary_large_image"
TWITTER_SITE = "star-history.com"
TWITTER_CREATOR = "bytebase"


@dataclass(frozen=True)
class MetadataModel:
    """Head metadata for a single page. Values are already HTML-safe."""

    title: str
    description: str
    image_url: str

    def render(self) -> str:
        """Render the metadata as a newline separated block of head tags."""

        tags = [
            f"<title>{self.title}</title>",
            f'<meta name="description" content="{self.description}" />',
            f'<meta property="og:title" content="{self.title}" />',
            f'<meta property="og:description" content="{self.description}" />',
            f'<meta property="og:image" content="{self.image_url}" />',
            '<meta property="og:type" content="website" />',
            # Twitter related fields.
            f'<meta property="twitter:title" content="{self.title}" />',
            f'<meta property="twitter:description" content="{self.description}" />',
            f'<meta property="twitter:image" content="{self.image_url}" />',
            f'<meta name="twitter:card" content="{TWITTER_CARD}" />',
            f'<meta name="twitter:site" content="{TWITTER_SITE}" />',
            f'<meta name="twitter:creator" content="{TWITTER_CREATOR}" />',
        ]
        return "\n".join(tags)


DEFAULT_METADATA = MetadataModel(
    title=SITE_NAME,
    description="View and compare GitHub star history graph of open source projects.",
    image_url="https://www.star-history.com/star-history.webp",
)


class MetadataResolver:
    """Build page metadata by overriding the site defaults with entry fields."""

    def __init__(
        self,
        instance_url: str,
        *,
        defaults: MetadataModel = DEFAULT_METADATA,
        site_name: str = SITE_NAME,
    ) -> None:
        self.instance_url = instance_url
        self.defaults = defaults
        self.site_name = site_name

    def resolve(self, entry: ContentEntry | None) -> MetadataModel:
        if entry is None:
            return self.defaults

        overrides: dict[str, str] = {}
        if entry.title:
            overrides["title"] = str(escape(f"{entry.title} - {self.site_name}"))
        if entry.excerpt:
            overrides["description"] = str(escape(entry.excerpt))
        if entry.feature_image:
            overrides["image_url"] = str(escape(f"{self.instance_url}{entry.feature_image}"))
        return replace(self.defaults, **overrides)

    def render(self, model: MetadataModel) -> str:
        return model.render()
