"""The built ``index.html`` and the pages derived from it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .errors import TemplateLoadError
from .metadata import DEFAULT_METADATA, MetadataModel

logger = logging.getLogger(__name__)

HEAD_PLACEHOLDER = "<!-- star-history.head.placeholder -->"
BODY_PLACEHOLDER = "<!-- star-history.body.placeholder -->"


def blog_body_marker(slug: str) -> str:
    """Marker the client app uses to find which blog post to mount."""

    return f"<!-- star-history.blog.{slug} -->"


@dataclass(frozen=True)
class PageTemplate:
    """Raw HTML template plus the default page rendered from it once."""

    raw: str = ""
    default_metadata: MetadataModel = DEFAULT_METADATA
    default_page: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "default_page",
            self.raw.replace(HEAD_PLACEHOLDER, self.default_metadata.render()),
        )

    def render(self, head: str, body: str) -> str:
        """Substitute both placeholder markers with literal text."""

        return self.raw.replace(HEAD_PLACEHOLDER, head).replace(BODY_PLACEHOLDER, body)

    def placeholder_counts(self) -> dict[str, int]:
        return {
            HEAD_PLACEHOLDER: self.raw.count(HEAD_PLACEHOLDER),
            BODY_PLACEHOLDER: self.raw.count(BODY_PLACEHOLDER),
        }

    def placeholder_problems(self) -> list[str]:
        problems = []
        for marker, count in self.placeholder_counts().items():
            if count != 1:
                problems.append(f"expected exactly one '{marker}', found {count}")
        return problems


def read_template(path: str | Path, *, default_metadata: MetadataModel = DEFAULT_METADATA) -> PageTemplate:
    """Strictly read the HTML template at ``path``.

    Raises:
        TemplateLoadError: If the file cannot be read or decoded.
    """

    template_path = Path(path)
    try:
        raw = template_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateLoadError(f"Unable to read HTML template: {exc}", path=template_path) from exc
    return PageTemplate(raw=raw, default_metadata=default_metadata)


def load_template(path: str | Path, *, default_metadata: MetadataModel = DEFAULT_METADATA) -> PageTemplate:
    """Load the HTML template, falling back to an empty one on failure."""

    try:
        template = read_template(path, default_metadata=default_metadata)
    except TemplateLoadError as exc:
        logger.warning(
            "HTML template unavailable; serving empty pages",
            extra={"event": "template.load_failed", "path": exc.path, "error": exc.message},
        )
        return PageTemplate(default_metadata=default_metadata)

    for problem in template.placeholder_problems():
        logger.warning(
            "HTML template placeholder mismatch",
            extra={"event": "template.placeholder_mismatch", "path": str(path), "error": problem},
        )
    return template
