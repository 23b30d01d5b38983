"""In-memory catalog of blog entries loaded from the frontend build."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from marshmallow import ValidationError

from .errors import CatalogLoadError
from .schemas import ContentEntrySchema

logger = logging.getLogger(__name__)

_entry_schema = ContentEntrySchema()


@dataclass(frozen=True)
class ContentEntry:
    """Frontmatter of one published blog post."""

    slug: str
    title: str = ""
    excerpt: str = ""
    feature_image: str = ""


@dataclass(frozen=True)
class SkippedEntry:
    """A catalog record rejected during loading."""

    index: int
    errors: dict[str, Any]


@dataclass(frozen=True)
class ContentCatalog:
    """Immutable, ordered collection of blog entries."""

    entries: tuple[ContentEntry, ...] = ()
    skipped: tuple[SkippedEntry, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", tuple(self.entries))
        object.__setattr__(self, "skipped", tuple(self.skipped))

    def all(self) -> tuple[ContentEntry, ...]:
        return self.entries

    def find_by_slug(self, slug: str) -> ContentEntry | None:
        """Return the first entry whose slug equals ``slug`` exactly."""

        for entry in self.entries:
            if entry.slug == slug:
                return entry
        return None

    def __iter__(self) -> Iterator[ContentEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def parse_catalog(records: Any) -> ContentCatalog:
    """Build a catalog from decoded JSON, skipping records that fail validation.

    Raises:
        CatalogLoadError: If the top-level value is not a list.
    """

    if not isinstance(records, list):
        raise CatalogLoadError(
            f"Content index must be a JSON array, got {type(records).__name__}."
        )

    entries: list[ContentEntry] = []
    skipped: list[SkippedEntry] = []
    for index, record in enumerate(records):
        try:
            data = _entry_schema.load(record)
        except ValidationError as exc:
            errors = exc.messages if isinstance(exc.messages, dict) else {"_schema": exc.messages}
            skipped.append(SkippedEntry(index=index, errors=errors))
            logger.warning(
                "Skipping malformed catalog entry",
                extra={"event": "catalog.entry_skipped", "index": index, "errors": errors},
            )
            continue
        entries.append(_to_entry(data))

    return ContentCatalog(entries=tuple(entries), skipped=tuple(skipped))


def read_catalog(path: str | Path) -> ContentCatalog:
    """Strictly read and parse the content index at ``path``.

    Raises:
        CatalogLoadError: If the file cannot be read or is not valid JSON.
    """

    catalog_path = Path(path)
    try:
        raw = catalog_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogLoadError(f"Unable to read content index: {exc}", path=catalog_path) from exc

    try:
        records = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Content index is not valid JSON: {exc}", path=catalog_path) from exc

    try:
        return parse_catalog(records)
    except CatalogLoadError as exc:
        raise CatalogLoadError(exc.message, path=catalog_path) from exc


def load_catalog(path: str | Path) -> ContentCatalog:
    """Load the content index, falling back to an empty catalog on failure."""

    try:
        return read_catalog(path)
    except CatalogLoadError as exc:
        logger.warning(
            "Content index unavailable; serving an empty catalog",
            extra={"event": "catalog.load_failed", "path": exc.path, "error": exc.message},
        )
        return ContentCatalog()


def _to_entry(data: dict[str, Any]) -> ContentEntry:
    return ContentEntry(
        slug=data["slug"],
        title=data.get("title") or "",
        excerpt=data.get("excerpt") or "",
        feature_image=data.get("feature_image") or "",
    )

