"""Process-wide, read-only snapshot of the frontend build artifacts."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from flask import Flask, current_app

from .catalog import ContentCatalog, load_catalog
from .metadata import MetadataResolver
from .page_template import PageTemplate, load_template

logger = logging.getLogger(__name__)

EXTENSION_KEY = "site_snapshot"


@dataclass(frozen=True)
class ArtifactPaths:
    dist_dir: Path
    template: Path
    catalog: Path

    @classmethod
    def from_config(cls, config: Any) -> ArtifactPaths:
        dist_dir = Path(config.get("DIST_DIR") or "dist")
        template = config.get("TEMPLATE_PATH") or dist_dir / "index.html"
        catalog = config.get("CATALOG_PATH") or dist_dir / "blog" / "data.json"
        return cls(dist_dir=dist_dir, template=Path(template), catalog=Path(catalog))


@dataclass(frozen=True)
class SiteSnapshot:
    """Everything a request handler reads, loaded once at startup."""

    instance_url: str
    catalog: ContentCatalog
    template: PageTemplate
    resolver: MetadataResolver


def load_snapshot(instance_url: str, paths: ArtifactPaths) -> SiteSnapshot:
    """Load the template and catalog, degrading to empty values on failure."""

    resolver = MetadataResolver(instance_url)
    template = load_template(paths.template, default_metadata=resolver.defaults)
    catalog = load_catalog(paths.catalog)
    logger.info(
        "Site snapshot loaded",
        extra={
            "event": "snapshot.loaded",
            "entries": len(catalog),
            "skipped": len(catalog.skipped),
            "template_loaded": bool(template.raw),
        },
    )
    return SiteSnapshot(
        instance_url=instance_url,
        catalog=catalog,
        template=template,
        resolver=resolver,
    )


def init_snapshot(app: Flask) -> SiteSnapshot:
    """Load the snapshot for the app unless one was injected already."""

    snapshot = app.extensions.get(EXTENSION_KEY)
    if snapshot is None:
        paths = ArtifactPaths.from_config(app.config)
        snapshot = load_snapshot(app.config["INSTANCE_URL"], paths)
        app.extensions[EXTENSION_KEY] = snapshot
    return snapshot


def get_snapshot() -> SiteSnapshot:
    return current_app.extensions[EXTENSION_KEY]
