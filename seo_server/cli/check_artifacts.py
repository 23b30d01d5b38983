"""CLI command validating the frontend build artifacts."""

from __future__ import annotations

import click
from flask import current_app
from flask.cli import with_appcontext

from seo_server.catalog import read_catalog
from seo_server.errors import ArtifactLoadError
from seo_server.page_template import read_template
from seo_server.snapshot import ArtifactPaths


@click.command("check-artifacts")
@with_appcontext
def check_artifacts() -> None:
    """Strictly read index.html and blog/data.json and report problems."""

    paths = ArtifactPaths.from_config(current_app.config)
    problems: list[str] = []

    try:
        template = read_template(paths.template)
    except ArtifactLoadError as exc:
        problems.append(f"{exc.path}: {exc.message}")
    else:
        problems.extend(f"{paths.template}: {problem}" for problem in template.placeholder_problems())

    try:
        catalog = read_catalog(paths.catalog)
    except ArtifactLoadError as exc:
        problems.append(f"{exc.path}: {exc.message}")
    else:
        for skipped in catalog.skipped:
            problems.append(f"{paths.catalog}: entry {skipped.index} skipped ({skipped.errors})")
        click.echo(f"{len(catalog)} blog entries in {paths.catalog}")

    if problems:
        for problem in problems:
            click.echo(problem, err=True)
        raise click.exceptions.Exit(1)

    click.echo("Build artifacts OK.")
