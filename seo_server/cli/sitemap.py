"""CLI command printing the generated sitemap."""

from __future__ import annotations

import click
from flask.cli import with_appcontext

from seo_server.responder import PageResponder
from seo_server.snapshot import get_snapshot


@click.command("sitemap")
@with_appcontext
def print_sitemap() -> None:
    """Print sitemap.xml for the loaded content catalog."""

    click.echo(PageResponder(get_snapshot()).sitemap_xml())
