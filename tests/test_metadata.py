from __future__ import annotations

import pytest

from seo_server.catalog import ContentEntry
from seo_server.metadata import DEFAULT_METADATA, MetadataModel, MetadataResolver

INSTANCE_URL = "https://example.com"


@pytest.fixture()
def resolver() -> MetadataResolver:
    return MetadataResolver(INSTANCE_URL)


def test_resolve_without_entry_returns_defaults(resolver):
    assert resolver.resolve(None) == DEFAULT_METADATA


def test_resolve_entry_with_empty_fields_returns_defaults(resolver):
    assert resolver.resolve(ContentEntry(slug="empty")) == DEFAULT_METADATA


def test_resolve_overrides_each_populated_field(resolver):
    entry = ContentEntry(
        slug="hello",
        title="Hello",
        excerpt="First post.",
        feature_image="/assets/blog/hello.webp",
    )

    model = resolver.resolve(entry)

    assert model == MetadataModel(
        title="Hello - GitHub Star History",
        description="First post.",
        image_url="https://example.com/assets/blog/hello.webp",
    )


def test_resolve_keeps_defaults_for_missing_fields(resolver):
    model = resolver.resolve(ContentEntry(slug="t", title="Only title"))

    assert model.title == "Only title - GitHub Star History"
    assert model.description == DEFAULT_METADATA.description
    assert model.image_url == DEFAULT_METADATA.image_url


def test_resolve_escapes_untrusted_entry_values(resolver):
    entry = ContentEntry(
        slug="xss",
        title="<script>alert(1)</script>",
        excerpt='Say "hi" & bye',
        feature_image='/x.png" onerror="alert(1)',
    )

    model = resolver.resolve(entry)

    assert "<script>" not in model.title
    assert model.title == "&lt;script&gt;alert(1)&lt;/script&gt; - GitHub Star History"
    assert model.description == "Say &#34;hi&#34; &amp; bye"
    assert '"' not in model.image_url


def test_resolve_is_deterministic(resolver):
    entry = ContentEntry(slug="a", title="A", excerpt="B")
    assert resolver.resolve(entry) == resolver.resolve(entry)


def test_render_emits_tags_in_stable_order():
    rendered = DEFAULT_METADATA.render()
    lines = rendered.split("\n")

    assert lines[0] == "<title>GitHub Star History</title>"
    assert lines[1] == (
        '<meta name="description" '
        'content="View and compare GitHub star history graph of open source projects." />'
    )
    assert lines[4] == (
        '<meta property="og:image" content="https://www.star-history.com/star-history.webp" />'
    )
    assert lines[5] == '<meta property="og:type" content="website" />'
    assert lines[-3:] == [
        '<meta name="twitter:card" content="summary_large_image" />',
        '<meta name="twitter:site" content="star-history.com" />',
        '<meta name="twitter:creator" content="bytebase" />',
    ]
    assert len(lines) == 12
    assert rendered.count("<title>") == 1


def test_resolver_render_matches_model_render(resolver):
    model = resolver.resolve(ContentEntry(slug="a", title="A"))
    assert resolver.render(model) == model.render()
