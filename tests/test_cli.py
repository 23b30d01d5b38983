from __future__ import annotations

import json


def test_sitemap_cli_prints_catalog_urls(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["sitemap"])

    assert result.exit_code == 0
    assert "<loc>https://example.com/blog/hello</loc>" in result.output
    assert result.output.startswith("<urlset ")


def test_check_artifacts_reports_skipped_entries(app):
    runner = app.test_cli_runner()

    result = runner.invoke(args=["check-artifacts"])

    # The shared fixture catalog carries one entry without a slug.
    assert result.exit_code == 1
    assert "entry 3 skipped" in result.output
    assert "3 blog entries" in result.output


def test_check_artifacts_passes_for_clean_build(make_app, dist_dir):
    (dist_dir / "blog" / "data.json").write_text(json.dumps([{"slug": "a"}]), encoding="utf-8")
    runner = make_app().test_cli_runner()

    result = runner.invoke(args=["check-artifacts"])

    assert result.exit_code == 0
    assert "Build artifacts OK." in result.output


def test_check_artifacts_fails_for_missing_template(make_app, dist_dir):
    (dist_dir / "index.html").unlink()
    runner = make_app().test_cli_runner()

    result = runner.invoke(args=["check-artifacts"])

    assert result.exit_code == 1
    assert "Unable to read HTML template" in result.output
