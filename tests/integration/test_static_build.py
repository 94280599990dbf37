"""
Static build integration test.

Builds the temporary site to disk and checks that the exported tree
matches what the server renders.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from keepclicking.app_shell.cli import main


@pytest.fixture
def built_site(site_dir: Path, tmp_path: Path) -> Path:
    out = tmp_path / "public"
    main(["--config", str(site_dir / "site.yaml"), "build", "--out", str(out)])
    return out


class TestStaticBuild:
    def test_writes_every_page(self, built_site: Path) -> None:
        expected = [
            "index.html",
            "resources/index.html",
            "tags/index.html",
            "tags/meta/index.html",
            "tags/web/index.html",
            "about-me/index.html",
            "first-post/index.html",
            "second-post/index.html",
            "third-post/index.html",
            "404.html",
        ]

        for rel in expected:
            assert (built_site / rel).is_file(), rel

    def test_copies_static_assets(self, built_site: Path) -> None:
        for name in ("style.css", "sun.svg", "moon.svg", "avatar.svg"):
            assert (built_site / "static" / name).is_file()

    def test_pages_start_at_default_theme(self, built_site: Path) -> None:
        html = (built_site / "second-post" / "index.html").read_text(encoding="utf-8")

        assert 'data-theme="light"' in html
        assert 'id="theme-toggle"' in html
        assert "window.__setPreferredTheme" in html

    def test_post_page_content(self, built_site: Path) -> None:
        html = (built_site / "second-post" / "index.html").read_text(encoding="utf-8")

        assert "Second post body." in html
        assert 'rel="prev"' in html
        assert 'rel="next"' in html
        assert "test-blog.disqus.com" in html

    def test_not_found_page(self, built_site: Path) -> None:
        html = (built_site / "404.html").read_text(encoding="utf-8")

        assert "Not Found" in html

    def test_rebuild_replaces_static(self, site_dir: Path, built_site: Path) -> None:
        (built_site / "static" / "stale.txt").write_text("old")

        main(["--config", str(site_dir / "site.yaml"), "build", "--out", str(built_site)])

        assert not (built_site / "static" / "stale.txt").exists()

    def test_matches_served_page_body(self, built_site: Path, client: TestClient) -> None:
        served = client.get("/third-post/").text
        built = (built_site / "third-post" / "index.html").read_text(encoding="utf-8")

        start = served.index("<main>")
        end = served.index("</main>")
        assert served[start:end] == built[built.index("<main>") : built.index("</main>")]
