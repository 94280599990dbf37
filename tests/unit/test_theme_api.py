"""
Tests for the theme endpoints.

The browser's cookie jar plays the part of persisted storage: a theme
set through the API must come back on the next request.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from keepclicking.api.main import create_app
from keepclicking.api.routes.theme import safe_next_path
from keepclicking.app_shell.context import ServiceContext
from keepclicking.config.models import SiteConfig, ThemeConfig


@pytest.fixture
def no_persistence_client(site_dir: Path, site_config: SiteConfig) -> TestClient:
    config = site_config.model_copy(update={"theme": ThemeConfig(persistence="none")})
    return TestClient(create_app(ServiceContext.create(config, site_dir)))


class TestThemeApi:
    def test_default_is_light(self, client: TestClient) -> None:
        response = client.get("/api/theme")

        assert response.status_code == 200
        assert response.json() == {"theme": "light"}

    def test_put_sets_cookie(self, client: TestClient) -> None:
        response = client.put("/api/theme", json={"theme": "dark"})

        assert response.status_code == 200
        assert response.json() == {"theme": "dark", "persisted": True}
        header = response.headers["set-cookie"]
        assert header.startswith("theme=dark")
        assert "Max-Age=31536000" in header

    def test_round_trip(self, client: TestClient) -> None:
        client.put("/api/theme", json={"theme": "dark"})

        assert client.get("/api/theme").json() == {"theme": "dark"}

        client.put("/api/theme", json={"theme": "light"})

        assert client.get("/api/theme").json() == {"theme": "light"}

    def test_pages_render_saved_theme(self, client: TestClient) -> None:
        client.put("/api/theme", json={"theme": "dark"})

        html = client.get("/").text

        assert 'data-theme="dark"' in html
        assert "theme-toggle--moon" in html
        assert " checked" in html

    @pytest.mark.parametrize("body", [{"theme": "sepia"}, {"theme": ""}, {}, {"theme": None}])
    def test_invalid_theme_is_422(self, client: TestClient, body: dict) -> None:
        response = client.put("/api/theme", json=body)

        assert response.status_code == 422
        assert "set-cookie" not in response.headers

    def test_corrupt_cookie_reads_default(self, client: TestClient) -> None:
        client.cookies.set("theme", "neon")

        assert client.get("/api/theme").json() == {"theme": "light"}


class TestThemeApiWithoutPersistence:
    def test_put_is_not_persisted(self, no_persistence_client: TestClient) -> None:
        response = no_persistence_client.put("/api/theme", json={"theme": "dark"})

        assert response.status_code == 200
        assert response.json() == {"theme": "dark", "persisted": False}
        assert "set-cookie" not in response.headers

    def test_cookie_ignored(self, no_persistence_client: TestClient) -> None:
        no_persistence_client.cookies.set("theme", "dark")

        assert no_persistence_client.get("/api/theme").json() == {"theme": "light"}


class TestToggleForm:
    def test_checked_sets_dark_and_redirects(self, client: TestClient) -> None:
        response = client.post(
            "/theme/toggle",
            data={"checked": "on", "next": "/second-post/"},
            follow_redirects=False,
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/second-post/"
        assert response.headers["set-cookie"].startswith("theme=dark")

    def test_unchecked_sets_light(self, client: TestClient) -> None:
        client.cookies.set("theme", "dark")

        response = client.post("/theme/toggle", data={"next": "/"}, follow_redirects=False)

        assert response.status_code == 303
        assert response.headers["set-cookie"].startswith("theme=light")

    def test_followed_redirect_shows_new_theme(self, client: TestClient) -> None:
        response = client.post("/theme/toggle", data={"checked": "on", "next": "/"})

        assert response.status_code == 200
        assert 'data-theme="dark"' in response.text

    def test_external_next_is_ignored(self, client: TestClient) -> None:
        response = client.post(
            "/theme/toggle",
            data={"checked": "on", "next": "https://evil.example/"},
            follow_redirects=False,
        )

        assert response.headers["location"] == "/"


class TestSafeNextPath:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("/a/", "/a/"),
            ("/tags/web/", "/tags/web/"),
            (None, "/"),
            ("", "/"),
            ("//evil.example/", "/"),
            ("https://evil.example/", "/"),
            ("/\\evil.example", "/"),
            ("relative", "/"),
        ],
    )
    def test_only_local_paths(self, value: str | None, expected: str) -> None:
        assert safe_next_path(value) == expected
