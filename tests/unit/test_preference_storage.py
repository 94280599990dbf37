"""Tests for the preference storage adapters."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from starlette.responses import Response

from keepclicking.adapters.cookie_storage import ONE_YEAR_SECONDS, CookiePreferenceStorage
from keepclicking.adapters.local_storage import (
    DisabledPreferenceStorage,
    InMemoryPreferenceStorage,
    JsonFilePreferenceStorage,
    create_local_storage,
)
from keepclicking.components.theme import ThemeStore
from keepclicking.core.ports.preferences import StorageError, StorageUnavailableError


class TestJsonFileStorage:
    def test_missing_file_reads_empty(self, tmp_path: Path) -> None:
        storage = JsonFilePreferenceStorage(tmp_path / "prefs.json")

        assert storage.get_item("theme") is None

    def test_set_writes_json_object(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "prefs.json"
        storage = JsonFilePreferenceStorage(path)

        storage.set_item("theme", "dark")

        assert json.loads(path.read_text()) == {"theme": "dark"}

    def test_set_keeps_other_keys(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        path.write_text('{"font": "serif"}')
        storage = JsonFilePreferenceStorage(path)

        storage.set_item("theme", "dark")

        assert json.loads(path.read_text()) == {"font": "serif", "theme": "dark"}

    def test_theme_survives_new_store(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"

        ThemeStore(JsonFilePreferenceStorage(path)).set("dark")

        assert ThemeStore(JsonFilePreferenceStorage(path)).read() == "dark"

    def test_corrupt_file_is_unavailable(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        path.write_text("{not json")
        storage = JsonFilePreferenceStorage(path)

        with pytest.raises(StorageUnavailableError):
            storage.get_item("theme")

    def test_non_object_is_unavailable(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        path.write_text('["dark"]')

        with pytest.raises(StorageUnavailableError):
            JsonFilePreferenceStorage(path).get_item("theme")

    def test_corrupt_file_degrades_theme_store(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        path.write_text("{not json")
        store = ThemeStore(JsonFilePreferenceStorage(path))

        assert store.read() == "light"

    def test_invalid_utf8_degrades_theme_store(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        path.write_bytes(b'{"theme": "\xff\xfe"}')

        with pytest.raises(StorageUnavailableError):
            JsonFilePreferenceStorage(path).get_item("theme")
        assert ThemeStore(JsonFilePreferenceStorage(path)).read() == "light"

    def test_write_replaces_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "prefs.json"
        path.write_text("{not json")
        store = ThemeStore(JsonFilePreferenceStorage(path))

        assert store.set("dark") is True
        assert json.loads(path.read_text()) == {"theme": "dark"}
        assert ThemeStore(JsonFilePreferenceStorage(path)).read() == "dark"

    def test_factory_uses_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("KEEPCLICKING_PREFS_PATH", str(tmp_path / "env.json"))

        storage = create_local_storage()

        assert storage.path == tmp_path / "env.json"

    def test_factory_explicit_path_wins(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("KEEPCLICKING_PREFS_PATH", str(tmp_path / "env.json"))

        storage = create_local_storage(tmp_path / "explicit.json")

        assert storage.path == tmp_path / "explicit.json"


class TestInMemoryStorage:
    def test_roundtrip_and_clear(self) -> None:
        storage = InMemoryPreferenceStorage({"theme": "dark"})
        assert storage.get_item("theme") == "dark"

        storage.set_item("theme", "light")
        assert storage.get_item("theme") == "light"

        storage.clear()
        assert storage.get_item("theme") is None


class TestDisabledStorage:
    def test_every_call_raises(self) -> None:
        storage = DisabledPreferenceStorage("private mode")

        with pytest.raises(StorageUnavailableError, match="private mode"):
            storage.get_item("theme")
        with pytest.raises(StorageUnavailableError):
            storage.set_item("theme", "dark")

    def test_error_hierarchy(self) -> None:
        error = StorageUnavailableError("gone")

        assert isinstance(error, StorageError)
        assert error.reason == "gone"


class TestCookieStorage:
    def test_reads_request_cookies(self) -> None:
        storage = CookiePreferenceStorage({"theme": "dark"})

        assert storage.get_item("theme") == "dark"
        assert storage.get_item("other") is None

    def test_write_visible_in_same_request(self) -> None:
        storage = CookiePreferenceStorage({})

        storage.set_item("theme", "dark")

        assert storage.get_item("theme") == "dark"
        assert storage.pending == {"theme": "dark"}

    def test_apply_emits_set_cookie(self) -> None:
        storage = CookiePreferenceStorage({})
        storage.set_item("theme", "dark")

        response = storage.apply(Response())

        header = response.headers["set-cookie"]
        assert header.startswith("theme=dark")
        assert f"Max-Age={ONE_YEAR_SECONDS}" in header
        assert "Path=/" in header
        assert "samesite=lax" in header.lower()
        assert "httponly" not in header.lower()

    def test_apply_without_writes_emits_nothing(self) -> None:
        storage = CookiePreferenceStorage({"theme": "dark"})

        response = storage.apply(Response())

        assert "set-cookie" not in response.headers

    def test_secure_flag(self) -> None:
        storage = CookiePreferenceStorage({}, secure=True)
        storage.set_item("theme", "light")

        response = storage.apply(Response())

        assert "secure" in response.headers["set-cookie"].lower()
