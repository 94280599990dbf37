"""
Local Preference Storage Adapters.

Implements the PreferenceStoragePort interface for places where the site
runs without a browser: the CLI, the static build and the tests.

- JsonFilePreferenceStorage: one JSON object on disk, survives restarts
- InMemoryPreferenceStorage: dict-backed, lives as long as the process
- DisabledPreferenceStorage: always unavailable (storage switched off)

Invariants:
- Filesystem and JSON errors surface as StorageUnavailableError
- A missing file reads as empty storage, not as an error
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from keepclicking.core.ports.preferences import StorageUnavailableError

logger = logging.getLogger(__name__)


class JsonFilePreferenceStorage:
    """
    JSON file implementation of PreferenceStoragePort.

    The file holds a single object mapping keys to string values, e.g.
    ``{"theme": "dark"}``. Every call reads or rewrites the whole file.
    """

    def __init__(self, path: str | Path, *, create_dirs: bool = True) -> None:
        """
        Initialize JSON file storage.

        Args:
            path: Location of the JSON file
            create_dirs: Whether to create the parent directory on write
        """
        self.path = Path(path)
        self.create_dirs = create_dirs

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}

        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageUnavailableError(f"cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            raise StorageUnavailableError(f"{self.path} does not hold a JSON object")

        return {str(k): str(v) for k, v in data.items()}

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except StorageUnavailableError as e:
            # The rewrite below replaces the unreadable file
            logger.warning("Discarding unreadable preferences: %s", e)
            data = {}
        data[key] = value

        try:
            if self.create_dirs:
                self.path.parent.mkdir(parents=True, exist_ok=True)
            # Write to a sibling then rename so readers never see half a file
            tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageUnavailableError(f"cannot write {self.path}: {e}") from e


class InMemoryPreferenceStorage:
    """In-memory implementation of PreferenceStoragePort."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def clear(self) -> None:
        """Clear all items (for testing)."""
        self._items.clear()


class DisabledPreferenceStorage:
    """PreferenceStoragePort for when persistence is switched off."""

    def __init__(self, reason: str = "storage is disabled") -> None:
        self.reason = reason

    def get_item(self, key: str) -> str | None:
        raise StorageUnavailableError(self.reason)

    def set_item(self, key: str, value: str) -> None:
        raise StorageUnavailableError(self.reason)


def create_local_storage(
    path: str | Path | None = None,
    *,
    env_var: str = "KEEPCLICKING_PREFS_PATH",
    default_path: str = "~/.keepclicking/preferences.json",
) -> JsonFilePreferenceStorage:
    """
    Factory function to create JsonFilePreferenceStorage from config.

    Args:
        path: Explicit file path (overrides env var)
        env_var: Environment variable name for the file path
        default_path: Default path if not configured

    Returns:
        Configured JsonFilePreferenceStorage instance
    """
    if path is None:
        path = os.environ.get(env_var, default_path)

    return JsonFilePreferenceStorage(Path(path).expanduser())
