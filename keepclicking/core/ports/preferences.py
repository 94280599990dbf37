"""
Preference Storage Port.

Protocol-based interface for the small key/value store that holds
visitor preferences (currently only the theme variant). It mirrors the
browser's ``localStorage`` API: string keys, string values, ``None`` for
a missing key.

Implementations: in-memory, JSON file, request cookies, disabled.

Invariants:
- Values are stored and returned verbatim (no interpretation)
- An unusable backend raises StorageUnavailableError, never a raw OSError
"""

from __future__ import annotations

from typing import Protocol


class StorageError(Exception):
    """Base exception for preference storage operations."""

    pass


class StorageUnavailableError(StorageError):
    """Raised when the backing store is disabled or cannot be used."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Preference storage unavailable: {reason}")


class PreferenceStoragePort(Protocol):
    """
    Key/value preference storage port interface.

    Values survive page reloads (or process restarts) for as long as the
    backend keeps them.
    """

    def get_item(self, key: str) -> str | None:
        """
        Get the stored value for a key.

        Returns:
            The stored string, or None if the key has never been set.

        Raises:
            StorageUnavailableError: If storage cannot be read.
        """
        ...

    def set_item(self, key: str, value: str) -> None:
        """
        Store a value under a key, replacing any previous value.

        Raises:
            StorageUnavailableError: If storage cannot be written.
        """
        ...
