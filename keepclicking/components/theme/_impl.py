"""
ThemeStore - Light/dark theme preference store.

Holds the visitor's theme choice for the lifetime of a page (or request),
backed by a PreferenceStoragePort for persistence.

Key behaviors:
- Loaded once from storage when the store is created
- read() is side-effect free and always answers from the session copy
- set() updates the session copy, persists it, then notifies subscribers
- Unavailable storage degrades to the default variant on load and to a
  session-only value on set; it never raises to the caller

Invariants:
- The session copy is always one of the two variants
- The session copy and the persisted copy agree after every set() that
  reports persisted=True
- Subscribers are called exactly once per set() call, in registration order
"""

from __future__ import annotations

import logging
from typing import cast

from keepclicking.core.ports.preferences import PreferenceStoragePort, StorageUnavailableError
from keepclicking.domain.entities import THEME_VARIANTS, ThemeVariant

from .ports import ThemeSubscriber

logger = logging.getLogger(__name__)

DEFAULT_THEME: ThemeVariant = "light"
DEFAULT_STORAGE_KEY = "theme"


class InvalidThemeError(ValueError):
    """Raised when a value outside the two theme variants is used."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Invalid theme {value!r}: must be one of {', '.join(THEME_VARIANTS)}"
        )


def is_theme(value: object) -> bool:
    """Check whether a value is one of the theme variants."""
    return isinstance(value, str) and value in THEME_VARIANTS


def validate_theme(value: object) -> ThemeVariant:
    """Return value as a ThemeVariant or raise InvalidThemeError."""
    if not is_theme(value):
        raise InvalidThemeError(value)
    return cast(ThemeVariant, value)


def opposite(theme: ThemeVariant) -> ThemeVariant:
    """The other variant."""
    return "light" if theme == "dark" else "dark"


class ThemeStore:
    """
    Theme preference store.

    Passed explicitly to whatever needs the theme (the page layout, the
    theme API); there is no process-wide instance.
    """

    def __init__(
        self,
        storage: PreferenceStoragePort,
        *,
        default: ThemeVariant = DEFAULT_THEME,
        key: str = DEFAULT_STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._key = key
        self._default = validate_theme(default)
        self._subscribers: list[ThemeSubscriber] = []
        self._theme = self._load()

    @property
    def default(self) -> ThemeVariant:
        return self._default

    @property
    def key(self) -> str:
        return self._key

    def _load(self) -> ThemeVariant:
        try:
            stored = self._storage.get_item(self._key)
        except StorageUnavailableError as e:
            logger.warning("Theme storage unavailable, using %s: %s", self._default, e.reason)
            return self._default

        if stored is None:
            return self._default

        if not is_theme(stored):
            logger.warning("Ignoring unknown stored theme %r", stored)
            return self._default

        return cast(ThemeVariant, stored)

    def read(self) -> ThemeVariant:
        """Get the current variant."""
        return self._theme

    def set(self, theme: ThemeVariant) -> bool:
        """
        Set the current variant.

        Args:
            theme: "light" or "dark".

        Returns:
            True if the value was persisted, False if storage was
            unavailable and the value only lives in this session.

        Raises:
            InvalidThemeError: If theme is not a variant. Nothing changes.
        """
        theme = validate_theme(theme)
        self._theme = theme

        persisted = True
        try:
            self._storage.set_item(self._key, theme)
        except StorageUnavailableError as e:
            logger.warning("Theme %s kept for this session only: %s", theme, e.reason)
            persisted = False

        for callback in list(self._subscribers):
            callback(theme)

        return persisted

    def toggle(self) -> bool:
        """Flip between light and dark."""
        return self.set(opposite(self._theme))

    def subscribe(self, callback: ThemeSubscriber) -> None:
        """Register a callback invoked with the new variant on every set()."""
        self._subscribers.append(callback)


def create_theme_store(
    storage: PreferenceStoragePort,
    default: str = DEFAULT_THEME,
    key: str = DEFAULT_STORAGE_KEY,
) -> ThemeStore:
    """Factory function to create a ThemeStore."""
    return ThemeStore(storage, default=validate_theme(default), key=key)
