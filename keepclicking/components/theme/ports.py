"""
Theme component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from keepclicking.core.ports.preferences import PreferenceStoragePort
from keepclicking.domain.entities import ThemeVariant

__all__ = ["PreferenceStoragePort", "ThemeStorePort", "ThemeSubscriber"]


class ThemeSubscriber(Protocol):
    """Callback invoked with the new variant every time the theme is set."""

    def __call__(self, theme: ThemeVariant) -> None: ...


class ThemeStorePort(Protocol):
    """What display components need from the theme store."""

    def read(self) -> ThemeVariant:
        """Get the current variant."""
        ...

    def set(self, theme: ThemeVariant) -> bool:
        """Set the variant. Returns whether it was persisted."""
        ...

    def subscribe(self, callback: ThemeSubscriber) -> None:
        """Register a callback for theme changes."""
        ...
