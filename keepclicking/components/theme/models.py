"""
Theme component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

from keepclicking.domain.entities import ThemeVariant


@dataclass(frozen=True)
class ReadThemeInput:
    """Input for reading the current theme."""

    pass


@dataclass(frozen=True)
class ReadThemeOutput:
    """Output from reading the current theme."""

    theme: ThemeVariant


@dataclass(frozen=True)
class SetThemeInput:
    """Input for setting the theme."""

    theme: ThemeVariant


@dataclass(frozen=True)
class ToggleThemeInput:
    """Input for flipping the theme (the layout's toggle control)."""

    pass


@dataclass(frozen=True)
class SetThemeOutput:
    """
    Output from setting or toggling the theme.

    ``persisted`` is False when storage was unavailable and the new value
    only lives for the current session.
    """

    theme: ThemeVariant
    persisted: bool = True
