"""
Content component port definitions.
"""

from __future__ import annotations

from typing import Protocol

from keepclicking.domain.entities import AboutPage, Post, ResourceCategory


class ContentError(Exception):
    """Raised when a content file cannot be turned into a page."""

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


class PostSourcePort(Protocol):
    """Read-only source of blog posts."""

    def load_posts(self) -> list[Post]:
        """Load every post, in no particular order."""
        ...


class ResourceSourcePort(Protocol):
    """Read-only source of the resources page links."""

    def load_resources(self) -> list[ResourceCategory]:
        """Load resource categories in display order."""
        ...


class AboutSourcePort(Protocol):
    """Read-only source of the about page."""

    def load_about(self) -> AboutPage:
        """Load the about page, falling back to a bare heading."""
        ...
