"""
Post Renderer - Markdown post bodies to HTML, excerpts and reading time.

Key behaviors:
- Converts markdown to HTML with patitas
- Extracts plain text from rendered HTML
- Prunes excerpts on a word boundary and appends an ellipsis
- Estimates reading time at a fixed words-per-minute rate
"""

from __future__ import annotations

import html
import math
import re
from dataclasses import dataclass

from patitas import Markdown

# --- Configuration ---


@dataclass(frozen=True)
class RenderConfig:
    """Rendering configuration."""

    plugins: tuple[str, ...] = ("all",)
    highlight: bool = False
    excerpt_length: int = 160
    ellipsis: str = "…"
    words_per_minute: int = 200


DEFAULT_RENDER_CONFIG = RenderConfig()

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


# --- Text Helpers ---


def extract_text(rendered_html: str) -> str:
    """Strip tags and collapse whitespace from rendered HTML."""
    text = _TAG_RE.sub(" ", rendered_html)
    text = html.unescape(text)
    return _WHITESPACE_RE.sub(" ", text).strip()


def prune_excerpt(text: str, length: int, ellipsis: str = "…") -> str:
    """
    Cut text to at most ``length`` characters on a word boundary.

    Text that already fits is returned unchanged. A single word longer
    than ``length`` is hard-cut.
    """
    text = text.strip()
    if len(text) <= length:
        return text

    cut = text[: length + 1]
    boundary = cut.rfind(" ")
    if boundary <= 0:
        pruned = text[:length]
    else:
        pruned = cut[:boundary]

    return pruned.rstrip(" ,.;:!?-") + ellipsis


def count_words(text: str) -> int:
    return len(text.split())


def reading_time(text: str, words_per_minute: int = 200) -> str:
    """Human readable reading time, rounded up, at least one minute."""
    minutes = max(1, math.ceil(count_words(text) / words_per_minute))
    return f"{minutes} min read"


# --- Post Renderer Service ---


class PostRenderer:
    """
    Post renderer service.

    Renders post bodies from markdown source to HTML.
    """

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer."""
        self._config = config or DEFAULT_RENDER_CONFIG
        self._md = Markdown(plugins=list(self._config.plugins), highlight=self._config.highlight)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def render(self, source: str) -> str:
        """Render markdown source to HTML."""
        if not source.strip():
            return ""
        return self._md(source)

    def extract_text(self, source: str) -> str:
        """Plain text of a markdown document."""
        return extract_text(self.render(source))

    def excerpt(self, source: str, length: int | None = None) -> str:
        """Pruned plain-text excerpt of a markdown document."""
        return prune_excerpt(
            self.extract_text(source),
            length if length is not None else self._config.excerpt_length,
            self._config.ellipsis,
        )

    def reading_time(self, source: str) -> str:
        """Reading time of a markdown document."""
        return reading_time(self.extract_text(source), self._config.words_per_minute)


# --- Factory ---


def create_post_renderer(config: RenderConfig | None = None) -> PostRenderer:
    """Create a PostRenderer."""
    return PostRenderer(config=config)
