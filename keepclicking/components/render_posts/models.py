"""
Render posts component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass

# --- Input Models ---


@dataclass(frozen=True)
class RenderPostInput:
    """Input for rendering a post body."""

    markdown: str
    excerpt_length: int | None = None


@dataclass(frozen=True)
class ExtractTextInput:
    """Input for extracting plain text from a post body."""

    markdown: str


# --- Output Models ---


@dataclass(frozen=True)
class RenderPostOutput:
    """Rendered post body plus derived listing fields."""

    html: str
    excerpt: str
    reading_time: str
    word_count: int


@dataclass(frozen=True)
class TextOutput:
    """Output containing extracted plain text."""

    text: str
