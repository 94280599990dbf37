"""
Render posts component - Render markdown post bodies to HTML.
"""

from ._impl import (
    DEFAULT_RENDER_CONFIG,
    PostRenderer,
    RenderConfig,
    count_words,
    create_post_renderer,
    extract_text,
    prune_excerpt,
    reading_time,
)
from .component import run, run_extract_text, run_render
from .models import (
    ExtractTextInput,
    RenderPostInput,
    RenderPostOutput,
    TextOutput,
)

__all__ = [
    # Component entry points
    "run",
    "run_render",
    "run_extract_text",
    # Models
    "RenderPostInput",
    "RenderPostOutput",
    "ExtractTextInput",
    "TextOutput",
    # Renderer
    "DEFAULT_RENDER_CONFIG",
    "PostRenderer",
    "RenderConfig",
    "create_post_renderer",
    # Helpers
    "count_words",
    "extract_text",
    "prune_excerpt",
    "reading_time",
]
