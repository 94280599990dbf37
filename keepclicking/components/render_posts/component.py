"""
Render posts component - Render markdown post bodies.

Invariants:
- Empty bodies render to an empty string with a one minute reading time
- Excerpts never exceed the configured length plus the ellipsis
"""

from __future__ import annotations

from ._impl import (
    PostRenderer,
    RenderConfig,
    count_words,
    extract_text,
    prune_excerpt,
    reading_time,
)
from .models import (
    ExtractTextInput,
    RenderPostInput,
    RenderPostOutput,
    TextOutput,
)


def _renderer(renderer: PostRenderer | None, config: RenderConfig | None) -> PostRenderer:
    if renderer is not None:
        return renderer
    return PostRenderer(config=config)


# --- Component Entry Points ---


def run_render(
    inp: RenderPostInput,
    *,
    renderer: PostRenderer | None = None,
    config: RenderConfig | None = None,
) -> RenderPostOutput:
    """
    Render a post body to HTML with excerpt and reading time.

    Args:
        inp: Input containing markdown source.
        renderer: Optional shared renderer (avoids rebuilding the parser).
        config: Optional config when no renderer is given.

    Returns:
        RenderPostOutput with HTML and listing fields.
    """
    r = _renderer(renderer, config)
    body_html = r.render(inp.markdown)
    text = extract_text(body_html)

    length = inp.excerpt_length if inp.excerpt_length is not None else r.config.excerpt_length

    return RenderPostOutput(
        html=body_html,
        excerpt=prune_excerpt(text, length, r.config.ellipsis),
        reading_time=reading_time(text, r.config.words_per_minute),
        word_count=count_words(text),
    )


def run_extract_text(
    inp: ExtractTextInput,
    *,
    renderer: PostRenderer | None = None,
    config: RenderConfig | None = None,
) -> TextOutput:
    """Extract plain text from a markdown post body."""
    return TextOutput(text=_renderer(renderer, config).extract_text(inp.markdown))


def run(
    inp: RenderPostInput | ExtractTextInput,
    *,
    renderer: PostRenderer | None = None,
    config: RenderConfig | None = None,
) -> RenderPostOutput | TextOutput:
    """
    Main entry point for the render posts component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, RenderPostInput):
        return run_render(inp, renderer=renderer, config=config)
    elif isinstance(inp, ExtractTextInput):
        return run_extract_text(inp, renderer=renderer, config=config)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
