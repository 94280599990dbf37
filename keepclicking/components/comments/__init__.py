"""
Comments component - Third-party comment widget embed.
"""

from ._impl import (
    EMBED_URL_TEMPLATE,
    SHORTNAME_RE,
    CommentsEmbed,
    build_embed,
    page_identifier,
    render_embed_html,
)

__all__ = [
    "EMBED_URL_TEMPLATE",
    "SHORTNAME_RE",
    "CommentsEmbed",
    "build_embed",
    "page_identifier",
    "render_embed_html",
]
