"""
Render component - Page metadata for <head> (title, description, OG, Twitter).
"""

from ._impl import (
    MetaTag,
    PageMetadata,
    RenderService,
    build_canonical_url,
    create_render_service,
    twitter_handle,
)

__all__ = [
    "MetaTag",
    "PageMetadata",
    "RenderService",
    "build_canonical_url",
    "create_render_service",
    "twitter_handle",
]
