from __future__ import annotations

from keepclicking.domain.entities import Post
from keepclicking.ui.components.posts import render_post_list


def render_home(posts: list[Post], *, bio_html: str) -> str:
    """Bio followed by every post, newest first."""
    return f"{bio_html}\n{render_post_list(posts)}"
