from __future__ import annotations

from keepclicking.components.content import TagCount
from keepclicking.ui.html import escape, tag_path


def render_tag_list(tags: list[str]) -> str:
    """Inline list of "#tag" links; empty string for no tags."""
    if not tags:
        return ""

    items = "\n".join(
        f'  <li class="tag"><a href="{escape(tag_path(tag))}">#{escape(tag)}</a></li>'
        for tag in tags
    )
    return f'<ul class="tag_list">\n{items}\n</ul>'


def render_tag_headings(tags: list[str]) -> str:
    """Tags as headings under a post title."""
    return "\n".join(
        f'<h2 class="article_tag"><a href="{escape(tag_path(tag))}">{escape(tag)}</a></h2>'
        for tag in tags
    )


def render_tag_index(tags: list[TagCount]) -> str:
    if not tags:
        return "<p>No tags yet.</p>"

    items = "\n".join(
        f'  <li><a href="{escape(tag_path(t.tag))}">#{escape(t.tag)}</a> ({t.count})</li>'
        for t in tags
    )
    return f'<ul class="tag_index">\n{items}\n</ul>'
