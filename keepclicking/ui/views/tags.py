from __future__ import annotations

from keepclicking.components.content import TagCount
from keepclicking.domain.entities import Post
from keepclicking.ui.components.posts import render_post_list
from keepclicking.ui.components.tags import render_tag_index
from keepclicking.ui.html import escape


def render_tags_index(tags: list[TagCount]) -> str:
    return f"<h1>Tags</h1>\n{render_tag_index(tags)}"


def render_tag_page(tag: str, posts: list[Post]) -> str:
    noun = "post" if len(posts) == 1 else "posts"
    return f"""<h1>#{escape(tag)}</h1>
<p class="tag_count">{len(posts)} {noun}</p>
{render_post_list(posts)}
<p><a href="/tags/">All tags</a></p>"""
