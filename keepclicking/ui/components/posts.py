"""
Post listing entries and previous/next navigation.
"""

from __future__ import annotations

from keepclicking.domain.entities import Post, PostNeighbours
from keepclicking.ui.components.tags import render_tag_list
from keepclicking.ui.html import escape


def render_post_entry(post: Post) -> str:
    """One post on a listing page: title link, tags, date, summary."""
    return f"""<article class="post_entry">
  <header>
    <h3><a class="article_link" href="{escape(post.slug)}">{escape(post.display_title)}</a></h3>
    {render_tag_list(post.tags)}
    <small class="frontpage_date">{escape(post.display_date)} &bull; {escape(post.reading_time)}</small>
  </header>
  <section class="article_description">
    <p>{escape(post.summary)}</p>
  </section>
</article>"""


def render_post_list(posts: list[Post]) -> str:
    if not posts:
        return '<p class="empty">Nothing here yet.</p>'
    return "\n".join(render_post_entry(p) for p in posts)


def render_post_nav(neighbours: PostNeighbours) -> str:
    """Older post on the left, newer on the right; empty slots kept for layout."""
    previous = ""
    if neighbours.previous is not None:
        p = neighbours.previous
        previous = (
            f'<a class="prev_link" href="{escape(p.slug)}" rel="prev">'
            f"&larr; {escape(p.display_title)}</a>"
        )

    following = ""
    if neighbours.next is not None:
        n = neighbours.next
        following = (
            f'<a class="next_link" href="{escape(n.slug)}" rel="next">'
            f"{escape(n.display_title)} &rarr;</a>"
        )

    return f"""<nav>
  <ul class="prev_next_link">
    <li>{previous}</li>
    <li>{following}</li>
  </ul>
</nav>"""
