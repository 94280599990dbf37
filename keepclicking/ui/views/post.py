from __future__ import annotations

from keepclicking.domain.entities import Post, PostNeighbours
from keepclicking.ui.components.posts import render_post_nav
from keepclicking.ui.components.tags import render_tag_headings
from keepclicking.ui.html import escape


def render_post(
    post: Post,
    neighbours: PostNeighbours,
    *,
    bio_html: str,
    comments_html: str = "",
) -> str:
    """Blog post template: header, body, bio, comments, then navigation."""
    # post.html is rendered markdown from our own content directory
    return f"""<article>
  <header>
    <h1 class="article_title">{escape(post.display_title)}</h1>
    <p class="article_date">{escape(post.display_date)}</p>
    {render_tag_headings(post.tags)}
  </header>
  <section class="article_body">
{post.html}
  </section>
  <hr class="bottom_hr" />
  <footer>
{bio_html}
  </footer>
{comments_html}
</article>
{render_post_nav(neighbours)}"""
