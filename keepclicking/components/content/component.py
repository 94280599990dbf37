"""
Content component - Posts, tags and resources for the public pages.

Orders and looks up what the content source provides; never writes.

Key behaviors:
- Posts are listed newest first (ties broken by slug)
- A post's "previous" neighbour is the next older post and its "next"
  neighbour is the next newer one
- Slugs are compared in their canonical "/slug/" form
"""

from __future__ import annotations

from collections import Counter

from keepclicking.domain.entities import Post, PostNeighbours

from .models import (
    GetPostInput,
    GetPostOutput,
    ListPostsInput,
    ListPostsOutput,
    ListResourcesInput,
    ListResourcesOutput,
    ListTagsInput,
    ListTagsOutput,
    PostsByTagInput,
    TagCount,
)
from .ports import PostSourcePort, ResourceSourcePort

# --- Helpers ---


def normalize_slug(slug: str) -> str:
    """Canonical slug form: leading and trailing slash, e.g. "/hello/"."""
    stripped = slug.strip().strip("/")
    if not stripped:
        return "/"
    return f"/{stripped}/"


def sort_posts(posts: list[Post]) -> list[Post]:
    """Newest first; same-day posts ordered by slug."""
    by_slug = sorted(posts, key=lambda p: p.slug)
    return sorted(by_slug, key=lambda p: p.date, reverse=True)


def find_neighbours(posts: list[Post], slug: str) -> PostNeighbours:
    """Neighbours of ``slug`` within an already sorted list."""
    for index, post in enumerate(posts):
        if post.slug == slug:
            older = posts[index + 1] if index + 1 < len(posts) else None
            newer = posts[index - 1] if index > 0 else None
            return PostNeighbours(previous=older, next=newer)
    return PostNeighbours()


# --- Component Entry Points ---


def run_list_posts(
    inp: ListPostsInput,
    *,
    source: PostSourcePort,
) -> ListPostsOutput:
    """
    List posts newest first.

    Args:
        inp: Optional tag filter and limit.
        source: Post source port.

    Returns:
        ListPostsOutput with the (filtered, limited) posts and the total
        number that matched before the limit.
    """
    posts = sort_posts(source.load_posts())

    if inp.tag is not None:
        posts = [p for p in posts if inp.tag in p.tags]

    total = len(posts)
    if inp.limit is not None:
        posts = posts[: inp.limit]

    return ListPostsOutput(posts=posts, total=total)


def run_posts_by_tag(
    inp: PostsByTagInput,
    *,
    source: PostSourcePort,
) -> ListPostsOutput:
    """Posts carrying a tag, newest first. Tags match exactly."""
    return run_list_posts(ListPostsInput(tag=inp.tag), source=source)


def run_get_post(
    inp: GetPostInput,
    *,
    source: PostSourcePort,
) -> GetPostOutput:
    """
    Get a post by slug with its previous/next neighbours.

    Returns found=False (and no post) when the slug is unknown.
    """
    slug = normalize_slug(inp.slug)
    posts = sort_posts(source.load_posts())

    for post in posts:
        if post.slug == slug:
            return GetPostOutput(post=post, neighbours=find_neighbours(posts, slug))

    return GetPostOutput(post=None, found=False)


def run_list_tags(
    inp: ListTagsInput,
    *,
    source: PostSourcePort,
) -> ListTagsOutput:
    """Every tag in use with its post count, sorted by tag."""
    counts: Counter[str] = Counter()
    for post in source.load_posts():
        counts.update(set(post.tags))

    return ListTagsOutput(
        tags=[TagCount(tag=tag, count=counts[tag]) for tag in sorted(counts)]
    )


def run_list_resources(
    inp: ListResourcesInput,
    *,
    source: ResourceSourcePort,
) -> ListResourcesOutput:
    """Resource categories in display order."""
    return ListResourcesOutput(categories=source.load_resources())
