"""
Content component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from keepclicking.domain.entities import Post, PostNeighbours, ResourceCategory


@dataclass(frozen=True)
class ListPostsInput:
    """Input for listing posts, optionally filtered by tag."""

    tag: str | None = None
    limit: int | None = None


@dataclass(frozen=True)
class ListPostsOutput:
    """Posts in date-descending order."""

    posts: list[Post]
    total: int


@dataclass(frozen=True)
class GetPostInput:
    """Input for fetching one post by slug."""

    slug: str


@dataclass(frozen=True)
class GetPostOutput:
    """A post and its neighbours in the date-descending list."""

    post: Post | None
    neighbours: PostNeighbours = field(default_factory=PostNeighbours)
    found: bool = True


@dataclass(frozen=True)
class TagCount:
    tag: str
    count: int


@dataclass(frozen=True)
class ListTagsInput:
    pass


@dataclass(frozen=True)
class ListTagsOutput:
    tags: list[TagCount]


@dataclass(frozen=True)
class ListResourcesInput:
    pass


@dataclass(frozen=True)
class ListResourcesOutput:
    categories: list[ResourceCategory]


@dataclass(frozen=True)
class PostsByTagInput:
    """Input for a tag page."""

    tag: str
