"""
Content component - Posts, tags and resources.
"""

from .component import (
    find_neighbours,
    normalize_slug,
    run_get_post,
    run_list_posts,
    run_list_resources,
    run_list_tags,
    run_posts_by_tag,
    sort_posts,
)
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
from .ports import AboutSourcePort, ContentError, PostSourcePort, ResourceSourcePort

__all__ = [
    # Component entry points
    "run_get_post",
    "run_list_posts",
    "run_list_resources",
    "run_list_tags",
    "run_posts_by_tag",
    # Models
    "GetPostInput",
    "GetPostOutput",
    "ListPostsInput",
    "ListPostsOutput",
    "ListResourcesInput",
    "ListResourcesOutput",
    "ListTagsInput",
    "ListTagsOutput",
    "PostsByTagInput",
    "TagCount",
    # Ports
    "AboutSourcePort",
    "ContentError",
    "PostSourcePort",
    "ResourceSourcePort",
    # Helpers
    "find_neighbours",
    "normalize_slug",
    "sort_posts",
]
