"""
SiteRenderer - Composes content, metadata and views into full pages.

Shared by the HTTP routes and the static build so both produce the same
markup. Every page method takes the theme store to render with; pages
rendered without one (the static build) show a toggle placeholder until
the page script takes over.
"""

from __future__ import annotations

from urllib.parse import unquote

from keepclicking.components.comments import build_embed, render_embed_html
from keepclicking.components.content import (
    AboutSourcePort,
    GetPostInput,
    ListPostsInput,
    ListResourcesInput,
    ListTagsInput,
    PostsByTagInput,
    PostSourcePort,
    ResourceSourcePort,
    normalize_slug,
    run_get_post,
    run_list_posts,
    run_list_resources,
    run_list_tags,
    run_posts_by_tag,
)
from keepclicking.components.render import PageMetadata, RenderService
from keepclicking.components.theme import ThemeStorePort
from keepclicking.config.models import SiteConfig
from keepclicking.ui.components.bio import render_bio
from keepclicking.ui.html import tag_path
from keepclicking.ui.layout import Layout
from keepclicking.ui.views.about import render_about
from keepclicking.ui.views.home import render_home
from keepclicking.ui.views.not_found import render_not_found
from keepclicking.ui.views.post import render_post
from keepclicking.ui.views.resources import render_resources
from keepclicking.ui.views.tags import render_tag_page, render_tags_index

RESOURCES_PATH = "/resources/"
TAGS_PATH = "/tags/"


class SiteRenderer:
    def __init__(
        self,
        config: SiteConfig,
        *,
        posts: PostSourcePort,
        resources: ResourceSourcePort,
        about: AboutSourcePort,
        static_prefix: str = "/static",
    ) -> None:
        self.config = config
        self.posts = posts
        self.resources = resources
        self.about_source = about
        self.static_prefix = static_prefix
        self.meta = RenderService(config.site)

    @property
    def about_path(self) -> str:
        return normalize_slug(self.config.pages.about_slug)

    def layout(self, store: ThemeStorePort | None) -> Layout:
        theme = self.config.theme
        return Layout(
            self.config.site.title,
            store=store,
            static_prefix=self.static_prefix,
            storage_key=theme.storage_key,
            cookie_max_age_seconds=theme.cookie_max_age_days * 24 * 60 * 60,
            default_theme=theme.default_variant,
        )

    def _bio(self) -> str:
        return render_bio(
            self.config.site,
            about_path=self.about_path,
            blurb=self.config.pages.bio_blurb,
            static_prefix=self.static_prefix,
        )

    def _page(
        self, store: ThemeStorePort | None, path: str, body: str, metadata: PageMetadata
    ) -> str:
        return self.layout(store).render(path, body, metadata)

    # --- Pages ---

    def home(self, store: ThemeStorePort | None = None) -> str:
        posts = run_list_posts(ListPostsInput(), source=self.posts).posts
        body = render_home(posts, bio_html=self._bio())
        return self._page(store, "/", body, self.meta.build_homepage_metadata())

    def post(self, slug: str, store: ThemeStorePort | None = None) -> str | None:
        """Post page, or None if no post has this slug."""
        result = run_get_post(GetPostInput(slug=slug), source=self.posts)
        if result.post is None:
            return None

        post = result.post
        embed = build_embed(
            self.config.comments.disqus_shortname, self.config.site.site_url, post.slug
        )
        body = render_post(
            post,
            result.neighbours,
            bio_html=self._bio(),
            comments_html=render_embed_html(embed),
        )
        return self._page(store, post.slug, body, self.meta.build_post_metadata(post))

    def about(self, store: ThemeStorePort | None = None) -> str:
        page = self.about_source.load_about()
        metadata = self.meta.build_page_metadata(path=self.about_path, page_title=page.heading)
        return self._page(store, self.about_path, render_about(page), metadata)

    def resource_page(self, store: ThemeStorePort | None = None) -> str:
        pages = self.config.pages
        categories = run_list_resources(ListResourcesInput(), source=self.resources).categories
        body = render_resources(pages.resources_title, pages.resources_subtitle, categories)
        metadata = self.meta.build_page_metadata(
            path=RESOURCES_PATH,
            page_title=pages.resources_title,
            page_description=pages.resources_subtitle,
        )
        return self._page(store, RESOURCES_PATH, body, metadata)

    def tags_index(self, store: ThemeStorePort | None = None) -> str:
        tags = run_list_tags(ListTagsInput(), source=self.posts).tags
        metadata = self.meta.build_page_metadata(path=TAGS_PATH, page_title="Tags")
        return self._page(store, TAGS_PATH, render_tags_index(tags), metadata)

    def tag(self, tag: str, store: ThemeStorePort | None = None) -> str | None:
        """Tag page, or None if no post carries the tag."""
        posts = run_posts_by_tag(PostsByTagInput(tag=tag), source=self.posts).posts
        if not posts:
            return None

        path = tag_path(tag)
        metadata = self.meta.build_page_metadata(path=path, page_title=f"#{tag}")
        return self._page(store, path, render_tag_page(tag, posts), metadata)

    def not_found(self, path: str, store: ThemeStorePort | None = None) -> str:
        metadata = self.meta.build_page_metadata(path=path, page_title="Not Found")
        return self._page(store, path, render_not_found(path), metadata)

    def slug_page(self, slug: str, store: ThemeStorePort | None = None) -> str | None:
        """The about page or a post, whichever owns the slug."""
        if normalize_slug(slug) == self.about_path:
            return self.about(store)
        return self.post(slug, store)

    # --- Static build support ---

    def page_paths(self) -> list[str]:
        """Every path the site serves, for exporting."""
        paths = ["/", RESOURCES_PATH, TAGS_PATH, self.about_path]
        posts = run_list_posts(ListPostsInput(), source=self.posts).posts
        paths.extend(p.slug for p in posts)
        tags = run_list_tags(ListTagsInput(), source=self.posts).tags
        paths.extend(tag_path(t.tag) for t in tags)
        return paths

    def render_path(self, path: str, store: ThemeStorePort | None = None) -> str | None:
        """Render any path from page_paths(); None for unknown paths."""
        if path == "/":
            return self.home(store)
        if path == RESOURCES_PATH:
            return self.resource_page(store)
        if path == TAGS_PATH:
            return self.tags_index(store)
        if path.startswith(TAGS_PATH):
            return self.tag(unquote(path[len(TAGS_PATH) :].strip("/")), store)
        return self.slug_page(path, store)
