"""
Head metadata for public pages.

Produces <head> metadata for every public page from the site
metadata and, for posts, the post itself.

Key behaviors:
- Title is "<page> | <site title>", or just the site title on the home page
- Description falls back from page description to site description
- Canonical URL is the site URL joined with the page path
- Generates OG and Twitter Card meta tags, with the author's twitter
  handle as twitter:creator when configured
- No I/O; the result depends only on the site metadata and the page
"""

from __future__ import annotations

from dataclasses import dataclass, field

from keepclicking.domain.entities import Post, SiteMetadata


@dataclass
class MetaTag:
    """One <meta> element. OpenGraph tags use `property`, the rest `name`."""

    name: str | None = None
    property: str | None = None
    content: str = ""


@dataclass
class PageMetadata:
    """Everything a page needs in its <head>, social card fields included."""

    title: str
    description: str
    canonical_url: str

    # og:
    og_title: str = ""
    og_type: str = "website"
    og_site_name: str = ""

    # twitter:
    twitter_card: str = "summary"
    twitter_creator: str = ""

    extra_meta: list[MetaTag] = field(default_factory=list)

    def to_meta_tags(self) -> list[MetaTag]:
        """Flatten into the ordered list of <meta> elements the layout writes."""
        og_title = self.og_title or self.title
        tags = [
            MetaTag(name="description", content=self.description),
            MetaTag(property="og:title", content=og_title),
            MetaTag(property="og:description", content=self.description),
            MetaTag(property="og:type", content=self.og_type),
            MetaTag(property="og:url", content=self.canonical_url),
        ]

        if self.og_site_name:
            tags.append(MetaTag(property="og:site_name", content=self.og_site_name))

        tags.append(MetaTag(name="twitter:card", content=self.twitter_card))
        if self.twitter_creator:
            tags.append(MetaTag(name="twitter:creator", content=self.twitter_creator))
        tags.extend(
            [
                MetaTag(name="twitter:title", content=og_title),
                MetaTag(name="twitter:description", content=self.description),
            ]
        )

        tags.extend(self.extra_meta)
        return tags


def build_canonical_url(base_url: str, path: str) -> str:
    """Join the site URL and a page path with exactly one slash between them."""
    base = base_url.rstrip("/")
    if not path.startswith("/"):
        path = "/" + path

    return f"{base}{path}"


def twitter_handle(value: str | None) -> str:
    """Normalise a twitter handle to "@name" (empty if unset)."""
    if not value:
        return ""
    return value if value.startswith("@") else f"@{value}"


class RenderService:
    """Builds PageMetadata for the pages of one site."""

    def __init__(self, site: SiteMetadata) -> None:
        self._site = site

    @property
    def site(self) -> SiteMetadata:
        return self._site

    def build_page_metadata(
        self,
        path: str = "/",
        page_title: str | None = None,
        page_description: str | None = None,
        og_type: str = "website",
    ) -> PageMetadata:
        """Metadata for any page. A missing page_title means the home page."""
        site = self._site
        title = f"{page_title} | {site.title}" if page_title else site.title

        return PageMetadata(
            title=title,
            description=page_description or site.description,
            canonical_url=build_canonical_url(site.site_url, path),
            og_title=page_title or site.title,
            og_type=og_type,
            og_site_name=site.title,
            twitter_creator=twitter_handle(site.social.twitter),
        )

    def build_post_metadata(self, post: Post) -> PageMetadata:
        """Posts are OpenGraph articles described by their summary."""
        return self.build_page_metadata(
            path=post.slug,
            page_title=post.display_title,
            page_description=post.summary,
            og_type="article",
        )

    def build_homepage_metadata(self, page_title: str | None = None) -> PageMetadata:
        return self.build_page_metadata(path="/", page_title=page_title)


def create_render_service(site: SiteMetadata) -> RenderService:
    return RenderService(site)
