from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from keepclicking.adapters.fs.markdown_source import (
    MarkdownAboutSource,
    MarkdownPostSource,
    YamlResourceSource,
)
from keepclicking.components.render_posts import PostRenderer, RenderConfig
from keepclicking.config.loader import content_root
from keepclicking.config.models import SiteConfig
from keepclicking.ui.site import SiteRenderer


@dataclass
class ServiceContext:
    config: SiteConfig
    content_dir: Path
    post_source: MarkdownPostSource
    resource_source: YamlResourceSource
    about_source: MarkdownAboutSource
    site: SiteRenderer

    @classmethod
    def create(
        cls,
        config: SiteConfig,
        base_dir: Path,
        *,
        content_dir: str | None = None,
        cache: bool = True,
        static_prefix: str = "/static",
    ) -> ServiceContext:
        root = content_root(config, base_dir, content_dir)
        content = config.content

        renderer = PostRenderer(
            RenderConfig(
                excerpt_length=content.excerpt_length,
                words_per_minute=content.words_per_minute,
            )
        )

        post_source = MarkdownPostSource(
            root / content.posts_dir,
            renderer=renderer,
            excerpt_length=content.excerpt_length,
            cache=cache,
        )
        resource_source = YamlResourceSource(root / content.resources_file)
        about_source = MarkdownAboutSource(root / content.about_file, renderer=renderer)

        site = SiteRenderer(
            config,
            posts=post_source,
            resources=resource_source,
            about=about_source,
            static_prefix=static_prefix,
        )

        return cls(
            config=config,
            content_dir=root,
            post_source=post_source,
            resource_source=resource_source,
            about_source=about_source,
            site=site,
        )
