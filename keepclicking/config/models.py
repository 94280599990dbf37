from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from keepclicking.components.comments import SHORTNAME_RE
from keepclicking.domain.entities import SiteMetadata, ThemeVariant


class ThemeConfig(BaseModel):
    default_variant: ThemeVariant = "light"
    storage_key: str = Field(default="theme", min_length=1)
    persistence: Literal["cookie", "none"] = "cookie"
    cookie_max_age_days: int = Field(default=365, ge=1)


class CommentsConfig(BaseModel):
    disqus_shortname: str | None = None

    @field_validator("disqus_shortname")
    @classmethod
    def _check_shortname(cls, value: str | None) -> str | None:
        if not value:
            return None
        if not SHORTNAME_RE.match(value):
            raise ValueError("disqus_shortname may only contain a-z, 0-9 and -")
        return value


class ContentConfig(BaseModel):
    root: str = "content"
    posts_dir: str = "blog"
    resources_file: str = "resources.yaml"
    about_file: str = "about.md"
    excerpt_length: int = Field(default=160, ge=1)
    words_per_minute: int = Field(default=200, ge=1)


class PagesConfig(BaseModel):
    about_slug: str = "about"
    resources_title: str = "The Modern Dev"
    resources_subtitle: str = "categorized best ofs"
    bio_blurb: str = "dev thoughts of"


class SiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    site: SiteMetadata
    theme: ThemeConfig = Field(default_factory=ThemeConfig)
    comments: CommentsConfig = Field(default_factory=CommentsConfig)
    content: ContentConfig = Field(default_factory=ContentConfig)
    pages: PagesConfig = Field(default_factory=PagesConfig)
