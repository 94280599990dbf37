import datetime as dt
from typing import Literal

from pydantic import BaseModel, Field

# --- Enums / Literals ---
ThemeVariant = Literal["light", "dark"]
THEME_VARIANTS: tuple[ThemeVariant, ...] = ("light", "dark")


# --- Site ---

class SocialHandles(BaseModel):
    twitter: str | None = None
    github: str | None = None


class SiteMetadata(BaseModel):
    title: str
    author: str
    description: str = ""
    site_url: str = "http://localhost:8000"
    social: SocialHandles = Field(default_factory=SocialHandles)


# --- Posts ---

class Post(BaseModel):
    slug: str  # URL path, e.g. "/hello-world/"
    title: str = ""
    date: dt.date
    description: str | None = None
    tags: list[str] = Field(default_factory=list)
    html: str = ""
    excerpt: str = ""
    reading_time: str = "1 min read"

    @property
    def display_title(self) -> str:
        return self.title or self.slug

    @property
    def display_date(self) -> str:
        # MMMM DD, YYYY
        return self.date.strftime("%B %d, %Y")

    @property
    def summary(self) -> str:
        return self.description or self.excerpt


class PostNeighbours(BaseModel):
    previous: Post | None = None  # older
    next: Post | None = None  # newer


# --- Resources ---

class ResourceItem(BaseModel):
    name: str
    url: str
    description: str = ""


class ResourceCategory(BaseModel):
    title: str
    items: list[ResourceItem] = Field(default_factory=list)


# --- Pages ---

class AboutPage(BaseModel):
    heading: str = "Me"
    html: str = ""
