"""
Filesystem content source.

Reads blog posts from markdown files with a YAML front matter block,
the resources page from a YAML file and the about page from an optional
markdown file.

Layout:
    <posts_dir>/hello-world/index.md   -> slug "/hello-world/"
    <posts_dir>/short-note.md          -> slug "/short-note/"

Front matter:
    ---
    title: Hello World
    date: 2020-01-30
    description: optional summary
    tags: [python, blogging]
    ---
"""

from __future__ import annotations

import datetime as dt
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from keepclicking.components.content.ports import ContentError
from keepclicking.components.render_posts import PostRenderer, RenderPostInput, run_render
from keepclicking.domain.entities import AboutPage, Post, ResourceCategory

logger = logging.getLogger(__name__)

FRONT_MATTER_FENCE = "---"


def split_front_matter(text: str, path: str = "<string>") -> tuple[dict[str, Any], str]:
    """
    Split a document into (front matter mapping, markdown body).

    Raises:
        ContentError: If the front matter block is missing, unterminated,
            not valid YAML or not a mapping.
    """
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != FRONT_MATTER_FENCE:
        raise ContentError(path, "missing front matter block")

    for index, line in enumerate(lines[1:], start=1):
        if line.strip() == FRONT_MATTER_FENCE:
            header = "\n".join(lines[1:index])
            body = "\n".join(lines[index + 1 :])
            break
    else:
        raise ContentError(path, "unterminated front matter block")

    try:
        data = yaml.safe_load(header) or {}
    except yaml.YAMLError as e:
        raise ContentError(path, f"invalid YAML in front matter: {e}") from e

    if not isinstance(data, dict):
        raise ContentError(path, "front matter must be a mapping")

    return data, body


def _coerce_date(value: Any, path: str) -> dt.date:
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if isinstance(value, str):
        try:
            return dt.date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
    raise ContentError(path, f"invalid or missing date: {value!r}")


def _clean_tag(raw: Any) -> str:
    # Tags name a single path segment under /tags/
    return str(raw).strip().replace("/", "-").replace("\\", "-")


def _coerce_tags(value: Any, path: str) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        raw = value.split(",")
    elif isinstance(value, list):
        raw = value
    else:
        raise ContentError(path, f"tags must be a list or a comma separated string: {value!r}")
    return [tag for tag in (_clean_tag(t) for t in raw) if tag]


def slug_for(path: Path, posts_dir: Path) -> str:
    """URL slug for a post file."""
    relative = path.relative_to(posts_dir)
    if relative.name == "index.md":
        parts = relative.parent.parts
    else:
        parts = (*relative.parent.parts, relative.stem)
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


class MarkdownPostSource:
    """PostSourcePort reading markdown files from a directory tree."""

    def __init__(
        self,
        posts_dir: str | Path,
        *,
        renderer: PostRenderer | None = None,
        excerpt_length: int = 160,
        cache: bool = True,
    ) -> None:
        self.posts_dir = Path(posts_dir)
        self.renderer = renderer or PostRenderer()
        self.excerpt_length = excerpt_length
        self.cache = cache
        self._posts: list[Post] | None = None

    def _post_files(self) -> list[Path]:
        if not self.posts_dir.is_dir():
            logger.warning("Posts directory %s does not exist", self.posts_dir)
            return []
        return sorted(p for p in self.posts_dir.rglob("*.md") if p.is_file())

    def parse_post(self, path: Path) -> Post:
        """Parse one markdown file into a Post."""
        meta, body = split_front_matter(path.read_text(encoding="utf-8"), str(path))
        rendered = run_render(
            RenderPostInput(markdown=body, excerpt_length=self.excerpt_length),
            renderer=self.renderer,
        )

        try:
            return Post(
                slug=slug_for(path, self.posts_dir),
                title=str(meta.get("title") or ""),
                date=_coerce_date(meta.get("date"), str(path)),
                description=meta.get("description") or None,
                tags=_coerce_tags(meta.get("tags"), str(path)),
                html=rendered.html,
                excerpt=rendered.excerpt,
                reading_time=rendered.reading_time,
            )
        except ValidationError as e:
            raise ContentError(str(path), f"invalid front matter: {e}") from e

    def load_posts(self) -> list[Post]:
        if self.cache and self._posts is not None:
            return list(self._posts)

        posts = [self.parse_post(path) for path in self._post_files()]
        logger.info("Loaded %d posts from %s", len(posts), self.posts_dir)

        if self.cache:
            self._posts = posts
        return list(posts)

    def reload(self) -> None:
        """Drop cached posts so the next load reads the files again."""
        self._posts = None


class YamlResourceSource:
    """ResourceSourcePort reading categories from a YAML file."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_resources(self) -> list[ResourceCategory]:
        if not self.path.exists():
            logger.info("No resources file at %s", self.path)
            return []

        try:
            with open(self.path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ContentError(str(self.path), f"invalid YAML: {e}") from e

        raw = data.get("categories") if isinstance(data, dict) else data
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise ContentError(str(self.path), "categories must be a list")

        try:
            return [ResourceCategory.model_validate(c) for c in raw]
        except ValidationError as e:
            raise ContentError(str(self.path), f"invalid resources: {e}") from e


class MarkdownAboutSource:
    """AboutSourcePort reading an optional markdown file."""

    def __init__(self, path: str | Path, *, renderer: PostRenderer | None = None) -> None:
        self.path = Path(path)
        self.renderer = renderer or PostRenderer()

    def load_about(self) -> AboutPage:
        if not self.path.exists():
            return AboutPage()

        text = self.path.read_text(encoding="utf-8")
        heading = "Me"
        stripped = text.lstrip("\ufeff").lstrip()
        if stripped.startswith(FRONT_MATTER_FENCE):
            meta, text = split_front_matter(stripped, str(self.path))
            heading = str(meta.get("title") or heading)

        return AboutPage(heading=heading, html=self.renderer.render(text))
