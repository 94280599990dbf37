"""Tests for the filesystem content sources."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from keepclicking.adapters.fs.markdown_source import (
    MarkdownAboutSource,
    MarkdownPostSource,
    YamlResourceSource,
    slug_for,
    split_front_matter,
)
from keepclicking.components.content import ContentError


def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class TestSplitFrontMatter:
    def test_splits_header_and_body(self) -> None:
        meta, body = split_front_matter("---\ntitle: Hi\ntags: [a]\n---\n\nBody text\n")

        assert meta == {"title": "Hi", "tags": ["a"]}
        assert body.strip() == "Body text"

    def test_empty_header(self) -> None:
        meta, body = split_front_matter("---\n---\nBody")

        assert meta == {}
        assert body == "Body"

    def test_byte_order_mark_ignored(self) -> None:
        meta, _ = split_front_matter("﻿---\ntitle: Hi\n---\n")

        assert meta["title"] == "Hi"

    def test_missing_block(self) -> None:
        with pytest.raises(ContentError, match="missing front matter"):
            split_front_matter("# Just markdown", "post.md")

    def test_unterminated_block(self) -> None:
        with pytest.raises(ContentError, match="unterminated"):
            split_front_matter("---\ntitle: Hi\n")

    def test_invalid_yaml(self) -> None:
        with pytest.raises(ContentError, match="invalid YAML"):
            split_front_matter("---\ntitle: [unclosed\n---\n")

    def test_non_mapping(self) -> None:
        with pytest.raises(ContentError, match="mapping"):
            split_front_matter("---\n- a\n- b\n---\n")

    def test_error_carries_path(self) -> None:
        with pytest.raises(ContentError) as exc_info:
            split_front_matter("no header", "blog/x.md")

        assert exc_info.value.path == "blog/x.md"
        assert str(exc_info.value).startswith("blog/x.md:")


class TestSlugFor:
    def test_index_file_uses_directory(self, tmp_path: Path) -> None:
        assert slug_for(tmp_path / "hello-world" / "index.md", tmp_path) == "/hello-world/"

    def test_plain_file_uses_stem(self, tmp_path: Path) -> None:
        assert slug_for(tmp_path / "short-note.md", tmp_path) == "/short-note/"

    def test_nested_directories(self, tmp_path: Path) -> None:
        assert slug_for(tmp_path / "2020" / "post" / "index.md", tmp_path) == "/2020/post/"


class TestMarkdownPostSource:
    def test_parses_post(self, tmp_path: Path) -> None:
        write(
            tmp_path / "hello" / "index.md",
            "---\ntitle: Hello\ndate: 2020-01-30\ndescription: Hi there\n"
            "tags: [python, blogging]\n---\n\nSome **bold** words.\n",
        )
        source = MarkdownPostSource(tmp_path)

        [post] = source.load_posts()

        assert post.slug == "/hello/"
        assert post.title == "Hello"
        assert post.date == date(2020, 1, 30)
        assert post.description == "Hi there"
        assert post.tags == ["python", "blogging"]
        assert "<strong>" in post.html
        assert post.excerpt == "Some bold words."
        assert post.reading_time == "1 min read"

    def test_comma_separated_tags(self, tmp_path: Path) -> None:
        write(tmp_path / "a.md", "---\ndate: 2020-01-01\ntags: web, css\n---\nBody\n")

        [post] = MarkdownPostSource(tmp_path).load_posts()

        assert post.tags == ["web", "css"]

    def test_tags_must_be_a_list(self, tmp_path: Path) -> None:
        write(tmp_path / "a.md", "---\ndate: 2020-01-01\ntags: 5\n---\nBody\n")

        with pytest.raises(ContentError, match="tags must be a list"):
            MarkdownPostSource(tmp_path).load_posts()

    def test_slash_in_tag_becomes_dash(self, tmp_path: Path) -> None:
        write(tmp_path / "a.md", "---\ndate: 2020-01-01\ntags: [ci/cd, web]\n---\nBody\n")

        [post] = MarkdownPostSource(tmp_path).load_posts()

        assert post.tags == ["ci-cd", "web"]

    def test_string_date(self, tmp_path: Path) -> None:
        write(tmp_path / "a.md", '---\ndate: "2020-01-01T10:00:00Z"\n---\nBody\n')

        [post] = MarkdownPostSource(tmp_path).load_posts()

        assert post.date == date(2020, 1, 1)

    def test_missing_date_is_error(self, tmp_path: Path) -> None:
        write(tmp_path / "a.md", "---\ntitle: No date\n---\nBody\n")

        with pytest.raises(ContentError, match="date"):
            MarkdownPostSource(tmp_path).load_posts()

    def test_missing_front_matter_is_error(self, tmp_path: Path) -> None:
        write(tmp_path / "a.md", "# Title only\n")

        with pytest.raises(ContentError):
            MarkdownPostSource(tmp_path).load_posts()

    def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        assert MarkdownPostSource(tmp_path / "nope").load_posts() == []

    def test_cache_and_reload(self, tmp_path: Path) -> None:
        write(tmp_path / "a.md", "---\ndate: 2020-01-01\n---\nBody\n")
        source = MarkdownPostSource(tmp_path)
        assert len(source.load_posts()) == 1

        write(tmp_path / "b.md", "---\ndate: 2020-01-02\n---\nBody\n")
        assert len(source.load_posts()) == 1

        source.reload()
        assert len(source.load_posts()) == 2

    def test_cache_disabled_sees_new_files(self, tmp_path: Path) -> None:
        source = MarkdownPostSource(tmp_path, cache=False)
        write(tmp_path / "a.md", "---\ndate: 2020-01-01\n---\nBody\n")

        assert len(source.load_posts()) == 1


class TestYamlResourceSource:
    def test_loads_categories(self, tmp_path: Path) -> None:
        path = write(
            tmp_path / "resources.yaml",
            "categories:\n  - title: Canon\n    items:\n"
            "      - name: DDD\n        url: https://example.com\n",
        )

        [category] = YamlResourceSource(path).load_resources()

        assert category.title == "Canon"
        assert category.items[0].name == "DDD"
        assert category.items[0].description == ""

    def test_top_level_list(self, tmp_path: Path) -> None:
        path = write(tmp_path / "resources.yaml", "- title: Canon\n- title: React\n")

        categories = YamlResourceSource(path).load_resources()

        assert [c.title for c in categories] == ["Canon", "React"]

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert YamlResourceSource(tmp_path / "none.yaml").load_resources() == []

    def test_invalid_entries(self, tmp_path: Path) -> None:
        path = write(tmp_path / "resources.yaml", "categories:\n  - items: []\n")

        with pytest.raises(ContentError, match="invalid resources"):
            YamlResourceSource(path).load_resources()

    def test_scalar_top_level_is_error(self, tmp_path: Path) -> None:
        path = write(tmp_path / "resources.yaml", "5\n")

        with pytest.raises(ContentError, match="categories must be a list"):
            YamlResourceSource(path).load_resources()

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = write(tmp_path / "resources.yaml", "categories: [unclosed\n")

        with pytest.raises(ContentError, match="invalid YAML"):
            YamlResourceSource(path).load_resources()


class TestMarkdownAboutSource:
    def test_missing_file_gives_default_page(self, tmp_path: Path) -> None:
        page = MarkdownAboutSource(tmp_path / "about.md").load_about()

        assert page.heading == "Me"
        assert page.html == ""

    def test_front_matter_title(self, tmp_path: Path) -> None:
        path = write(tmp_path / "about.md", "---\ntitle: About Andrew\n---\nHello.\n")

        page = MarkdownAboutSource(path).load_about()

        assert page.heading == "About Andrew"
        assert "Hello." in page.html

    def test_blank_lines_before_front_matter(self, tmp_path: Path) -> None:
        path = write(tmp_path / "about.md", "\n\n---\ntitle: About Andrew\n---\nHello.\n")

        page = MarkdownAboutSource(path).load_about()

        assert page.heading == "About Andrew"
        assert "Hello." in page.html
        assert "title:" not in page.html

    def test_plain_markdown(self, tmp_path: Path) -> None:
        path = write(tmp_path / "about.md", "Just *text*.\n")

        page = MarkdownAboutSource(path).load_about()

        assert page.heading == "Me"
        assert "<em>" in page.html
