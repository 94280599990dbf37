from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from keepclicking.api.main import create_app
from keepclicking.app_shell.context import ServiceContext
from keepclicking.config.loader import parse_config
from keepclicking.config.models import SiteConfig

SITE_YAML = """\
site:
  title: just keep clicking
  author: Andrew O'Brien
  description: dev thoughts
  site_url: https://example.com
  social:
    twitter: andrew
comments:
  disqus_shortname: test-blog
pages:
  about_slug: about-me
"""

POSTS = {
    "first-post/index.md": """\
---
title: First Post
date: 2020-01-01
tags: [meta]
---

Hello **world**. This is the very first post.
""",
    "second-post/index.md": """\
---
title: Second Post
date: 2020-02-01
description: The second one.
tags: [web, meta]
---

Second post body.
""",
    "third-post.md": """\
---
title: Third Post
date: 2020-03-01
tags: [web]
---

Third post body with `code`.
""",
}

RESOURCES_YAML = """\
categories:
  - title: Canon
    items:
      - name: Domain Driven Design
        url: https://example.com/ddd
        description: Shared language
      - name: The Mythical Man Month
        url: https://example.com/mmm
"""

ABOUT_MD = """\
---
title: Me
---

About the author.
"""


def write_site(root: Path, site_yaml: str = SITE_YAML) -> Path:
    """Write a small site (config plus content) under root; return the config path."""
    posts_dir = root / "content" / "blog"
    for rel, text in POSTS.items():
        path = posts_dir / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    (root / "content" / "resources.yaml").write_text(RESOURCES_YAML, encoding="utf-8")
    (root / "content" / "about.md").write_text(ABOUT_MD, encoding="utf-8")

    config_path = root / "site.yaml"
    config_path.write_text(site_yaml, encoding="utf-8")
    return config_path


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    write_site(tmp_path)
    return tmp_path


@pytest.fixture
def site_config() -> SiteConfig:
    return parse_config(SITE_YAML)


@pytest.fixture
def test_ctx(site_dir: Path, site_config: SiteConfig) -> ServiceContext:
    """A full ServiceContext over the temporary site."""
    return ServiceContext.create(site_config, site_dir)


@pytest.fixture
def client(test_ctx: ServiceContext) -> TestClient:
    return TestClient(create_app(test_ctx))
