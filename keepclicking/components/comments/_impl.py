"""
Comments widget - Disqus embed for blog posts.

The widget is opaque: this module only supplies the page URL and the
page identifier, then injects Disqus' embed script.

Invariants:
- No shortname configured means no widget (empty markup)
- Values placed inside the inline script are JSON encoded
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass

SHORTNAME_RE = re.compile(r"^[a-z0-9-]+$")
EMBED_URL_TEMPLATE = "https://{shortname}.disqus.com/embed.js"


@dataclass(frozen=True)
class CommentsEmbed:
    """Everything the embed needs for one page."""

    shortname: str
    page_url: str
    identifier: str

    @property
    def script_src(self) -> str:
        return EMBED_URL_TEMPLATE.format(shortname=self.shortname)


def page_identifier(slug: str) -> str:
    """Identifier for a page: its slug without surrounding slashes."""
    return slug.strip("/") or "home"


def build_embed(shortname: str | None, site_url: str, slug: str) -> CommentsEmbed | None:
    """
    Build the embed parameters for a post.

    Returns None when comments are not configured.

    Raises:
        ValueError: If the shortname is not a valid Disqus shortname.
    """
    if not shortname:
        return None
    if not SHORTNAME_RE.match(shortname):
        raise ValueError(f"Invalid Disqus shortname {shortname!r}")

    path = slug if slug.startswith("/") else f"/{slug}"
    return CommentsEmbed(
        shortname=shortname,
        page_url=f"{site_url.rstrip('/')}{path}",
        identifier=page_identifier(slug),
    )


def _js_string(value: str) -> str:
    return json.dumps(value).replace("</", "<\\/")


def render_embed_html(embed: CommentsEmbed | None) -> str:
    """Render the comment thread container and loader script."""
    if embed is None:
        return ""

    return f"""<div id="disqus_thread"></div>
<script>
  var disqus_config = function () {{
    this.page.url = {_js_string(embed.page_url)};
    this.page.identifier = {_js_string(embed.identifier)};
  }};
  (function() {{
    var d = document, s = d.createElement('script');
    s.src = {_js_string(embed.script_src)};
    s.setAttribute('data-timestamp', +new Date());
    (d.head || d.body).appendChild(s);
  }})();
</script>
<noscript>
  Please enable JavaScript to view the
  <a href="https://disqus.com/?ref_noscript">comments powered by Disqus.</a>
</noscript>"""
