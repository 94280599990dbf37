from __future__ import annotations

from keepclicking.domain.entities import SiteMetadata
from keepclicking.ui.html import escape


def render_bio(
    site: SiteMetadata,
    *,
    about_path: str,
    blurb: str = "dev thoughts of",
    static_prefix: str = "/static",
) -> str:
    """Author avatar with links to the about and resources pages."""
    twitter = ""
    if site.social.twitter:
        handle = site.social.twitter.lstrip("@")
        twitter = (
            f' <a class="bio_twitter" href="https://twitter.com/{escape(handle)}">'
            f"@{escape(handle)}</a>"
        )

    return f"""<div class="bio">
  <img class="bio_avatar" src="{escape(static_prefix)}/avatar.svg" alt="{escape(site.author)}"
    width="150" height="150" />
  <div class="bio_links">
    <p class="bio_description">{escape(blurb)} <br />
      <strong><a href="{escape(about_path)}">{escape(site.author)}</a></strong>{twitter}
    </p>
    <strong><a href="/resources/">modern developer resources</a></strong>
  </div>
</div>"""
