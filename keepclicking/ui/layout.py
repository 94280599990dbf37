"""
Page layout: header with site title and theme toggle, main, footer.

The layout is the theme store's subscriber. It reads the current variant
when it is created and follows every later change through subscribe(),
so a toggle during the same request renders the new state.
"""

from __future__ import annotations

import datetime as dt

from keepclicking.components.render import PageMetadata
from keepclicking.components.theme import ThemeStorePort
from keepclicking.domain.entities import ThemeVariant
from keepclicking.ui.components.toggle import (
    render_theme_script,
    render_toggle,
    render_toggle_placeholder,
)
from keepclicking.ui.html import escape, render_document


class Layout:
    def __init__(
        self,
        title: str,
        *,
        store: ThemeStorePort | None = None,
        root_path: str = "/",
        static_prefix: str = "/static",
        storage_key: str = "theme",
        cookie_max_age_seconds: int = 31536000,
        default_theme: ThemeVariant = "light",
        year: int | None = None,
    ) -> None:
        self.title = title
        self.root_path = root_path
        self.static_prefix = static_prefix
        self.storage_key = storage_key
        self.cookie_max_age_seconds = cookie_max_age_seconds
        self.default_theme = default_theme
        self.year = year
        self.theme: ThemeVariant | None = None

        if store is not None:
            self.theme = store.read()
            store.subscribe(self._on_theme_change)

    def _on_theme_change(self, theme: ThemeVariant) -> None:
        self.theme = theme

    def render_header(self, location_path: str) -> str:
        if location_path == self.root_path:
            heading = (
                f'<h1 class="site_title"><a href="{escape(self.root_path)}">'
                f"{escape(self.title)}</a></h1>"
            )
        else:
            heading = (
                f'<h3 class="site_title"><a class="article_title" href="{escape(self.root_path)}">'
                f"{escape(self.title)}</a></h3>"
            )

        if self.theme is not None:
            toggle = render_toggle(
                self.theme, next_path=location_path, static_prefix=self.static_prefix
            )
        else:
            toggle = render_toggle_placeholder()

        return f'<header class="site_header">\n{heading}\n{toggle}\n</header>'

    def render_footer(self) -> str:
        year = self.year or dt.date.today().year
        return (
            f"<footer>&copy; {year}, Powered by "
            f'<a id="framework_link" href="https://fastapi.tiangolo.com">FastAPI</a></footer>'
        )

    def render(self, location_path: str, body: str, metadata: PageMetadata) -> str:
        """Wrap a page body in the full document."""
        page = f"""<div class="layout">
{self.render_header(location_path)}
<main>
{body}
</main>
{self.render_footer()}
</div>"""

        return render_document(
            metadata,
            page,
            theme=self.theme or self.default_theme,
            head_extra=render_theme_script(self.storage_key, self.cookie_max_age_seconds),
            static_prefix=self.static_prefix,
        )
