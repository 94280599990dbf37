from __future__ import annotations

from keepclicking.domain.entities import AboutPage
from keepclicking.ui.html import escape


def render_about(page: AboutPage) -> str:
    return f'<h1>{escape(page.heading)}</h1>\n<section class="about_body">\n{page.html}\n</section>'
