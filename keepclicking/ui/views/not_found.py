from __future__ import annotations

from keepclicking.ui.html import escape


def render_not_found(path: str) -> str:
    return f"""<h1>Not Found</h1>
<p>Nothing lives at <code>{escape(path)}</code>.</p>
<p><a href="/">Back to the posts</a></p>"""
